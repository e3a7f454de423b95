"""Middleware package for API request processing.

This module registers middleware functions for the API.
"""

from flask import Flask, request


def register_middleware(app: Flask) -> None:
    """Register middleware with the Flask application.

    Args:
        app: Flask application
    """
    from chat_relay.src.api.middleware.exceptions import ValidationError

    # Make flask-pydantic raise instead of building its own 400 body
    app.config.setdefault("FLASK_PYDANTIC_VALIDATION_ERROR_RAISE", True)

    @app.before_request
    def require_json_object() -> None:
        """Reject JSON bodies that are not objects, e.g. lists or strings."""
        body = request.get_json(silent=True)
        if body is not None and not isinstance(body, dict):
            raise ValidationError(
                message="Request body must be a JSON object",
                details=f"Got {type(body).__name__}",
            )

    from chat_relay.src.api.middleware.error_handler import register_error_handlers

    register_error_handlers(app)
