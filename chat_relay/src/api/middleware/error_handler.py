"""Error handling middleware for API requests.

This module provides error handling for API requests.
"""

import logging
import traceback
from typing import Any, Dict, List, Tuple

from flask import Flask, Response, current_app, jsonify
from flask_pydantic.exceptions import ValidationError as FlaskPydanticValidationError  # type: ignore
from pydantic import ValidationError as PydanticValidationError
from werkzeug.exceptions import HTTPException

from chat_relay.src.api.middleware.exceptions import APIError, ErrorResponseModel

logger = logging.getLogger(__name__)


def _validation_response(errors: List[Dict[str, Any]]) -> Tuple[Response, int]:
    # Convert Pydantic errors to a string representation for consistency
    error_details = "\n".join([str(e) for e in errors])
    response = ErrorResponseModel(
        error="Validation error", details=error_details, status_code=400
    )
    return jsonify(response.model_dump()), 400


def register_error_handlers(app: Flask) -> None:
    """Register error handlers with the Flask application.

    Args:
        app: Flask application
    """

    @app.errorhandler(PydanticValidationError)
    def handle_pydantic_validation_error(error: PydanticValidationError) -> Tuple[Response, int]:  # type: ignore
        """Handle Pydantic validation errors.

        Args:
            error: Validation error from Pydantic

        Returns:
            JSON response with error details
        """
        logger.warning(f"Validation error: {error}")
        return _validation_response(list(error.errors()))

    @app.errorhandler(FlaskPydanticValidationError)
    def handle_request_validation_error(error: FlaskPydanticValidationError) -> Tuple[Response, int]:  # type: ignore
        """Handle request validation errors raised by flask-pydantic.

        Args:
            error: Validation error carrying the failing body/query/path params

        Returns:
            JSON response with error details
        """
        logger.warning(f"Request validation error: {error}")
        errors: List[Dict[str, Any]] = []
        for location in ("body_params", "form_params", "path_params", "query_params"):
            errors.extend(getattr(error, location, None) or [])
        return _validation_response(errors)

    @app.errorhandler(APIError)
    def handle_api_error(error: APIError) -> Tuple[Response, int]:  # type: ignore
        """Handle custom API errors.

        Args:
            error: Custom API error

        Returns:
            JSON response with error details
        """
        if error.status_code >= 500:
            logger.error(f"API error ({error.__class__.__name__}): {error.message}")
            if error.details:
                logger.error(f"Error details: {error.details}")
        else:
            logger.warning(f"API error ({error.__class__.__name__}): {error.message}")

        return error.to_response()

    @app.errorhandler(HTTPException)
    def handle_http_exception(error: HTTPException) -> Tuple[Response, int]:  # type: ignore
        """Handle Werkzeug HTTP errors such as unknown routes or bad JSON."""
        status_code = error.code or 500
        logger.warning(f"HTTP error {status_code}: {error.description}")
        response = ErrorResponseModel(
            error=error.name, details=error.description, status_code=status_code
        )
        return jsonify(response.model_dump()), status_code

    @app.errorhandler(Exception)
    def handle_exception(error: Exception) -> Tuple[Response, int]:  # type: ignore
        """Handle uncaught exceptions.

        Args:
            error: Exception that was raised

        Returns:
            JSON response with error message
        """
        logger.error(f"Unhandled exception: {str(error)}")
        logger.error(traceback.format_exc())

        # Only include detailed error info in debug mode
        details = str(error) if current_app.debug else None

        response = ErrorResponseModel(
            error="Internal Server Error", details=details, status_code=500
        )
        return jsonify(response.model_dump()), 500
