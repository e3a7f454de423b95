"""Custom exception types for the API.

This module defines the error taxonomy of the relay and the JSON error body
returned for each of them.
"""

from typing import Any, Dict, List, Optional, Tuple, Union

from flask import Response, jsonify
from pydantic import BaseModel, Field


class ErrorResponseModel(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Error message")
    details: Optional[Union[str, List[Dict[str, Any]]]] = Field(
        None, description="Additional error details"
    )
    status_code: int = Field(400, description="HTTP status code")


class APIError(Exception):
    """Base class for all API errors."""

    status_code = 500
    default_message = "An unexpected error occurred"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Union[str, List[Dict[str, Any]]]] = None,
    ):
        """Initialize the API error.

        Args:
            message: Custom error message (uses default_message if None)
            details: Additional error details
        """
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_response(self) -> Tuple[Response, int]:
        """Convert to Flask response."""
        error_model = ErrorResponseModel(
            error=self.message, details=self.public_details(), status_code=self.status_code
        )
        return jsonify(error_model.model_dump()), self.status_code

    def public_details(self) -> Optional[Union[str, List[Dict[str, Any]]]]:
        """Details that may be sent to the client."""
        return self.details


class ValidationError(APIError):
    """Error for missing or invalid request fields."""

    status_code = 400
    default_message = "Invalid request data"


class NotFoundError(APIError):
    """Error for a referenced user that does not exist."""

    status_code = 404
    default_message = "User not found"


class ServiceError(APIError):
    """Error from the store, the chat platform or the completion API.

    Details are logged by the error handler but never sent to the client.
    """

    status_code = 500
    default_message = "Internal Server Error"

    def public_details(self) -> None:
        return None
