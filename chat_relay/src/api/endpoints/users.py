"""User endpoints module.

This module provides the Flask route for registering users.
"""

import logging
import traceback
from typing import Tuple

from flask import Blueprint, Response, jsonify
from flask_pydantic import validate  # type: ignore

from chat_relay.src.api.endpoints.schemas import (
    RegisterUserRequest,
    RegisterUserResponseModel,
)
from chat_relay.src.api.middleware.exceptions import ServiceError
from chat_relay.src.services import IdentityService

logger = logging.getLogger(__name__)


def init_user_routes(identity_service: IdentityService) -> Blueprint:
    """Initialize user routes with the provided services.

    Args:
        identity_service: Service registering users on the platform and in the store

    Returns:
        Blueprint: Flask blueprint with configured user routes.
    """
    users_bp = Blueprint("users", __name__)

    @users_bp.route("/register-user", methods=["POST"])
    @validate(get_json_params={"silent": True})
    def register_user(body: RegisterUserRequest) -> Tuple[Response, int]:  # type: ignore
        """Register a user by name and email.

        Args:
            body: Validated request body

        Returns:
            Response with the derived user identity
        """
        try:
            identity = identity_service.register(body.name, body.email)
        except Exception as e:
            logger.error(f"Failed to register user: {str(e)}")
            logger.error(traceback.format_exc())
            raise ServiceError(details=str(e))

        response = RegisterUserResponseModel(**identity.to_json())
        return jsonify(response.model_dump(by_alias=True)), 200

    return users_bp
