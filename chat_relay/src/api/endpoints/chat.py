"""Chat endpoints module.

This module provides Flask routes for chat functionality including:
1. Submitting a message and relaying the generated reply
2. Listing the stored exchanges of a user
"""

import logging
import traceback
from typing import Tuple

from flask import Blueprint, Response, jsonify
from flask_pydantic import validate  # type: ignore

from chat_relay.src.api.endpoints.schemas import (
    ChatRequest,
    ChatResponseModel,
    MessagesRequest,
    MessagesResponseModel,
)
from chat_relay.src.api.middleware.exceptions import NotFoundError, ServiceError
from chat_relay.src.services import (
    BaseChatPlatformService,
    BaseLLMService,
    ConversationAssembler,
    IdentityService,
    PersistenceService,
)

logger = logging.getLogger(__name__)


def init_chat_routes(
    identity_service: IdentityService,
    conversation_assembler: ConversationAssembler,
    llm_service: BaseLLMService,
    persistence_service: PersistenceService,
    chat_platform_service: BaseChatPlatformService,
) -> Blueprint:
    """Initialize chat routes with the provided services.

    Args:
        identity_service: Service checking that the user exists.
        conversation_assembler: Service building the context for the LLM.
        llm_service: Service generating replies.
        persistence_service: Store for chat exchanges.
        chat_platform_service: Platform receiving the replies.

    Returns:
        Blueprint: Flask blueprint with configured chat routes.
    """
    chat_bp = Blueprint("chat", __name__)

    @chat_bp.route("/chat", methods=["POST"])
    @validate(get_json_params={"silent": True})
    def chat(body: ChatRequest) -> Tuple[Response, int]:  # type: ignore
        """Generate a reply, store the exchange and publish the reply.

        Steps run in order and stop at the first failure. Nothing done by an
        earlier step is undone, so a failed delivery leaves the stored exchange
        in place.

        Args:
            body: Validated request body

        Returns:
            Response with the generated reply
        """
        user_id = body.user_id

        try:
            user_known = identity_service.exists(user_id)
        except Exception as e:
            logger.error(f"Failed to look up user {user_id}: {str(e)}")
            logger.error(traceback.format_exc())
            raise ServiceError(details=str(e))

        if not user_known:
            raise NotFoundError()

        try:
            messages = conversation_assembler.build_context(user_id, body.message)
            reply = llm_service.complete(messages)
            persistence_service.insert_exchange(user_id, body.message, reply)
            chat_platform_service.deliver(user_id, reply)
        except Exception as e:
            logger.error(f"Failed to process chat for user {user_id}: {str(e)}")
            logger.error(traceback.format_exc())
            raise ServiceError(details=str(e))

        return jsonify(ChatResponseModel(reply=reply).model_dump()), 200

    @chat_bp.route("/get-messages", methods=["POST"])
    @validate(get_json_params={"silent": True})
    def get_messages(body: MessagesRequest) -> Tuple[Response, int]:  # type: ignore
        """Return every stored exchange of a user.

        Args:
            body: Validated request body

        Returns:
            Response with the list of exchanges, empty for unknown users
        """
        try:
            history = persistence_service.list_exchanges(body.user_id)
        except Exception as e:
            logger.error(f"Error fetching chat history: {str(e)}")
            logger.error(traceback.format_exc())
            raise ServiceError(details=str(e))

        response = MessagesResponseModel(
            messages=[exchange.to_json() for exchange in history]
        )
        return jsonify(response.model_dump()), 200

    return chat_bp
