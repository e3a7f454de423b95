"""Core API setup and configuration.

This module configures API middleware, error handling, and other global API components.
"""

import logging

from flask import Flask

from chat_relay.src.api.endpoints import register_endpoints
from chat_relay.src.api.middleware import register_middleware
from chat_relay.src.services import (
    BaseChatPlatformService,
    BaseLLMService,
    ConversationAssembler,
    IdentityService,
    PersistenceService,
)

logger = logging.getLogger(__name__)


def setup_api(
    app: Flask,
    identity_service: IdentityService,
    conversation_assembler: ConversationAssembler,
    llm_service: BaseLLMService,
    persistence_service: PersistenceService,
    chat_platform_service: BaseChatPlatformService,
) -> None:
    """Set up API with middleware and endpoints.

    Args:
        app: Flask application
        identity_service: Service for user registration and existence checks
        conversation_assembler: Service building LLM context from stored exchanges
        llm_service: Service generating replies
        persistence_service: Store for users and exchanges
        chat_platform_service: Platform receiving the replies
    """
    # Register middleware
    register_middleware(app)

    # Register endpoints
    register_endpoints(
        app,
        identity_service,
        conversation_assembler,
        llm_service,
        persistence_service,
        chat_platform_service,
    )
