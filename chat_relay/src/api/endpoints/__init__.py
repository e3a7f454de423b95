"""API endpoints package.

This package contains endpoint definitions for the API.
"""

from flask import Flask

from chat_relay.src.api.endpoints.chat import init_chat_routes
from chat_relay.src.api.endpoints.health import health_bp
from chat_relay.src.api.endpoints.users import init_user_routes
from chat_relay.src.services import (
    BaseChatPlatformService,
    BaseLLMService,
    ConversationAssembler,
    IdentityService,
    PersistenceService,
)


def register_endpoints(
    app: Flask,
    identity_service: IdentityService,
    conversation_assembler: ConversationAssembler,
    llm_service: BaseLLMService,
    persistence_service: PersistenceService,
    chat_platform_service: BaseChatPlatformService,
) -> None:
    """Register all API endpoints with the application.

    Args:
        app: Flask application
        identity_service: Service for user registration and existence checks
        conversation_assembler: Service building LLM context from stored exchanges
        llm_service: Service generating replies
        persistence_service: Store for users and exchanges
        chat_platform_service: Platform receiving the replies
    """
    app.register_blueprint(init_user_routes(identity_service))

    app.register_blueprint(
        init_chat_routes(
            identity_service,
            conversation_assembler,
            llm_service,
            persistence_service,
            chat_platform_service,
        )
    )

    app.register_blueprint(health_bp)
