"""Service factory module for centralized service instantiation.

This module provides factory methods for creating service instances,
keeping service initialization logic in one place.
"""

import logging
from typing import Optional

from sqlalchemy.engine import Engine

from chat_relay.conf.config import Config
from chat_relay.src.services.chat_platform import (
    BaseChatPlatformService,
    StreamChatPlatformService,
)
from chat_relay.src.services.conversation import ConversationAssembler
from chat_relay.src.services.identity import IdentityService
from chat_relay.src.services.llm import (
    BaseLLMService,
    DeepseekLLMService,
    OpenAILLMService,
)
from chat_relay.src.services.store import (
    PersistenceService,
    create_db_engine,
    create_session_factory,
    init_db,
)

logger = logging.getLogger(__name__)


def create_persistence_service(
    engine: Optional[Engine] = None, create_tables: bool = True
) -> PersistenceService:
    """Create a PersistenceService bound to the configured database.

    Args:
        engine: Engine to use. If None, one is created from Config.DATABASE_URL
        create_tables: Whether to create missing tables

    Returns:
        Configured PersistenceService instance
    """
    if engine is None:
        engine = create_db_engine(Config.DATABASE_URL, echo=Config.DATABASE_ECHO)
    if create_tables:
        init_db(engine)
    return PersistenceService(create_session_factory(engine))


def create_chat_platform_service() -> BaseChatPlatformService:
    """Create the Stream Chat platform service from Config credentials."""
    return StreamChatPlatformService()


def create_llm_service() -> BaseLLMService:
    """Create and initialize the LLM service based on configuration."""
    try:
        if Config.LLM_SERVICE == "deepseek":
            return DeepseekLLMService()
        elif Config.LLM_SERVICE == "openai":
            return OpenAILLMService()
        else:
            raise ValueError(f"Unsupported LLM service: {Config.LLM_SERVICE}")
    except Exception as e:
        logger.error(f"Failed to create {Config.LLM_SERVICE} LLM service: {e}")
        raise e


def create_identity_service(
    chat_platform: BaseChatPlatformService, persistence: PersistenceService
) -> IdentityService:
    """Create an IdentityService over the platform and the store."""
    return IdentityService(chat_platform=chat_platform, persistence=persistence)


def create_conversation_assembler(
    persistence: PersistenceService,
) -> ConversationAssembler:
    """Create a ConversationAssembler using the configured context window."""
    return ConversationAssembler(
        persistence=persistence, window_size=Config.CONTEXT_WINDOW_SIZE
    )
