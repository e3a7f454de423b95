"""Services package for backend functionality.

This package contains all service components for business logic.
"""

from .chat_platform import BaseChatPlatformService, StreamChatPlatformService
from .conversation import ConversationAssembler
from .factory import (
    create_chat_platform_service,
    create_conversation_assembler,
    create_identity_service,
    create_llm_service,
    create_persistence_service,
)
from .identity import IdentityService, derive_identifier
from .llm import BaseLLMService, DeepseekLLMService, OpenAILLMService
from .store import PersistenceService

__all__ = [
    # LLM Services
    "BaseLLMService",
    "DeepseekLLMService",
    "OpenAILLMService",
    # Chat platform
    "BaseChatPlatformService",
    "StreamChatPlatformService",
    # Other Services
    "ConversationAssembler",
    "IdentityService",
    "PersistenceService",
    "derive_identifier",
    # Factory Functions
    "create_chat_platform_service",
    "create_conversation_assembler",
    "create_identity_service",
    "create_llm_service",
    "create_persistence_service",
]
