"""LLM service package."""

from .llm_service import (
    BaseLLMService,
    DeepseekLLMService,
    OpenAICompatibleLLMService,
    OpenAILLMService,
)

__all__ = [
    "BaseLLMService",
    "OpenAICompatibleLLMService",
    "DeepseekLLMService",
    "OpenAILLMService",
]
