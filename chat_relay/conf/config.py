"""Configuration module for the chat relay."""

import os
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean flag from the environment."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class ConfigMeta(type):
    """Metaclass to prevent direct instantiation and enforce singleton attributes."""

    def __call__(cls, *args: object, **kwargs: object) -> None:
        """Prevent direct instantiation."""
        raise TypeError("Config cannot be instantiated directly. Use class attributes.")


class Config(metaclass=ConfigMeta):
    """Singleton configuration class. Access attributes directly via the class."""

    # =========================================================================
    # Server Configuration
    # =========================================================================
    FLASK_PORT: int = int(os.getenv("PORT", "5000"))
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")

    # =========================================================================
    # Database Configuration
    # =========================================================================
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///chat_relay.db")
    DATABASE_ECHO: bool = _env_flag("DATABASE_ECHO")

    # =========================================================================
    # Stream Chat Configuration
    # =========================================================================
    STREAM_API_KEY: Optional[str] = os.getenv("STREAM_API_KEY")
    STREAM_API_SECRET: Optional[str] = os.getenv("STREAM_API_SECRET")
    STREAM_USER_ROLE: str = "user"
    STREAM_CHANNEL_TYPE: str = "messaging"
    STREAM_CHANNEL_PREFIX: str = "chat-"
    STREAM_CHANNEL_NAME: str = "AI Chat"
    STREAM_CHANNEL_CREATOR_ID: str = "ai_bot"
    STREAM_BOT_USER_ID: str = "deepseek_bot"

    # =========================================================================
    # Conversation Configuration
    # =========================================================================
    CONTEXT_WINDOW_SIZE: int = 10  # Stored exchanges sent along as context

    # =========================================================================
    # LLM Configuration
    # =========================================================================
    # Service selection
    LLM_SERVICE: str = os.getenv("LLM_SERVICE", "deepseek")  # Options: deepseek, openai
    VALID_LLM_SERVICES: List[str] = ["deepseek", "openai"]

    # Shared sampling settings
    LLM_TEMPERATURE: float = 0.1  # Near-deterministic replies
    LLM_MAX_TOKENS: int = 256

    # DeepSeek configuration
    DEEPSEEK_MODEL_NAME: str = "deepseek-chat"
    DEEPSEEK_BASE_URL: str = os.getenv("DEEPSEEK_BASE_URL", "https://api.deepseek.com/v1")
    DEEPSEEK_API_KEY: Optional[str] = os.getenv("DEEPSEEK_API_KEY")
    DEEPSEEK_FALLBACK_REPLY: str = "No response from DeepSeek"

    # OpenAI configuration
    OPENAI_MODEL_NAME: str = os.getenv("OPENAI_MODEL_NAME", "gpt-4o-mini")
    OPENAI_API_KEY: Optional[str] = os.getenv("OPENAI_API_KEY")
    OPENAI_FALLBACK_REPLY: str = "No response from OpenAI"

    # Validate LLM service selection
    if LLM_SERVICE not in VALID_LLM_SERVICES:
        raise ValueError(
            f"Invalid LLM service: {LLM_SERVICE}. Must be one of {VALID_LLM_SERVICES}"
        )
