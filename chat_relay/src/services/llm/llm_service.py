"""Service module for interacting with large language models.

This module provides a high-level interface for the completion providers:
- DeepSeek: DeepSeek's API (via OpenAI SDK)
- OpenAI: OpenAI's chat completions API
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from openai import OpenAI
from openai.types.chat import ChatCompletion, ChatCompletionMessageParam

from chat_relay.conf.config import Config

logger = logging.getLogger(__name__)


class BaseLLMService(ABC):
    """Base class for LLM services.

    This abstract class defines the interface that all LLM services must implement.
    """

    @abstractmethod
    def complete(self, messages: List[ChatCompletionMessageParam]) -> str:
        """Generate a reply to a role-tagged conversation.

        Args:
            messages: Ordered conversation, ending with the new user message

        Returns:
            str: Reply text, or the provider's fallback text if the reply is empty

        Raises:
            RuntimeError: If the API call fails
        """


class OpenAICompatibleLLMService(BaseLLMService):
    """Shared implementation for providers that speak the OpenAI chat API.

    Attributes:
        client (OpenAI): SDK client pointed at the provider
        model_name (str): Model identifier sent with every request
        fallback_reply (str): Text returned when the provider sends no content
    """

    provider_name = "LLM"

    def __init__(
        self,
        client: OpenAI,
        model_name: str,
        fallback_reply: str,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> None:
        self.client = client
        self.model_name = model_name
        self.fallback_reply = fallback_reply
        self.temperature = Config.LLM_TEMPERATURE if temperature is None else temperature
        self.max_tokens = Config.LLM_MAX_TOKENS if max_tokens is None else max_tokens

    def complete(self, messages: List[ChatCompletionMessageParam]) -> str:
        """Generate a reply using the provider's chat completions endpoint.

        Args:
            messages: Ordered conversation, ending with the new user message

        Returns:
            str: Content of the first choice, or the fallback reply

        Raises:
            RuntimeError: If API call fails
        """
        try:
            response = self.client.chat.completions.create(
                model=self.model_name,
                messages=messages,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except Exception as e:
            logger.error(f"Error generating response from {self.provider_name}: {str(e)}")
            raise RuntimeError(f"Failed to generate response: {str(e)}") from e

        return self._extract_reply(response)

    def _extract_reply(self, response: ChatCompletion) -> str:
        if not response.choices or not response.choices[0].message.content:
            logger.warning(
                f"Empty response from {self.provider_name}, using fallback reply"
            )
            return self.fallback_reply
        return response.choices[0].message.content


class DeepseekLLMService(OpenAICompatibleLLMService):
    """Service for interacting with DeepSeek's API."""

    provider_name = "DeepSeek"

    def __init__(self, client: Optional[OpenAI] = None) -> None:
        """Initialize the DeepSeek LLM service.

        Args:
            client: Preconfigured SDK client. If None, one is built from Config
        """
        if client is None:
            if not Config.DEEPSEEK_API_KEY:
                raise ValueError(
                    "DeepSeek API key not found. Please set the DEEPSEEK_API_KEY environment variable."
                )
            client = OpenAI(
                api_key=Config.DEEPSEEK_API_KEY, base_url=Config.DEEPSEEK_BASE_URL
            )
        super().__init__(
            client=client,
            model_name=Config.DEEPSEEK_MODEL_NAME,
            fallback_reply=Config.DEEPSEEK_FALLBACK_REPLY,
        )
        logger.info(
            f"Initialized DeepSeek LLM service with model: {Config.DEEPSEEK_MODEL_NAME}"
        )


class OpenAILLMService(OpenAICompatibleLLMService):
    """Service for interacting with OpenAI's API."""

    provider_name = "OpenAI"

    def __init__(self, client: Optional[OpenAI] = None) -> None:
        """Initialize the OpenAI LLM service.

        Args:
            client: Preconfigured SDK client. If None, one is built from Config
        """
        if client is None:
            if not Config.OPENAI_API_KEY:
                raise ValueError(
                    "OpenAI API key not found. Please set the OPENAI_API_KEY environment variable."
                )
            client = OpenAI(api_key=Config.OPENAI_API_KEY)
        super().__init__(
            client=client,
            model_name=Config.OPENAI_MODEL_NAME,
            fallback_reply=Config.OPENAI_FALLBACK_REPLY,
        )
        logger.info(f"Initialized OpenAI LLM service with model: {Config.OPENAI_MODEL_NAME}")
