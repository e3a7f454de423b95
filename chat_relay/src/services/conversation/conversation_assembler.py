"""Builds the message sequence sent to the completion API."""

import logging
from typing import List, Optional

from openai.types.chat import ChatCompletionMessageParam

from chat_relay.conf.config import Config
from chat_relay.src.services.store import PersistenceService

logger = logging.getLogger(__name__)


class ConversationAssembler:
    """Turns stored exchanges into a role-tagged conversation.

    Attributes:
        persistence (PersistenceService): Store holding past exchanges
        window_size (int): Number of stored exchanges included as context
    """

    def __init__(
        self, persistence: PersistenceService, window_size: Optional[int] = None
    ) -> None:
        self.persistence = persistence
        self.window_size = (
            Config.CONTEXT_WINDOW_SIZE if window_size is None else window_size
        )

    def build_context(
        self, user_id: str, new_message: str
    ) -> List[ChatCompletionMessageParam]:
        """Render past exchanges plus the new message as chat messages.

        Each stored exchange contributes a user entry followed by an assistant
        entry. The window is taken from the store ordered by creation time and
        then limited, so users with more exchanges than the window size get
        their oldest exchanges as context.

        Args:
            user_id: Owner of the conversation
            new_message: Message being submitted in this turn

        Returns:
            List of role/content messages ending with the new user message
        """
        history = self.persistence.recent_exchanges(user_id, self.window_size)
        logger.debug(f"Loaded {len(history)} past exchanges for user {user_id}")

        messages: List[ChatCompletionMessageParam] = []
        for exchange in history:
            messages.append({"role": "user", "content": exchange.message})
            messages.append({"role": "assistant", "content": exchange.reply})
        messages.append({"role": "user", "content": new_message})
        return messages
