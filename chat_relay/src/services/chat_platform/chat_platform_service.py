"""Service module for the external chat platform.

The platform mirrors every registered user and receives each AI reply as a
message in a per-user channel. The Stream Chat server SDK is used as the
concrete platform.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from stream_chat import StreamChat

from chat_relay.conf.config import Config

logger = logging.getLogger(__name__)


def channel_id_for(user_id: str) -> str:
    """Return the channel identifier that carries the replies for a user."""
    return f"{Config.STREAM_CHANNEL_PREFIX}{user_id}"


class BaseChatPlatformService(ABC):
    """Base class for chat platform services."""

    @abstractmethod
    def user_exists(self, user_id: str) -> bool:
        """Check whether the platform knows a user with this identifier."""

    @abstractmethod
    def upsert_user(self, user_id: str, name: str, email: str) -> None:
        """Create or update the platform user."""

    @abstractmethod
    def deliver(self, user_id: str, text: str) -> None:
        """Publish a bot message into the user's channel.

        Args:
            user_id: Owner of the channel
            text: Message text to publish

        Raises:
            Exception: Any platform error, the caller decides how to report it
        """


class StreamChatPlatformService(BaseChatPlatformService):
    """Chat platform backed by Stream Chat.

    Attributes:
        client (StreamChat): Server-side Stream Chat client
    """

    def __init__(self, client: Optional[StreamChat] = None) -> None:
        """Initialize the Stream Chat service.

        Args:
            client: Preconfigured client. If None, one is built from Config
        """
        if client is None:
            if not Config.STREAM_API_KEY or not Config.STREAM_API_SECRET:
                raise ValueError(
                    "Stream credentials not found. Please set the STREAM_API_KEY and "
                    "STREAM_API_SECRET environment variables."
                )
            client = StreamChat(
                api_key=Config.STREAM_API_KEY, api_secret=Config.STREAM_API_SECRET
            )
        self.client = client
        logger.info("Initialized Stream Chat platform service")

    def user_exists(self, user_id: str) -> bool:
        response = self.client.query_users({"id": {"$eq": user_id}})
        return len(response["users"]) > 0

    def upsert_user(self, user_id: str, name: str, email: str) -> None:
        self.client.upsert_user(
            {
                "id": user_id,
                "name": name,
                "email": email,
                "role": Config.STREAM_USER_ROLE,
            }
        )
        logger.info(f"Upserted platform user {user_id}")

    def deliver(self, user_id: str, text: str) -> None:
        """Publish the reply into the user's channel as the bot user.

        Channel creation is a get-or-create call, so delivering into an existing
        channel does not fail.
        """
        channel = self.client.channel(
            Config.STREAM_CHANNEL_TYPE,
            channel_id_for(user_id),
            {
                "name": Config.STREAM_CHANNEL_NAME,
                "created_by_id": Config.STREAM_CHANNEL_CREATOR_ID,
            },
        )
        channel.create(Config.STREAM_CHANNEL_CREATOR_ID)
        channel.send_message({"text": text}, Config.STREAM_BOT_USER_ID)
        logger.debug(f"Delivered reply to channel {channel_id_for(user_id)}")
