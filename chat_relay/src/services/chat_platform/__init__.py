"""Chat platform service package."""

from .chat_platform_service import (
    BaseChatPlatformService,
    StreamChatPlatformService,
    channel_id_for,
)

__all__ = ["BaseChatPlatformService", "StreamChatPlatformService", "channel_id_for"]
