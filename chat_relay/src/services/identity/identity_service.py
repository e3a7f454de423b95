"""Service for mapping emails to user identities.

The identifier of a user is derived from their email, so the same email always
resolves to the same user on the chat platform and in the local store.
"""

import logging
import re

from chat_relay.src.data_classes import UserIdentity
from chat_relay.src.services.chat_platform import BaseChatPlatformService
from chat_relay.src.services.store import PersistenceService

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9_-]")


def derive_identifier(email: str) -> str:
    """Replace every character outside [A-Za-z0-9_-] with an underscore.

    Args:
        email: Email address as provided by the user

    Returns:
        str: Identifier shared by the chat platform and the store
    """
    return _UNSAFE_CHARS.sub("_", email)


class IdentityService:
    """Registers users and checks that they exist on both sides.

    The platform and the store are updated one after the other without a
    shared transaction. A failure between the two steps leaves the user on one
    side only, and the next registration completes the other side.

    Attributes:
        chat_platform (BaseChatPlatformService): External chat platform
        persistence (PersistenceService): Local relational store
    """

    def __init__(
        self, chat_platform: BaseChatPlatformService, persistence: PersistenceService
    ) -> None:
        self.chat_platform = chat_platform
        self.persistence = persistence

    def register(self, name: str, email: str) -> UserIdentity:
        """Ensure the user exists on the platform and in the store.

        Args:
            name: Display name
            email: Email address the identifier is derived from

        Returns:
            UserIdentity: The derived identity, whether new or pre-existing
        """
        user_id = derive_identifier(email)

        if not self.chat_platform.user_exists(user_id):
            self.chat_platform.upsert_user(user_id, name, email)

        if self.persistence.insert_user_if_missing(user_id, name, email):
            logger.info(f"User {user_id} not found in database, created new user")

        return UserIdentity(user_id=user_id, name=name, email=email)

    def exists(self, user_id: str) -> bool:
        """Check that both the platform and the store know the user."""
        if not self.chat_platform.user_exists(user_id):
            logger.warning(f"User {user_id} not found on chat platform")
            return False
        if self.persistence.get_user(user_id) is None:
            logger.warning(f"User {user_id} not found in database")
            return False
        return True
