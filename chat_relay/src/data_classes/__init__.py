"""Data classes module.

Classes:
    - UserIdentity: Identity of a registered user
"""

from chat_relay.src.data_classes.user_identity import UserIdentity

__all__ = ["UserIdentity"]
