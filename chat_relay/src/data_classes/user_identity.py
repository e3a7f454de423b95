"""User identity data class returned by registration."""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class UserIdentity:
    """Identity of a registered user.

    Attributes:
        user_id: Identifier derived from the email
        name: Display name given at registration
        email: Email address given at registration
    """

    user_id: str
    name: str
    email: str

    def to_json(self) -> Dict[str, str]:
        return {"userId": self.user_id, "name": self.name, "email": self.email}
