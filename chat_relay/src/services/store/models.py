"""ORM models for the users and chats tables."""

from datetime import datetime, timezone
from typing import Any, Dict

from sqlalchemy import Column, DateTime, Integer, String, Text

from chat_relay.src.services.store.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    """A registered user, keyed by the identifier derived from their email."""

    __tablename__ = "users"

    user_id = Column(String, primary_key=True)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)


class ChatExchange(Base):
    """One user message paired with the generated reply.

    Rows are written once per successful conversational turn and never updated.
    The user_id is not a foreign key; it only shares its value with users.user_id.
    """

    __tablename__ = "chats"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String, nullable=False, index=True)
    message = Column(Text, nullable=False)
    reply = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    def to_json(self) -> Dict[str, Any]:
        """Convert the exchange to the JSON shape returned by the API."""
        return {
            "id": self.id,
            "userId": self.user_id,
            "message": self.message,
            "reply": self.reply,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
