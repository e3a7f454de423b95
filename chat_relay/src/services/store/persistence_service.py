"""Service for storing and retrieving users and chat exchanges.

This module wraps the relational store behind a small typed interface. Every
call opens its own session, commits on success and rolls back on failure, so
callers never handle sessions directly.
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from chat_relay.src.services.store.models import ChatExchange, User

logger = logging.getLogger(__name__)


class PersistenceService:
    """Gateway to the users and chats tables.

    Attributes:
        session_factory (sessionmaker): Factory producing sessions bound to the store
    """

    def __init__(self, session_factory: sessionmaker) -> None:
        """Initialize the gateway with a session factory.

        Args:
            session_factory: SQLAlchemy session factory bound to an engine
        """
        self.session_factory = session_factory

    def get_user(self, user_id: str) -> Optional[User]:
        """Fetch the user row for the identifier, or None if absent."""
        with self.session_factory() as session:
            return session.get(User, user_id)

    def insert_user_if_missing(self, user_id: str, name: str, email: str) -> bool:
        """Insert a user row unless one with the same identifier exists.

        The insert relies on the primary key constraint, so two concurrent first
        registrations cannot both create a row.

        Args:
            user_id: Identifier derived from the email
            name: Display name
            email: Email address as provided at registration

        Returns:
            bool: True if a row was created, False if it already existed
        """
        with self.session_factory() as session:
            session.add(User(user_id=user_id, name=name, email=email))
            try:
                session.commit()
            except IntegrityError:
                session.rollback()
                logger.debug(f"User {user_id} already present in the store")
                return False
        logger.debug(f"Created user {user_id} in the store")
        return True

    def insert_exchange(self, user_id: str, message: str, reply: str) -> ChatExchange:
        """Persist one exchange and return the stored row."""
        exchange = ChatExchange(user_id=user_id, message=message, reply=reply)
        with self.session_factory() as session:
            session.add(exchange)
            try:
                session.commit()
            except Exception:
                session.rollback()
                raise
            session.refresh(exchange)
        logger.debug(f"Stored exchange {exchange.id} for user {user_id}")
        return exchange

    def recent_exchanges(self, user_id: str, limit: int) -> List[ChatExchange]:
        """Load the context window of exchanges for a user.

        The query orders by creation time ascending and then applies the limit,
        so when more than `limit` exchanges exist the oldest ones are returned.

        Args:
            user_id: Owner of the exchanges
            limit: Maximum number of rows to return

        Returns:
            List of exchanges, oldest first
        """
        stmt = (
            select(ChatExchange)
            .where(ChatExchange.user_id == user_id)
            .order_by(ChatExchange.created_at, ChatExchange.id)
            .limit(limit)
        )
        with self.session_factory() as session:
            return list(session.scalars(stmt).all())

    def list_exchanges(self, user_id: str) -> List[ChatExchange]:
        """Return every stored exchange for a user."""
        stmt = (
            select(ChatExchange)
            .where(ChatExchange.user_id == user_id)
            .order_by(ChatExchange.created_at, ChatExchange.id)
        )
        with self.session_factory() as session:
            return list(session.scalars(stmt).all())
