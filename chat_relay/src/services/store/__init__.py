"""Storage services package.

This package provides storage-related services including:
- PersistenceService: relational storage for users and chat exchanges

Tables are declared with SQLAlchemy and accessed through short-lived sessions.
"""

from .database import Base, create_db_engine, create_session_factory, init_db
from .models import ChatExchange, User
from .persistence_service import PersistenceService

__all__ = [
    "Base",
    "ChatExchange",
    "PersistenceService",
    "User",
    "create_db_engine",
    "create_session_factory",
    "init_db",
]
