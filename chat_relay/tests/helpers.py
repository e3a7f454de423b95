"""Shared helpers for tests that need a real relational store."""

from chat_relay.src.services.store import (
    PersistenceService,
    create_db_engine,
    create_session_factory,
    init_db,
)


def in_memory_persistence() -> PersistenceService:
    """Create a PersistenceService over a fresh in-memory SQLite database."""
    engine = create_db_engine("sqlite://")
    init_db(engine)
    return PersistenceService(create_session_factory(engine))
