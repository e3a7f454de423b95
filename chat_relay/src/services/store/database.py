"""Database engine and session setup for the relational store."""

import logging
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from chat_relay.conf.config import Config

logger = logging.getLogger(__name__)

Base = declarative_base()


def create_db_engine(database_url: Optional[str] = None, echo: bool = False) -> Engine:
    """Create a SQLAlchemy engine for the given database URL.

    In-memory SQLite databases share a single connection so that every session
    sees the same tables.

    Args:
        database_url: Database URL. If None, uses Config.DATABASE_URL
        echo: Whether SQLAlchemy should log emitted SQL

    Returns:
        Engine: Configured SQLAlchemy engine
    """
    url = database_url or Config.DATABASE_URL
    if url in ("sqlite://", "sqlite:///:memory:"):
        return create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    if url.startswith("sqlite"):
        return create_engine(url, echo=echo, connect_args={"check_same_thread": False})
    return create_engine(url, echo=echo, pool_pre_ping=True)


def create_session_factory(engine: Engine) -> sessionmaker:
    """Create a session factory bound to the engine."""
    return sessionmaker(bind=engine, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    """Create the users and chats tables if they do not exist yet."""
    # Models must be imported so they register on Base.metadata
    from chat_relay.src.services.store import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info(f"Database tables ensured on {engine.url.render_as_string()}")
