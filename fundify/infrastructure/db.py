"""Database infrastructure for the SQL record store.

This module creates and reuses the SQLAlchemy engine behind
``SqlAlchemyRecordStore``. The URL comes from FUNDIFY_DB_URL and defaults
to a SQLite file in the project root.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool, StaticPool

from fundify.application.ports.database import DatabaseEnginePort
from fundify.utils.utils import get_project_root


_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def _get_db_url() -> str:
    """Read the database URL from the environment or a local .env file.

    Returns:
        str: Configured URL, or the default SQLite file URL.
    """
    dotenv.load_dotenv()
    value = os.getenv("FUNDIFY_DB_URL")
    if value:
        return value
    return f"sqlite:///{get_project_root() / 'fundify.db'}"


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    SQLite in-memory databases share one connection so every session sees
    the same data; server databases get a small pool with health checks.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: A SQLAlchemy engine instance.
    """
    if db_url in _MEMORY_URLS:
        return create_engine(
            db_url,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
            future=True,
        )
    if db_url.startswith("sqlite"):
        return create_engine(db_url, future=True)
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


def create_memory_engine() -> Engine:
    """Return a fresh in-memory SQLite engine."""
    return _create_engine("sqlite://")


_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the record database.

    Returns:
        Engine: Lazily initialized engine.
    """
    global _engine
    if _engine is None:
        _engine = _create_engine(_get_db_url())
    return _engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine."""

    def __init__(self, engine: Engine | None = None) -> None:
        """Initialize the adapter.

        Args:
            engine: Optional engine; the shared engine is used when omitted.
        """
        self._engine = engine

    def get_engine(self) -> Engine:
        """Get the engine for the record database.

        Returns:
            Engine: SQLAlchemy engine connected to the record database.
        """
        return self._engine or get_engine()


__all__ = [
    "create_memory_engine",
    "get_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
