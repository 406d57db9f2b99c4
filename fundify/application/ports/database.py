"""Database port for SQL-backed record stores."""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine of the record database."""

    def get_engine(self) -> Engine:
        """Get the engine for the record database.

        Returns:
            Engine: SQLAlchemy engine connected to the record database.
        """


__all__ = ["DatabaseEnginePort"]
