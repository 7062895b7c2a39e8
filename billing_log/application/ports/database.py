"""Database port for the billings log.

Infrastructure implementations provide a concrete adapter satisfying this
protocol so use cases and repositories never read configuration directly.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the billings database engine."""

    def get_engine(self) -> Engine:
        """Get the engine for the billings database.

        Returns:
            Engine: SQLAlchemy engine connected to the billings store.
        """


__all__ = ["DatabaseEnginePort"]
