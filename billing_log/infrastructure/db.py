"""Database infrastructure for the billings log.

This module creates and reuses the SQLAlchemy engine connected to the
billings database and declares the tables the repository works with.
"""

from typing import Optional

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    UniqueConstraint,
    create_engine,
    event,
)
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from billing_log.application.ports.database import DatabaseEnginePort
from billing_log.infrastructure.settings import BillingSettings

metadata = MetaData()

# Scale 6 holds 6.25% of any two-decimal amount exactly.
_Money = Numeric(14, 6, asdecimal=True)

daily_totals = Table(
    "daily_totals",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("date", Date, nullable=False, unique=True),
    Column("total_billings", _Money, nullable=False),
    Column("prelim_with_bbi", _Money, nullable=False),
    Column("prelim_without_bbi", _Money, nullable=False),
    Column("loading_625", _Money, nullable=False),
    Column("total_minutes", Integer, nullable=False),
    Column("total_hours", Integer, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
)

daily_line_items = Table(
    "daily_line_items",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "daily_total_id",
        Integer,
        ForeignKey("daily_totals.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("item_key", String(64), nullable=False),
    Column("item_label", String(128), nullable=False),
    Column("minutes_per_item", Integer, nullable=False),
    Column("base_amount", _Money, nullable=False),
    Column("bbi_amount", _Money, nullable=False),
    Column("count", Integer, nullable=False),
    UniqueConstraint("daily_total_id", "item_key"),
)

monthly_budgets = Table(
    "monthly_budgets",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("month", String(7), nullable=False, unique=True),
    Column("budget", _Money, nullable=False),
)


def enable_sqlite_foreign_keys(engine: Engine) -> Engine:
    """Turn on foreign key enforcement for every SQLite connection.

    Args:
        engine: Engine to configure; non-SQLite engines are left untouched.

    Returns:
        Engine: The same engine.
    """
    if engine.dialect.name != "sqlite":
        return engine

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, _connection_record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine. Server databases get a small pool with
        health checks; SQLite files get foreign keys enabled.
    """
    if db_url.startswith("sqlite"):
        engine = create_engine(
            db_url,
            connect_args={"check_same_thread": False},
            future=True,
        )
        return enable_sqlite_foreign_keys(engine)
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the billings database.

    Returns:
        Engine: Lazily initialized engine.
    """
    global _engine
    if _engine is None:
        settings = BillingSettings.from_env()
        _engine = _create_engine(settings.database_url)
    return _engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so repositories can depend only on the protocol.
    """

    def __init__(self, engine: Engine | None = None) -> None:
        """Initialize the adapter.

        Args:
            engine: Optional engine override; defaults to the singleton.
        """
        self._engine = engine

    def get_engine(self) -> Engine:
        """Get the engine for the billings database.

        Returns:
            Engine: SQLAlchemy engine connected to the billings store.
        """
        if self._engine is not None:
            return self._engine
        return get_engine()


__all__ = [
    "metadata",
    "daily_totals",
    "daily_line_items",
    "monthly_budgets",
    "enable_sqlite_foreign_keys",
    "get_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
