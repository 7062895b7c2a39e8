"""Composition root for wiring infrastructure adapters."""

from billing_log.application.ports.billing_repository import (
    BillingRepositoryPort,
)
from billing_log.application.ports.database import DatabaseEnginePort
from billing_log.infrastructure.billing_repository import (
    SqlAlchemyBillingRepository,
)
from billing_log.infrastructure.db import SqlAlchemyDatabaseEngineAdapter


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_billing_repository(
    db_port: DatabaseEnginePort | None = None,
) -> BillingRepositoryPort:
    """Return the billings repository with its tables in place."""
    resolved_db = db_port or build_database_adapter()
    repository = SqlAlchemyBillingRepository(resolved_db)
    repository.prepare_storage()
    return repository


__all__ = [
    "build_database_adapter",
    "build_billing_repository",
]
