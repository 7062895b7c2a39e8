"""Use case to list day records grouped by work week."""

from billing_log.application.ports.billing_repository import (
    BillingRepositoryPort,
)
from billing_log.domain.models import WorkWeek
from billing_log.domain.services.grouping import group_by_work_week
from billing_log.infrastructure.logging.logger import get_app_logger


class ListWorkWeeksUseCase:
    """Group every logged day into Monday-to-Sunday weeks."""

    def __init__(self, repository: BillingRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self) -> list[WorkWeek]:
        """Return work weeks, most recent first."""
        days = self._repository.list_days()
        weeks = group_by_work_week(days)
        self._logger.info(
            f"Grouped {len(days)} days into {len(weeks)} work weeks"
        )
        return weeks


__all__ = ["ListWorkWeeksUseCase"]
