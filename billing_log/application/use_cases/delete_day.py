"""Use case to delete a day record."""

from billing_log.application.ports.billing_repository import (
    BillingRepositoryPort,
)
from billing_log.infrastructure.logging.logger import get_app_logger


class DeleteDayUseCase:
    """Delete a day record and, through the repository, its line items."""

    def __init__(self, repository: BillingRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, day_id: int) -> bool:
        """Delete the day; return False when it does not exist."""
        deleted = self._repository.delete_day(day_id)
        if deleted:
            self._logger.info(f"Deleted day {day_id}")
        else:
            self._logger.warning(f"Delete requested for missing day {day_id}")
        return deleted


__all__ = ["DeleteDayUseCase"]
