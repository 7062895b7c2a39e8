"""Use case to read a day record with its line items."""

from billing_log.application.ports.billing_repository import (
    BillingRepositoryPort,
)
from billing_log.domain.errors import NotFoundError
from billing_log.domain.models import DayDetail


class GetDayDetailUseCase:
    """Return a day record together with its per-item rows."""

    def __init__(self, repository: BillingRepositoryPort) -> None:
        self._repository = repository

    def execute(self, day_id: int) -> DayDetail:
        """Return the detail for ``day_id``.

        Raises:
            NotFoundError: If no day has this id.
        """
        day = self._repository.get_day(day_id)
        if day is None:
            raise NotFoundError(f"Day {day_id} not found")
        return DayDetail(day=day, items=self._repository.list_line_items(day_id))


__all__ = ["GetDayDetailUseCase"]
