"""Use case to summarize logged days by month with budgets."""

from billing_log.application.ports.billing_repository import (
    BillingRepositoryPort,
)
from billing_log.domain.models import MonthSummary
from billing_log.domain.services.grouping import build_monthly_summaries


class GetMonthlySummariesUseCase:
    """Join monthly totals with the budgets stored for each month."""

    def __init__(self, repository: BillingRepositoryPort) -> None:
        self._repository = repository

    def execute(self) -> list[MonthSummary]:
        """Return month summaries, most recent month first."""
        return build_monthly_summaries(
            self._repository.list_days(),
            self._repository.list_budgets(),
        )


__all__ = ["GetMonthlySummariesUseCase"]
