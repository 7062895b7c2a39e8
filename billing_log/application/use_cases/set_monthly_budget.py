"""Use case to set the budget of a month."""

from billing_log.application.ports.billing_repository import (
    BillingRepositoryPort,
)
from billing_log.domain.models import MonthlyBudget
from billing_log.domain.services.validation import (
    validate_budget_amount,
    validate_month_key,
)
from billing_log.infrastructure.logging.logger import get_app_logger


class SetMonthlyBudgetUseCase:
    """Validate and upsert a monthly budget."""

    def __init__(self, repository: BillingRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, month: str, amount) -> MonthlyBudget:
        """Create or replace the budget for ``month``.

        Args:
            month: ``YYYY-MM`` month key.
            amount: Budget amount, a number >= 0.

        Raises:
            ValidationError: If the month or the amount is malformed.
        """
        month_key = validate_month_key(month)
        budget_amount = validate_budget_amount(amount)
        budget = self._repository.upsert_budget(month_key, budget_amount)
        self._logger.info(f"Budget for {month_key} set to {budget_amount}")
        return budget


__all__ = ["SetMonthlyBudgetUseCase"]
