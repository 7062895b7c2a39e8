"""Application port for day records, line items and budgets."""

from datetime import date
from decimal import Decimal
from typing import Protocol

from billing_log.domain.models import (
    DayLineItemRow,
    DayRecord,
    MonthlyBudget,
    NewDayRecord,
    NewLineItemRow,
)


class BillingRepositoryPort(Protocol):
    """Port exposing persistence of the billings log."""

    def prepare_storage(self) -> None:
        """Ensure the backing tables exist."""

    def list_days(self) -> list[DayRecord]:
        """Return every day record, most recent date first."""

    def get_day(self, day_id: int) -> DayRecord | None:
        """Return the day record with ``day_id`` or None."""

    def get_day_by_date(self, day: date) -> DayRecord | None:
        """Return the day record for ``day`` or None."""

    def create_day(
        self,
        day: NewDayRecord,
        line_items: list[NewLineItemRow],
    ) -> DayRecord:
        """Insert a day and its line items in one transaction.

        Raises:
            ConflictError: If a record already exists for the date. Nothing
                is written in that case.
        """

    def delete_day(self, day_id: int) -> bool:
        """Delete a day and its line items; False when it does not exist."""

    def list_line_items(self, day_id: int) -> list[DayLineItemRow]:
        """Return the line items of a day in catalog order."""

    def list_budgets(self) -> list[MonthlyBudget]:
        """Return every monthly budget, most recent month first."""

    def get_budget(self, month: str) -> MonthlyBudget | None:
        """Return the budget for a ``YYYY-MM`` month or None."""

    def upsert_budget(self, month: str, amount: Decimal) -> MonthlyBudget:
        """Create or replace the budget for a month."""


__all__ = ["BillingRepositoryPort"]
