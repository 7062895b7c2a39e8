"""Domain models for weekly and monthly reporting."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

from billing_log.domain.models.billing import DayRecord, TotalsResult


@dataclass(frozen=True)
class MonthlyBudget:
    """Budget amount for a month keyed ``YYYY-MM``."""

    month: str
    budget_amount: Decimal


@dataclass(frozen=True)
class WorkWeek:
    """Monday-to-Sunday grouping of day records.

    Attributes:
        monday: First day of the week; identifies the week.
        sunday: Monday + 6 days.
        days: Member records sorted ascending by date.
        totals: Field-wise sum of the members' cached totals.
    """

    monday: date
    sunday: date
    days: tuple[DayRecord, ...]
    totals: TotalsResult

    @property
    def label(self) -> str:
        """Return the ``<monday> to <sunday>`` label."""
        return f"{self.monday.isoformat()} to {self.sunday.isoformat()}"


class BudgetStatus(str, Enum):
    """Classification of actual billings against a budget."""

    ON_BUDGET = "on_budget"
    OVER = "over"
    UNDER = "under"


@dataclass(frozen=True)
class BudgetVariance:
    """Actual-versus-budget comparison.

    Attributes:
        status: On budget, over or under.
        difference: Absolute difference between actual and budget.
        percent: Absolute difference as a percentage of the budget.
        progress_percent: Actual as a percentage of budget, None when the
            budget is zero.
    """

    status: BudgetStatus
    difference: Decimal
    percent: Decimal
    progress_percent: Decimal | None


@dataclass(frozen=True)
class MonthSummary:
    """Aggregated totals for a calendar month."""

    month: str
    label: str
    day_count: int
    totals: TotalsResult
    budget: Decimal | None
    variance: BudgetVariance | None

    @property
    def average_per_day(self) -> Decimal:
        """Return total billings divided by the number of logged days."""
        if self.day_count == 0:
            return Decimal("0")
        return self.totals.grand_total / self.day_count


__all__ = [
    "MonthlyBudget",
    "WorkWeek",
    "BudgetStatus",
    "BudgetVariance",
    "MonthSummary",
]
