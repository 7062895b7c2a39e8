"""Group day records into work weeks and months."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from billing_log.domain.constants import BUDGET_EPSILON
from billing_log.domain.models import (
    BudgetStatus,
    BudgetVariance,
    DayRecord,
    MonthlyBudget,
    MonthSummary,
    TotalsResult,
    WorkWeek,
)
from billing_log.domain.services.calendar import (
    month_key_of,
    month_label,
    monday_of,
    sunday_of,
)


def sum_totals(days: Iterable[DayRecord]) -> TotalsResult:
    """Field-wise sum of cached totals; no recomputation from counts."""
    return sum((day.totals for day in days), TotalsResult.zero())


def group_by_work_week(days: Iterable[DayRecord]) -> list[WorkWeek]:
    """Bucket day records into Monday-to-Sunday work weeks.

    Args:
        days: Day records in any order.

    Returns:
        list[WorkWeek]: Weeks sorted by Monday, most recent first. Members
        of each week are sorted ascending by date.
    """
    buckets: dict[date, list[DayRecord]] = {}
    for day in days:
        buckets.setdefault(monday_of(day.date), []).append(day)

    weeks = []
    for monday, members in buckets.items():
        ordered = tuple(sorted(members, key=lambda day: day.date))
        weeks.append(
            WorkWeek(
                monday=monday,
                sunday=sunday_of(monday),
                days=ordered,
                totals=sum_totals(ordered),
            )
        )
    return sorted(weeks, key=lambda week: week.monday, reverse=True)


def classify_budget(actual: Decimal, budget: Decimal) -> BudgetVariance:
    """Compare actual billings with a budget.

    Differences smaller than one cent count as on budget.
    """
    difference = actual - budget
    if abs(difference) < BUDGET_EPSILON:
        status = BudgetStatus.ON_BUDGET
    elif difference > 0:
        status = BudgetStatus.OVER
    else:
        status = BudgetStatus.UNDER
    if budget > 0:
        percent = abs(difference) / budget * 100
        progress = actual / budget * 100
    else:
        percent = Decimal("0")
        progress = None
    return BudgetVariance(
        status=status,
        difference=abs(difference),
        percent=percent,
        progress_percent=progress,
    )


def build_monthly_summaries(
    days: Iterable[DayRecord],
    budgets: Iterable[MonthlyBudget],
) -> list[MonthSummary]:
    """Bucket day records by month and join the month's budget.

    Returns:
        list[MonthSummary]: Months sorted descending by key.
    """
    buckets: dict[str, list[DayRecord]] = {}
    for day in days:
        buckets.setdefault(month_key_of(day.date), []).append(day)
    budget_by_month = {
        budget.month: budget.budget_amount for budget in budgets
    }

    summaries = []
    for month in sorted(buckets, reverse=True):
        members = buckets[month]
        totals = sum_totals(members)
        budget = budget_by_month.get(month)
        summaries.append(
            MonthSummary(
                month=month,
                label=month_label(month),
                day_count=len(members),
                totals=totals,
                budget=budget,
                variance=(
                    classify_budget(totals.grand_total, budget)
                    if budget is not None
                    else None
                ),
            )
        )
    return summaries


def available_months(days: Iterable[DayRecord]) -> list[str]:
    """Return distinct month keys, most recent first."""
    return sorted({month_key_of(day.date) for day in days}, reverse=True)


__all__ = [
    "sum_totals",
    "group_by_work_week",
    "classify_budget",
    "build_monthly_summaries",
    "available_months",
]
