"""Domain models package."""

from .billing import (
    DayDetail,
    DayLineItemRow,
    DayRecord,
    NewDayRecord,
    NewLineItemRow,
    TotalsResult,
)
from .catalog import LineItemCategory, LineItemDefinition
from .reporting import (
    BudgetStatus,
    BudgetVariance,
    MonthlyBudget,
    MonthSummary,
    WorkWeek,
)

__all__ = [
    "LineItemDefinition",
    "LineItemCategory",
    "TotalsResult",
    "DayRecord",
    "NewDayRecord",
    "NewLineItemRow",
    "DayLineItemRow",
    "DayDetail",
    "MonthlyBudget",
    "WorkWeek",
    "BudgetStatus",
    "BudgetVariance",
    "MonthSummary",
]
