"""Domain package for billing rules and core models."""

from .catalog import LINE_ITEMS, get_line_item, group_line_items_by_category
from .constants import BUDGET_EPSILON, LOADING_RATE
from .errors import (
    BillingLogError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from .models import (
    DayDetail,
    DayLineItemRow,
    DayRecord,
    LineItemDefinition,
    MonthlyBudget,
    MonthSummary,
    TotalsResult,
    WorkWeek,
)
from .services import (
    build_monthly_summaries,
    compute_totals,
    group_by_work_week,
    monday_of,
    month_key_of,
    sunday_of,
)

__all__ = [
    "LINE_ITEMS",
    "get_line_item",
    "group_line_items_by_category",
    "LOADING_RATE",
    "BUDGET_EPSILON",
    "BillingLogError",
    "ValidationError",
    "ConflictError",
    "NotFoundError",
    "LineItemDefinition",
    "TotalsResult",
    "DayRecord",
    "DayLineItemRow",
    "DayDetail",
    "MonthlyBudget",
    "MonthSummary",
    "WorkWeek",
    "compute_totals",
    "monday_of",
    "sunday_of",
    "month_key_of",
    "group_by_work_week",
    "build_monthly_summaries",
]
