"""Domain services package."""

from .calendar import month_key_of, month_label, monday_of, sunday_of, week_label
from .grouping import (
    available_months,
    build_monthly_summaries,
    classify_budget,
    group_by_work_week,
)
from .totals import compute_totals, line_subtotal
from .validation import (
    parse_iso_date,
    validate_budget_amount,
    validate_counts,
    validate_month_key,
)

__all__ = [
    "compute_totals",
    "line_subtotal",
    "monday_of",
    "sunday_of",
    "week_label",
    "month_key_of",
    "month_label",
    "group_by_work_week",
    "build_monthly_summaries",
    "classify_budget",
    "available_months",
    "parse_iso_date",
    "validate_counts",
    "validate_month_key",
    "validate_budget_amount",
]
