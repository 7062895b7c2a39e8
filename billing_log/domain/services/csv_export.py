"""CSV rendering for day and bulk exports.

The column layout is consumed by spreadsheets kept outside the application,
so headers, quoting and two-decimal formatting must not change.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import date

from billing_log.domain.constants import LOADING_LABEL
from billing_log.domain.models import (
    DayDetail,
    DayLineItemRow,
    TotalsResult,
    WorkWeek,
)
from billing_log.utils.decimal_utils import format_2dp

ITEM_COLUMNS = (
    "Item",
    "Minutes per Item",
    "Base Amount",
    "BBI Amount",
    "Count",
    "Subtotal",
)
TOTAL_COLUMNS = (
    "Total Minutes",
    "Total Hours",
    "Prelim with BBI",
    "Prelim without BBI",
    LOADING_LABEL,
    "Total Billings",
)
DAY_HEADER = ",".join(("Date", *ITEM_COLUMNS))
ALL_DAYS_HEADER = ",".join(("Work Week", "Date", *ITEM_COLUMNS, *TOTAL_COLUMNS))
ALL_DAYS_FILENAME = "billings_all_days.csv"


@dataclass(frozen=True)
class CsvExport:
    """Rendered CSV document with its download filename."""

    filename: str
    content: str


def day_csv_filename(day: date) -> str:
    return f"billings_{day.isoformat()}.csv"


def _quote(text: str) -> str:
    escaped = text.replace('"', '""')
    return f'"{escaped}"'


def _item_cells(item: DayLineItemRow) -> list[str]:
    return [
        _quote(item.item_label),
        str(item.minutes_per_unit),
        format_2dp(item.base_amount),
        format_2dp(item.secondary_amount),
        str(item.count),
        format_2dp(item.subtotal),
    ]


def _total_cells(totals: TotalsResult) -> list[str]:
    return [
        str(totals.total_minutes),
        str(totals.total_hours),
        format_2dp(totals.amount_with_secondary),
        format_2dp(totals.amount_without_secondary),
        format_2dp(totals.loading_amount),
        format_2dp(totals.grand_total),
    ]


def render_day_csv(detail: DayDetail) -> str:
    """Render a single day with its summary block.

    Args:
        detail: Day record and its line items.

    Returns:
        str: CSV text, lines joined with ``\\n``.
    """
    day_date = detail.day.date.isoformat()
    totals = detail.day.totals
    rows = [DAY_HEADER]
    for item in detail.billed_items:
        rows.append(",".join([day_date, *_item_cells(item)]))
    rows.append("")
    rows.append("Summary")
    for label, value in zip(TOTAL_COLUMNS, _total_cells(totals)):
        rows.append(f"{label},{value}")
    return "\n".join(rows)


def render_all_days_csv(
    weeks: Sequence[WorkWeek],
    items_by_day: Mapping[int, Sequence[DayLineItemRow]],
) -> str:
    """Render every billed line of every day, week by week.

    Args:
        weeks: Work weeks in display order.
        items_by_day: Line items keyed by day record id.

    Returns:
        str: CSV text, lines joined with ``\\n``.
    """
    rows = [ALL_DAYS_HEADER]
    for week in weeks:
        label = _quote(week.label)
        for day in week.days:
            totals = _total_cells(day.totals)
            for item in items_by_day.get(day.id, ()):
                if item.count <= 0:
                    continue
                rows.append(
                    ",".join(
                        [label, day.date.isoformat(), *_item_cells(item), *totals]
                    )
                )
    return "\n".join(rows)


__all__ = [
    "CsvExport",
    "DAY_HEADER",
    "ALL_DAYS_HEADER",
    "ALL_DAYS_FILENAME",
    "day_csv_filename",
    "render_day_csv",
    "render_all_days_csv",
]
