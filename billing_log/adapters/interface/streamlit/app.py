"""Streamlit interface for the daily billings log.

Pages:

* Calculator: enter item counts for a date, see live totals, save the day.
* Log: days grouped by work week with detail, delete and CSV export.
* Dashboard: monthly summaries, budget tracking and weekly billings chart.
"""

from collections.abc import Mapping, Sequence
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

import altair as alt
import streamlit as st

from billing_log.application.ports.billing_repository import (
    BillingRepositoryPort,
)
from billing_log.application.use_cases.delete_day import DeleteDayUseCase
from billing_log.application.use_cases.export_csv import (
    CsvExport,
    ExportAllCsvUseCase,
    ExportDayCsvUseCase,
)
from billing_log.application.use_cases.get_day_detail import (
    GetDayDetailUseCase,
)
from billing_log.application.use_cases.get_monthly_summaries import (
    GetMonthlySummariesUseCase,
)
from billing_log.application.use_cases.list_work_weeks import (
    ListWorkWeeksUseCase,
)
from billing_log.application.use_cases.save_day import SaveDayUseCase
from billing_log.application.use_cases.seed_sample_days import (
    SeedSampleDaysUseCase,
)
from billing_log.application.use_cases.set_monthly_budget import (
    SetMonthlyBudgetUseCase,
)
from billing_log.domain.catalog import group_line_items_by_category
from billing_log.domain.constants import LOADING_LABEL
from billing_log.domain.errors import (
    BillingLogError,
    ConflictError,
    ValidationError,
)
from billing_log.domain.models import (
    BudgetStatus,
    BudgetVariance,
    DayDetail,
    MonthSummary,
    TotalsResult,
    WorkWeek,
)
from billing_log.domain.services.calendar import month_key_of
from billing_log.domain.services.totals import compute_totals
from billing_log.infrastructure.container import build_billing_repository
from billing_log.infrastructure.logging.logger import get_usage_logger
from billing_log.infrastructure.settings import BillingSettings

PAGES = ("Calculator", "Log", "Dashboard")


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Check that the numpy/pandas imports Altair relies on are usable.

    Returns:
        Tuple of (ok, error message).
    """
    try:
        import numpy
        import pandas
    except ImportError as exc:
        return False, f"Altair dependencies are missing: {exc}"
    if not hasattr(numpy, "ndarray"):
        return False, "numpy import is incomplete (missing ndarray)."
    if not hasattr(pandas, "Timestamp"):
        return False, "pandas import is incomplete (missing Timestamp)."
    return True, None


@st.cache_resource(show_spinner=False)
def _get_repository() -> BillingRepositoryPort:
    """Build the repository once per Streamlit server process."""
    repository = build_billing_repository()
    if BillingSettings.from_env().seed_sample_data:
        SeedSampleDaysUseCase(repository).run()
    return repository


def _fetch_work_weeks() -> list[WorkWeek]:
    """Fetch logged days grouped by work week."""
    return ListWorkWeeksUseCase(_get_repository()).execute()


@st.cache_data(show_spinner=False)
def _load_work_weeks() -> list[WorkWeek]:
    """Cached wrapper around _fetch_work_weeks."""
    return _fetch_work_weeks()


def _fetch_monthly_summaries() -> list[MonthSummary]:
    """Fetch month summaries joined with budgets."""
    return GetMonthlySummariesUseCase(_get_repository()).execute()


@st.cache_data(show_spinner=False)
def _load_monthly_summaries() -> list[MonthSummary]:
    """Cached wrapper around _fetch_monthly_summaries."""
    return _fetch_monthly_summaries()


def _fetch_day_detail(day_id: int) -> DayDetail:
    """Fetch a day record with its line items."""
    return GetDayDetailUseCase(_get_repository()).execute(day_id)


def _fetch_day_csv(day_id: int) -> CsvExport:
    """Render the CSV export of a single day."""
    return ExportDayCsvUseCase(_get_repository()).execute(day_id)


def _fetch_all_csv() -> CsvExport:
    """Render the CSV export of every logged day."""
    return ExportAllCsvUseCase(_get_repository()).execute()


def _invalidate_caches() -> None:
    """Drop cached reads after a write."""
    st.cache_data.clear()


def _format_currency(value: Decimal) -> str:
    """Format currency values for display (AUD)."""
    rounded = Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,.2f}"


def _format_hours(totals: TotalsResult) -> str:
    """Format billed hours with the underlying minutes."""
    return f"{totals.total_hours}h ({totals.total_minutes} min)"


def _budget_status_text(variance: BudgetVariance) -> str:
    """Describe a budget variance, e.g. ``Over by $12.00 (4.0%)``."""
    if variance.status == BudgetStatus.ON_BUDGET:
        return "On Budget"
    direction = "Over" if variance.status == BudgetStatus.OVER else "Under"
    return (
        f"{direction} by {_format_currency(variance.difference)} "
        f"({variance.percent:.1f}%)"
    )


def _progress_fraction(variance: BudgetVariance) -> float:
    """Return budget progress clamped to [0, 1] for st.progress."""
    if variance.progress_percent is None:
        return 0.0
    return float(min(max(variance.progress_percent / 100, 0), 1))


def _totals_rows(totals: TotalsResult) -> list[dict[str, str]]:
    """Return label/value rows for a totals table."""
    return [
        {"Total": "Total Minutes", "Value": str(totals.total_minutes)},
        {"Total": "Total Hours", "Value": str(totals.total_hours)},
        {
            "Total": "Prelim with BBI",
            "Value": _format_currency(totals.amount_with_secondary),
        },
        {
            "Total": "Prelim without BBI",
            "Value": _format_currency(totals.amount_without_secondary),
        },
        {
            "Total": LOADING_LABEL,
            "Value": _format_currency(totals.loading_amount),
        },
        {
            "Total": "Total Billings",
            "Value": _format_currency(totals.grand_total),
        },
    ]


def _week_table_rows(week: WorkWeek) -> list[dict[str, str | int]]:
    """Return one display row per day of a work week."""
    return [
        {
            "Date": day.date.isoformat(),
            "Weekday": day.date.strftime("%A"),
            "Minutes": day.totals.total_minutes,
            "Hours": day.totals.total_hours,
            "Prelim with BBI": _format_currency(
                day.totals.amount_with_secondary
            ),
            "Total Billings": _format_currency(day.totals.grand_total),
        }
        for day in week.days
    ]


def _detail_table_rows(detail: DayDetail) -> list[dict[str, str | int]]:
    """Return one display row per billed item of a day."""
    return [
        {
            "Item": item.item_label,
            "Minutes": item.minutes_per_unit,
            "Base": _format_currency(item.base_amount),
            "BBI": _format_currency(item.secondary_amount),
            "Count": item.count,
            "Subtotal": _format_currency(item.subtotal),
        }
        for item in detail.billed_items
    ]


def _weekly_chart_data(
    weeks: Sequence[WorkWeek],
) -> list[dict[str, str | float]]:
    """Prepare Altair-ready rows, oldest week first."""
    return [
        {
            "week": week.monday.isoformat(),
            "label": week.label,
            "billings": float(week.totals.grand_total),
            "billings_label": _format_currency(week.totals.grand_total),
        }
        for week in reversed(weeks)
    ]


def _render_weekly_chart(weeks: Sequence[WorkWeek]) -> None:
    """Render a bar chart of billings per work week."""
    ok, message = _check_altair_dependencies()
    if not ok:
        st.warning(message)
        return
    data = _weekly_chart_data(weeks)
    if not data:
        st.info("No weeks logged yet.")
        return
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusTopLeft=4,
        cornerRadiusTopRight=4,
        color="#1b9aaa",
    ).encode(
        x=alt.X("week:N", title="Week starting", sort=None),
        y=alt.Y("billings:Q", title="Total billings ($)"),
        tooltip=[
            alt.Tooltip("label:N", title="Week"),
            alt.Tooltip("billings_label:N", title="Billings"),
        ],
    ).properties(height=320)
    st.subheader("Billings by Work Week")
    st.altair_chart(chart, use_container_width=True)


def _save_day(day: date, counts: Mapping[str, int]) -> None:
    """Save the calculator counts and report the outcome."""
    usage_logger = get_usage_logger()
    try:
        record = SaveDayUseCase(_get_repository()).execute(day, counts)
    except ConflictError as exc:
        usage_logger.warning(f"Duplicate save refused for {day}")
        st.warning(str(exc))
        return
    except ValidationError as exc:
        st.error(str(exc))
        return
    usage_logger.info(f"Saved day {record.date}")
    _invalidate_caches()
    st.success(
        f"Saved {record.date.isoformat()}: "
        f"{_format_currency(record.totals.grand_total)}"
    )


def _render_calculator() -> None:
    """Render the count entry form with live totals."""
    st.header("Calculator")
    selected_day = st.date_input("Date", value=date.today())

    counts: dict[str, int] = {}
    for category in group_line_items_by_category():
        st.subheader(category.name)
        columns = st.columns(3)
        for index, item in enumerate(category.items):
            with columns[index % 3]:
                counts[item.key] = int(
                    st.number_input(
                        item.label,
                        min_value=0,
                        step=1,
                        value=0,
                        key=f"count_{item.key}",
                        help=(
                            f"{item.minutes_per_unit} min | Base: "
                            f"{_format_currency(item.base_amount)} | BBI: "
                            f"{_format_currency(item.secondary_amount)}"
                        ),
                    )
                )

    totals = compute_totals(counts)
    total_col, prelim_col, loading_col, hours_col = st.columns(4)
    total_col.metric("Total Billings", _format_currency(totals.grand_total))
    prelim_col.metric(
        "Prelim with BBI",
        _format_currency(totals.amount_with_secondary),
    )
    loading_col.metric(LOADING_LABEL, _format_currency(totals.loading_amount))
    hours_col.metric("Hours", _format_hours(totals))

    if st.button("Save day", type="primary"):
        _save_day(selected_day, counts)


def _render_day(day_id: int) -> None:
    """Render detail, export and delete controls for a single day."""
    detail = _fetch_day_detail(day_id)
    rows = _detail_table_rows(detail)
    if rows:
        st.dataframe(rows, use_container_width=True, hide_index=True)
    else:
        st.caption("No billed items.")
    st.dataframe(
        _totals_rows(detail.day.totals),
        use_container_width=True,
        hide_index=True,
    )
    export = _fetch_day_csv(day_id)
    export_col, delete_col = st.columns(2)
    export_col.download_button(
        "Export CSV",
        data=export.content,
        file_name=export.filename,
        mime="text/csv",
        key=f"export_{day_id}",
    )
    if delete_col.button("Delete", key=f"delete_{day_id}"):
        usage_logger = get_usage_logger()
        if DeleteDayUseCase(_get_repository()).execute(day_id):
            usage_logger.info(f"Deleted day {detail.day.date}")
            _invalidate_caches()
            st.success(f"Deleted {detail.day.date.isoformat()}")
            st.rerun()
        else:
            st.warning("Day not found; it may already have been deleted.")


def _render_log() -> None:
    """Render work weeks, newest first, with per-day details."""
    st.header("Log")
    weeks = _load_work_weeks()
    if not weeks:
        st.info("No days logged yet. Save a day from the calculator.")
        return

    export_all = _fetch_all_csv()
    st.download_button(
        "Export All CSV",
        data=export_all.content,
        file_name=export_all.filename,
        mime="text/csv",
    )

    for week in weeks:
        title = (
            f"{week.label} | {len(week.days)} days | "
            f"{_format_currency(week.totals.grand_total)}"
        )
        with st.expander(title):
            st.dataframe(
                _week_table_rows(week),
                use_container_width=True,
                hide_index=True,
            )
            st.caption(
                f"Week totals: {_format_hours(week.totals)}, "
                f"prelim with BBI {_format_currency(week.totals.amount_with_secondary)}, "
                f"loading {_format_currency(week.totals.loading_amount)}"
            )
            selected = st.selectbox(
                "Day",
                options=[day.id for day in week.days],
                format_func=lambda day_id, days=week.days: next(
                    day.date.isoformat() for day in days if day.id == day_id
                ),
                key=f"day_select_{week.monday.isoformat()}",
            )
            if selected is not None:
                _render_day(selected)


def _render_budget_editor(summary: MonthSummary) -> None:
    """Render the budget input for a month."""
    amount = st.number_input(
        "Budget amount",
        min_value=0.0,
        step=100.0,
        value=float(summary.budget) if summary.budget is not None else 0.0,
        key=f"budget_{summary.month}",
    )
    label = "Edit Budget" if summary.budget is not None else "Set Budget"
    if st.button(label, key=f"save_budget_{summary.month}"):
        try:
            SetMonthlyBudgetUseCase(_get_repository()).execute(
                summary.month,
                str(amount),
            )
        except BillingLogError as exc:
            st.error(str(exc))
            return
        get_usage_logger().info(f"Budget set for {summary.month}")
        _invalidate_caches()
        st.success("Monthly budget has been updated.")
        st.rerun()


def _render_month_overview(summary: MonthSummary) -> None:
    """Render month-to-date metrics and budget progress."""
    billings_col, hours_col, average_col, budget_col = st.columns(4)
    day_word = "day" if summary.day_count == 1 else "days"
    billings_col.metric(
        "Month-to-Date Billings",
        _format_currency(summary.totals.grand_total),
        f"{summary.day_count} {day_word} logged",
        delta_color="off",
    )
    hours_col.metric(
        "Month-to-Date Hours",
        f"{summary.totals.total_hours}h",
        f"{summary.totals.total_minutes} total minutes",
        delta_color="off",
    )
    average_col.metric(
        "Average per Day",
        _format_currency(summary.average_per_day),
    )
    if summary.budget is None or summary.variance is None:
        budget_col.metric("Budget Status", "No budget set")
        return
    budget_col.metric(
        "Budget Status",
        _format_currency(summary.budget),
        _budget_status_text(summary.variance),
        delta_color="off",
    )
    st.progress(
        _progress_fraction(summary.variance),
        text=(
            f"{_format_currency(summary.totals.grand_total)} of "
            f"{_format_currency(summary.budget)}"
        ),
    )


def _render_dashboard() -> None:
    """Render monthly summaries and budget tracking."""
    st.header("Dashboard")
    summaries = _load_monthly_summaries()
    if not summaries:
        st.info(
            "No monthly data available yet. Save daily entries from the "
            "calculator to see monthly summaries here."
        )
        return

    months = [summary.month for summary in summaries]
    current_month = month_key_of(date.today())
    selected_month = st.selectbox(
        "Month",
        options=months,
        index=months.index(current_month) if current_month in months else 0,
        format_func=lambda month: next(
            summary.label for summary in summaries if summary.month == month
        ),
    )
    selected = next(s for s in summaries if s.month == selected_month)
    _render_month_overview(selected)

    _render_weekly_chart(_load_work_weeks())

    st.subheader("Monthly Summaries")
    for summary in summaries:
        with st.container(border=True):
            st.markdown(f"**{summary.label}**")
            total_col, prelim_col, budget_col = st.columns(3)
            total_col.metric(
                "Total Billings",
                _format_currency(summary.totals.grand_total),
            )
            prelim_col.metric(
                "Prelim with BBI",
                _format_currency(summary.totals.amount_with_secondary),
            )
            budget_col.metric(
                "Budget",
                _format_currency(summary.budget)
                if summary.budget is not None
                else "Not set",
            )
            if summary.variance is not None:
                st.caption(_budget_status_text(summary.variance))
            _render_budget_editor(summary)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Daily Billings Log", layout="wide")
    st.title("Daily Billings Log")

    page = st.sidebar.selectbox("Page", PAGES)
    get_usage_logger().info(f"Page view: {page}")
    if page == "Calculator":
        _render_calculator()
    elif page == "Log":
        _render_log()
    else:
        _render_dashboard()


if __name__ == "__main__":  # pragma: no cover
    main()
