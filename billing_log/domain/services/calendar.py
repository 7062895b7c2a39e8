"""Calendar helpers: ISO work weeks and month keys."""

from datetime import date, datetime, timedelta

from billing_log.domain.errors import ValidationError
from billing_log.domain.services.validation import (
    parse_iso_date,
    validate_month_key,
)


def as_date(value: date | str) -> date:
    """Coerce a date, datetime or ISO string to a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(value)


def monday_of(value: date | str) -> date:
    """Return the Monday on or before ``value``.

    Weeks run Monday to Sunday, so a Sunday maps 6 days back.
    """
    day = as_date(value)
    return day - timedelta(days=day.weekday())


def sunday_of(monday: date | str) -> date:
    """Return the Sunday closing the week that starts on ``monday``.

    Raises:
        ValidationError: If ``monday`` is not a Monday.
    """
    day = as_date(monday)
    if day.weekday() != 0:
        raise ValidationError(f"{day.isoformat()} is not a Monday")
    return day + timedelta(days=6)


def week_label(monday: date | str) -> str:
    """Return ``"<monday> to <sunday>"`` for a work week."""
    start = as_date(monday)
    return f"{start.isoformat()} to {sunday_of(start).isoformat()}"


def month_key_of(value: date | str) -> str:
    """Return the ``YYYY-MM`` key of a date."""
    return as_date(value).strftime("%Y-%m")


def month_label(month_key: str) -> str:
    """Return a display label such as ``February 2026``."""
    validate_month_key(month_key)
    year, month = month_key.split("-")
    return date(int(year), int(month), 1).strftime("%B %Y")


__all__ = [
    "as_date",
    "monday_of",
    "sunday_of",
    "week_label",
    "month_key_of",
    "month_label",
]
