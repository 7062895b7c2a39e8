"""Domain validation helpers for user-supplied values."""

import re
from collections.abc import Mapping
from datetime import date
from decimal import Decimal, InvalidOperation

from billing_log.domain.errors import ValidationError

ISO_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
MONTH_KEY_PATTERN = re.compile(r"\d{4}-(0[1-9]|1[0-2])")


def parse_iso_date(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` string.

    Args:
        value: Raw date string.

    Returns:
        date: Parsed calendar date.

    Raises:
        ValidationError: If the format or the calendar date is invalid.
    """
    if not isinstance(value, str) or not ISO_DATE_PATTERN.fullmatch(value):
        raise ValidationError("Date must be YYYY-MM-DD format")
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise ValidationError(f"Invalid calendar date: {value}") from exc


def validate_month_key(value: str) -> str:
    """Return ``value`` when it is a ``YYYY-MM`` month key.

    Raises:
        ValidationError: If the month key is malformed.
    """
    if not isinstance(value, str) or not MONTH_KEY_PATTERN.fullmatch(value):
        raise ValidationError("Month must be YYYY-MM format")
    return value


def validate_counts(counts: Mapping[str, int]) -> dict[str, int]:
    """Check that every count is a non-negative integer.

    Args:
        counts: Mapping of item key to count.

    Returns:
        dict[str, int]: A fresh copy of the counts.

    Raises:
        ValidationError: If a key is not a string or a count is invalid.
    """
    if not isinstance(counts, Mapping):
        raise ValidationError("Counts must be a mapping of item key to count")
    validated: dict[str, int] = {}
    for key, count in counts.items():
        if not isinstance(key, str):
            raise ValidationError(f"Item key must be a string: {key!r}")
        if isinstance(count, bool) or not isinstance(count, int):
            raise ValidationError(f"Count for {key} must be an integer")
        if count < 0:
            raise ValidationError(f"Count for {key} must be non-negative")
        validated[key] = count
    return validated


def validate_budget_amount(value) -> Decimal:
    """Normalize a budget amount to a non-negative Decimal.

    Raises:
        ValidationError: If the amount is not a finite number >= 0.
    """
    if isinstance(value, bool) or value is None:
        raise ValidationError("Budget must be a number")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as exc:
        raise ValidationError(f"Budget must be a number: {value!r}") from exc
    if not amount.is_finite():
        raise ValidationError("Budget must be a finite number")
    if amount < 0:
        raise ValidationError("Budget must be a positive number")
    return amount


__all__ = [
    "parse_iso_date",
    "validate_month_key",
    "validate_counts",
    "validate_budget_amount",
]
