"""Tests for input validation helpers."""

from datetime import date
from decimal import Decimal

import pytest

from billing_log.domain.errors import ValidationError
from billing_log.domain.services.validation import (
    parse_iso_date,
    validate_budget_amount,
    validate_counts,
    validate_month_key,
)


def test_parse_iso_date_accepts_padded_dates() -> None:
    assert parse_iso_date("2026-02-09") == date(2026, 2, 9)


@pytest.mark.parametrize(
    "value",
    ["2026-2-9", "09/02/2026", "2026-02-30", "", "2026-02-09T00:00"],
)
def test_parse_iso_date_rejects_malformed(value: str) -> None:
    with pytest.raises(ValidationError):
        parse_iso_date(value)


def test_validate_month_key() -> None:
    assert validate_month_key("2026-02") == "2026-02"
    with pytest.raises(ValidationError):
        validate_month_key("2026-13")
    with pytest.raises(ValidationError):
        validate_month_key("2026-2")


def test_validate_counts_returns_copy() -> None:
    counts = {"consult_a_90020": 2, "health_ax": 0}

    validated = validate_counts(counts)

    assert validated == counts
    assert validated is not counts


@pytest.mark.parametrize(
    "counts",
    [
        {"consult_a_90020": -1},
        {"consult_a_90020": 1.5},
        {"consult_a_90020": "2"},
        {"consult_a_90020": True},
    ],
)
def test_validate_counts_rejects_bad_values(counts) -> None:
    with pytest.raises(ValidationError):
        validate_counts(counts)


def test_validate_budget_amount() -> None:
    assert validate_budget_amount(1500) == Decimal("1500")
    assert validate_budget_amount("2500.50") == Decimal("2500.50")
    assert validate_budget_amount(0) == Decimal("0")


@pytest.mark.parametrize("value", [-1, "abc", None, float("nan"), True])
def test_validate_budget_amount_rejects_bad_values(value) -> None:
    with pytest.raises(ValidationError):
        validate_budget_amount(value)
