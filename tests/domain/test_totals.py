"""Tests for the totals engine."""

from decimal import Decimal

from billing_log.domain.catalog import LINE_ITEMS
from billing_log.domain.constants import LOADING_RATE
from billing_log.domain.models import TotalsResult
from billing_log.domain.services.totals import (
    compute_totals,
    hours_for_minutes,
    line_subtotal,
)


def test_single_consult_totals() -> None:
    """Two A consults should produce the documented totals."""
    totals = compute_totals({"consult_a_90020": 2})

    assert totals.total_minutes == 4
    assert totals.total_hours == 1
    assert totals.amount_with_secondary == Decimal("57.30")
    assert totals.amount_without_secondary == Decimal("40.10")
    assert totals.loading_amount == Decimal("2.50625")
    assert totals.grand_total == Decimal("59.80625")
    assert totals.grand_total.quantize(Decimal("0.01")) == Decimal("59.81")


def test_empty_counts_return_zero_totals() -> None:
    """An empty count map should yield zero everywhere."""
    assert compute_totals({}) == TotalsResult.zero()


def test_mixed_day_totals() -> None:
    """A full sample day should aggregate every catalog line."""
    totals = compute_totals(
        {
            "facilities_visited": 1,
            "consult_a_90020": 4,
            "consult_b_90035": 6,
            "consult_c_90043": 2,
            "rmmr_standalone": 1,
        }
    )

    assert totals.total_minutes == 94
    assert totals.total_hours == 2
    assert totals.amount_with_secondary == Decimal("949.85")
    assert totals.amount_without_secondary == Decimal("701.25")
    assert totals.loading_amount == Decimal("43.828125")
    assert totals.grand_total == Decimal("993.678125")


def test_unknown_keys_are_ignored() -> None:
    """Keys outside the catalog should not change the result."""
    base = compute_totals({"health_ax": 1})
    with_unknown = compute_totals({"health_ax": 1, "not_an_item": 50})

    assert with_unknown == base


def test_input_order_does_not_matter() -> None:
    """Catalog-driven iteration makes key order irrelevant."""
    forward = compute_totals({"mdt_739": 3, "consult_e_5077": 1})
    backward = compute_totals({"consult_e_5077": 1, "mdt_739": 3})

    assert forward == backward


def test_invariants_hold_for_varied_inputs() -> None:
    """Grand total and hours rules should hold for any count map."""
    samples = [
        {"facilities_visited": 3},
        {"consult_b_ah_5028": 1, "urgent_unsociable_599": 2},
        {item.key: 1 for item in LINE_ITEMS},
        {"consult_e_90054": 1},
    ]
    for counts in samples:
        totals = compute_totals(counts)
        assert totals.grand_total == (
            totals.amount_with_secondary
            + LOADING_RATE * totals.amount_without_secondary
        )
        assert totals.loading_amount == (
            LOADING_RATE * totals.amount_without_secondary
        )
        assert (totals.total_hours == 0) == (totals.total_minutes == 0)


def test_facilities_only_has_no_hours() -> None:
    """Facilities carry an amount but no minutes."""
    totals = compute_totals({"facilities_visited": 2})

    assert totals.total_minutes == 0
    assert totals.total_hours == 0
    assert totals.grand_total == Decimal("128.30") + Decimal("8.01875")


def test_compute_totals_is_idempotent() -> None:
    """Computing twice from the same input gives identical results."""
    counts = {"consult_c_5049": 2, "rmmr_cobilled": 1}

    assert compute_totals(counts) == compute_totals(counts)
    assert counts == {"consult_c_5049": 2, "rmmr_cobilled": 1}


def test_hours_round_up_partial_hours() -> None:
    """Hours are the ceiling of minutes over sixty."""
    assert hours_for_minutes(0) == 0
    assert hours_for_minutes(1) == 1
    assert hours_for_minutes(60) == 1
    assert hours_for_minutes(61) == 2


def test_line_subtotal_includes_secondary_amount() -> None:
    """Subtotals use base plus BBI amounts."""
    assert line_subtotal(3, Decimal("43.90"), Decimal("25.70")) == Decimal(
        "208.80"
    )


def test_totals_addition_is_field_wise() -> None:
    """TotalsResult addition should sum each field."""
    left = compute_totals({"consult_a_90020": 2})
    right = compute_totals({"health_ax": 1})

    combined = left + right

    assert combined.total_minutes == 64
    assert combined.total_hours == left.total_hours + right.total_hours
    assert combined.grand_total == left.grand_total + right.grand_total
