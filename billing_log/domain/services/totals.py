"""Totals engine: turn item counts into time and currency totals."""

import math
from collections.abc import Mapping
from decimal import Decimal

from billing_log.domain.catalog import LINE_ITEMS
from billing_log.domain.constants import LOADING_RATE, MINUTES_PER_HOUR
from billing_log.domain.models.billing import TotalsResult


def compute_totals(counts: Mapping[str, int]) -> TotalsResult:
    """Compute totals for a sparse count map.

    The catalog drives the iteration, so keys absent from ``counts`` count as
    zero and keys unknown to the catalog are ignored. Counts are expected to
    be non-negative integers; validation happens before this call.

    Args:
        counts: Mapping of catalog item key to count.

    Returns:
        TotalsResult: Minutes, hours and currency aggregates.
    """
    total_minutes = 0
    amount_with_secondary = Decimal("0")
    amount_without_secondary = Decimal("0")

    for item in LINE_ITEMS:
        count = counts.get(item.key) or 0
        total_minutes += count * item.minutes_per_unit
        amount_with_secondary += count * item.unit_amount
        amount_without_secondary += count * item.base_amount

    loading_amount = LOADING_RATE * amount_without_secondary
    return TotalsResult(
        total_minutes=total_minutes,
        total_hours=hours_for_minutes(total_minutes),
        amount_with_secondary=amount_with_secondary,
        amount_without_secondary=amount_without_secondary,
        loading_amount=loading_amount,
        grand_total=amount_with_secondary + loading_amount,
    )


def hours_for_minutes(total_minutes: int) -> int:
    """Return whole billed hours: ceil(minutes / 60), 0 for no minutes."""
    if total_minutes <= 0:
        return 0
    return math.ceil(total_minutes / MINUTES_PER_HOUR)


def line_subtotal(
    count: int,
    base_amount: Decimal,
    secondary_amount: Decimal,
) -> Decimal:
    """Return count x (base + secondary) for a single line."""
    return count * (base_amount + secondary_amount)


__all__ = ["compute_totals", "hours_for_minutes", "line_subtotal"]
