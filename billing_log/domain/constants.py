"""Domain constants for billing computations."""

from decimal import Decimal

LOADING_RATE = Decimal("0.0625")
BUDGET_EPSILON = Decimal("0.01")
MINUTES_PER_HOUR = 60
LOADING_LABEL = "Loading (6.25%)"


__all__ = [
    "LOADING_RATE",
    "BUDGET_EPSILON",
    "MINUTES_PER_HOUR",
    "LOADING_LABEL",
]
