"""Domain models for the pricing catalog."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class LineItemDefinition:
    """Billable item definition.

    Attributes:
        key: Stable identifier used in count maps and persisted rows.
        label: Human readable label.
        minutes_per_unit: Minutes billed per counted unit.
        base_amount: Base fee per unit (subject to loading).
        secondary_amount: BBI amount per unit (not subject to loading).
    """

    key: str
    label: str
    minutes_per_unit: int
    base_amount: Decimal
    secondary_amount: Decimal

    @property
    def unit_amount(self) -> Decimal:
        """Return base plus secondary amount for one unit."""
        return self.base_amount + self.secondary_amount


@dataclass(frozen=True)
class LineItemCategory:
    """Display grouping of catalog items, in catalog order."""

    name: str
    items: tuple[LineItemDefinition, ...]


__all__ = ["LineItemDefinition", "LineItemCategory"]
