"""Domain models for day records and their totals."""

from dataclasses import dataclass, fields
from datetime import date, datetime
from decimal import Decimal


@dataclass(frozen=True)
class TotalsResult:
    """Time and currency totals derived from a count map.

    Attributes:
        total_minutes: Sum of count x minutes per unit.
        total_hours: Ceiling of minutes / 60, 0 when there are no minutes.
        amount_with_secondary: Sum of count x (base + BBI). "Prelim with BBI".
        amount_without_secondary: Sum of count x base. "Prelim without BBI".
        loading_amount: 6.25% of the amount without secondary.
        grand_total: Amount with secondary plus loading. "Total Billings".
    """

    total_minutes: int
    total_hours: int
    amount_with_secondary: Decimal
    amount_without_secondary: Decimal
    loading_amount: Decimal
    grand_total: Decimal

    @classmethod
    def zero(cls) -> "TotalsResult":
        """Return a totals record with every field set to zero."""
        return cls(
            total_minutes=0,
            total_hours=0,
            amount_with_secondary=Decimal("0"),
            amount_without_secondary=Decimal("0"),
            loading_amount=Decimal("0"),
            grand_total=Decimal("0"),
        )

    def __add__(self, other: "TotalsResult") -> "TotalsResult":
        if not isinstance(other, TotalsResult):
            return NotImplemented
        return TotalsResult(
            **{
                field.name: getattr(self, field.name)
                + getattr(other, field.name)
                for field in fields(self)
            }
        )


@dataclass(frozen=True)
class DayRecord:
    """Persisted day with its cached totals snapshot."""

    id: int
    date: date
    created_at: datetime
    totals: TotalsResult


@dataclass(frozen=True)
class NewDayRecord:
    """Day payload not yet persisted."""

    date: date
    created_at: datetime
    totals: TotalsResult


@dataclass(frozen=True)
class NewLineItemRow:
    """Per-item snapshot row not yet persisted."""

    item_key: str
    item_label: str
    minutes_per_unit: int
    base_amount: Decimal
    secondary_amount: Decimal
    count: int


@dataclass(frozen=True)
class DayLineItemRow:
    """Persisted per-item snapshot owned by a day record."""

    id: int
    day_id: int
    item_key: str
    item_label: str
    minutes_per_unit: int
    base_amount: Decimal
    secondary_amount: Decimal
    count: int

    @property
    def subtotal(self) -> Decimal:
        """Return count x (base + secondary)."""
        return self.count * (self.base_amount + self.secondary_amount)


@dataclass(frozen=True)
class DayDetail:
    """Day record together with its line items."""

    day: DayRecord
    items: list[DayLineItemRow]

    @property
    def billed_items(self) -> list[DayLineItemRow]:
        """Return line items with a positive count."""
        return [item for item in self.items if item.count > 0]


__all__ = [
    "TotalsResult",
    "DayRecord",
    "NewDayRecord",
    "NewLineItemRow",
    "DayLineItemRow",
    "DayDetail",
]
