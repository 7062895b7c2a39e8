"""Shared fixtures for the billings log tests."""

from dataclasses import replace
from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from billing_log.application.ports.billing_repository import (
    BillingRepositoryPort,
)
from billing_log.domain.errors import ConflictError
from billing_log.domain.models import (
    DayLineItemRow,
    DayRecord,
    MonthlyBudget,
    NewDayRecord,
    NewLineItemRow,
)


class FakeBillingRepository(BillingRepositoryPort):
    """In-memory repository honouring the port contract."""

    def __init__(self) -> None:
        self.days: dict[int, DayRecord] = {}
        self.items: dict[int, list[DayLineItemRow]] = {}
        self.budgets: dict[str, MonthlyBudget] = {}
        self._next_day_id = 1
        self._next_item_id = 1

    def prepare_storage(self) -> None:
        return None

    def list_days(self) -> list[DayRecord]:
        return sorted(self.days.values(), key=lambda d: d.date, reverse=True)

    def get_day(self, day_id: int) -> DayRecord | None:
        return self.days.get(day_id)

    def get_day_by_date(self, day: date) -> DayRecord | None:
        return next((d for d in self.days.values() if d.date == day), None)

    def create_day(
        self,
        day: NewDayRecord,
        line_items: list[NewLineItemRow],
    ) -> DayRecord:
        if self.get_day_by_date(day.date) is not None:
            raise ConflictError(f"{day.date} already exists")
        record = DayRecord(
            id=self._next_day_id,
            date=day.date,
            created_at=day.created_at,
            totals=day.totals,
        )
        self._next_day_id += 1
        rows = []
        for item in line_items:
            rows.append(
                DayLineItemRow(
                    id=self._next_item_id,
                    day_id=record.id,
                    item_key=item.item_key,
                    item_label=item.item_label,
                    minutes_per_unit=item.minutes_per_unit,
                    base_amount=item.base_amount,
                    secondary_amount=item.secondary_amount,
                    count=item.count,
                )
            )
            self._next_item_id += 1
        self.days[record.id] = record
        self.items[record.id] = rows
        return record

    def delete_day(self, day_id: int) -> bool:
        if day_id not in self.days:
            return False
        del self.days[day_id]
        self.items.pop(day_id, None)
        return True

    def list_line_items(self, day_id: int) -> list[DayLineItemRow]:
        return list(self.items.get(day_id, []))

    def list_budgets(self) -> list[MonthlyBudget]:
        return sorted(
            self.budgets.values(),
            key=lambda b: b.month,
            reverse=True,
        )

    def get_budget(self, month: str) -> MonthlyBudget | None:
        return self.budgets.get(month)

    def upsert_budget(self, month: str, amount: Decimal) -> MonthlyBudget:
        existing = self.budgets.get(month)
        budget = (
            replace(existing, budget_amount=amount)
            if existing
            else MonthlyBudget(month=month, budget_amount=amount)
        )
        self.budgets[month] = budget
        return budget


@pytest.fixture
def fake_repository() -> FakeBillingRepository:
    return FakeBillingRepository()


@pytest.fixture
def fake_logger() -> MagicMock:
    return MagicMock()
