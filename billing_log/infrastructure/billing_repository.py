"""SQLAlchemy-backed repository for the billings log."""

from datetime import date
from decimal import Decimal

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError

from billing_log.application.ports.billing_repository import (
    BillingRepositoryPort,
)
from billing_log.application.ports.database import DatabaseEnginePort
from billing_log.domain.errors import ConflictError
from billing_log.domain.models import (
    DayLineItemRow,
    DayRecord,
    MonthlyBudget,
    NewDayRecord,
    NewLineItemRow,
    TotalsResult,
)
from billing_log.infrastructure.db import (
    daily_line_items,
    daily_totals,
    metadata,
    monthly_budgets,
)
from billing_log.utils.decimal_utils import coerce_decimal


class SqlAlchemyBillingRepository(BillingRepositoryPort):
    """Repository backed by SQLAlchemy Core for day records and budgets."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the billings engine.
        """
        self._db_port = db_port

    def prepare_storage(self) -> None:
        """Create the billings tables when they do not exist."""
        metadata.create_all(self._db_port.get_engine())

    def list_days(self) -> list[DayRecord]:
        query = select(daily_totals).order_by(daily_totals.c.date.desc())
        with self._db_port.get_engine().connect() as conn:
            rows = conn.execute(query).all()
        return [self._to_day(row) for row in rows]

    def get_day(self, day_id: int) -> DayRecord | None:
        query = select(daily_totals).where(daily_totals.c.id == day_id)
        with self._db_port.get_engine().connect() as conn:
            row = conn.execute(query).first()
        return self._to_day(row) if row is not None else None

    def get_day_by_date(self, day: date) -> DayRecord | None:
        query = select(daily_totals).where(daily_totals.c.date == day)
        with self._db_port.get_engine().connect() as conn:
            row = conn.execute(query).first()
        return self._to_day(row) if row is not None else None

    def create_day(
        self,
        day: NewDayRecord,
        line_items: list[NewLineItemRow],
    ) -> DayRecord:
        """Insert a day and its line items in one transaction.

        The unique constraint on ``daily_totals.date`` is the duplicate
        guard; a violation rolls the whole transaction back.

        Raises:
            ConflictError: If a record already exists for the date.
        """
        totals = day.totals
        values = {
            "date": day.date,
            "total_billings": totals.grand_total,
            "prelim_with_bbi": totals.amount_with_secondary,
            "prelim_without_bbi": totals.amount_without_secondary,
            "loading_625": totals.loading_amount,
            "total_minutes": totals.total_minutes,
            "total_hours": totals.total_hours,
            "created_at": day.created_at,
        }
        with self._db_port.get_engine().begin() as conn:
            try:
                result = conn.execute(insert(daily_totals).values(**values))
            except IntegrityError as exc:
                raise ConflictError(
                    f"{day.date.isoformat()} already exists in the log. "
                    "Choose a different date or delete the existing entry."
                ) from exc
            day_id = result.inserted_primary_key[0]
            if line_items:
                conn.execute(
                    insert(daily_line_items),
                    [
                        {
                            "daily_total_id": day_id,
                            "item_key": item.item_key,
                            "item_label": item.item_label,
                            "minutes_per_item": item.minutes_per_unit,
                            "base_amount": item.base_amount,
                            "bbi_amount": item.secondary_amount,
                            "count": item.count,
                        }
                        for item in line_items
                    ],
                )
        return DayRecord(
            id=day_id,
            date=day.date,
            created_at=day.created_at,
            totals=totals,
        )

    def delete_day(self, day_id: int) -> bool:
        with self._db_port.get_engine().begin() as conn:
            conn.execute(
                delete(daily_line_items).where(
                    daily_line_items.c.daily_total_id == day_id
                )
            )
            result = conn.execute(
                delete(daily_totals).where(daily_totals.c.id == day_id)
            )
        return result.rowcount > 0

    def list_line_items(self, day_id: int) -> list[DayLineItemRow]:
        query = (
            select(daily_line_items)
            .where(daily_line_items.c.daily_total_id == day_id)
            .order_by(daily_line_items.c.id)
        )
        with self._db_port.get_engine().connect() as conn:
            rows = conn.execute(query).all()
        return [
            DayLineItemRow(
                id=row.id,
                day_id=row.daily_total_id,
                item_key=row.item_key,
                item_label=row.item_label,
                minutes_per_unit=row.minutes_per_item,
                base_amount=coerce_decimal(row.base_amount),
                secondary_amount=coerce_decimal(row.bbi_amount),
                count=row.count,
            )
            for row in rows
        ]

    def list_budgets(self) -> list[MonthlyBudget]:
        query = select(monthly_budgets).order_by(monthly_budgets.c.month.desc())
        with self._db_port.get_engine().connect() as conn:
            rows = conn.execute(query).all()
        return [self._to_budget(row) for row in rows]

    def get_budget(self, month: str) -> MonthlyBudget | None:
        query = select(monthly_budgets).where(monthly_budgets.c.month == month)
        with self._db_port.get_engine().connect() as conn:
            row = conn.execute(query).first()
        return self._to_budget(row) if row is not None else None

    def upsert_budget(self, month: str, amount: Decimal) -> MonthlyBudget:
        with self._db_port.get_engine().begin() as conn:
            existing = conn.execute(
                select(monthly_budgets.c.id).where(
                    monthly_budgets.c.month == month
                )
            ).first()
            if existing is None:
                conn.execute(
                    insert(monthly_budgets).values(month=month, budget=amount)
                )
            else:
                conn.execute(
                    update(monthly_budgets)
                    .where(monthly_budgets.c.month == month)
                    .values(budget=amount)
                )
        return MonthlyBudget(month=month, budget_amount=amount)

    @staticmethod
    def _to_day(row) -> DayRecord:
        return DayRecord(
            id=row.id,
            date=row.date,
            created_at=row.created_at,
            totals=TotalsResult(
                total_minutes=row.total_minutes,
                total_hours=row.total_hours,
                amount_with_secondary=coerce_decimal(row.prelim_with_bbi),
                amount_without_secondary=coerce_decimal(
                    row.prelim_without_bbi
                ),
                loading_amount=coerce_decimal(row.loading_625),
                grand_total=coerce_decimal(row.total_billings),
            ),
        )

    @staticmethod
    def _to_budget(row) -> MonthlyBudget:
        return MonthlyBudget(
            month=row.month,
            budget_amount=coerce_decimal(row.budget),
        )


__all__ = ["SqlAlchemyBillingRepository"]
