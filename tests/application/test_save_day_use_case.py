"""Tests for the SaveDayUseCase."""

from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from billing_log.application.use_cases.save_day import (
    SaveDayUseCase,
    build_line_items,
)
from billing_log.domain.catalog import LINE_ITEM_KEYS
from billing_log.domain.errors import ConflictError, ValidationError

FIXED_NOW = datetime(2026, 2, 9, 18, 30, tzinfo=timezone.utc)


def test_execute_persists_totals_and_line_items(
    fake_repository,
    fake_logger,
) -> None:
    """Saving should store totals and one snapshot row per catalog item."""
    use_case = SaveDayUseCase(
        fake_repository,
        logger=fake_logger,
        clock=lambda: FIXED_NOW,
    )

    record = use_case.execute("2026-02-09", {"consult_a_90020": 2})

    assert record.date == date(2026, 2, 9)
    assert record.created_at == FIXED_NOW
    assert record.totals.grand_total == Decimal("59.80625")
    items = fake_repository.list_line_items(record.id)
    assert [item.item_key for item in items] == list(LINE_ITEM_KEYS)
    assert sum(item.count for item in items) == 2
    fake_logger.info.assert_called_once()


def test_execute_refuses_duplicate_date(fake_repository, fake_logger) -> None:
    """A second save for the same date is a conflict and writes nothing."""
    use_case = SaveDayUseCase(fake_repository, logger=fake_logger)
    first = use_case.execute("2026-02-09", {"health_ax": 1})

    with pytest.raises(ConflictError):
        use_case.execute(date(2026, 2, 9), {"consult_a_90020": 5})

    assert list(fake_repository.days) == [first.id]
    assert len(fake_repository.list_line_items(first.id)) == len(LINE_ITEM_KEYS)
    fake_logger.warning.assert_called_once()


def test_execute_rejects_negative_counts(fake_repository, fake_logger) -> None:
    use_case = SaveDayUseCase(fake_repository, logger=fake_logger)

    with pytest.raises(ValidationError):
        use_case.execute("2026-02-09", {"consult_a_90020": -1})

    assert fake_repository.days == {}


def test_execute_rejects_malformed_date(fake_repository, fake_logger) -> None:
    use_case = SaveDayUseCase(fake_repository, logger=fake_logger)

    with pytest.raises(ValidationError):
        use_case.execute("09/02/2026", {})


def test_execute_warns_about_unknown_keys(fake_repository) -> None:
    logger = MagicMock()
    use_case = SaveDayUseCase(fake_repository, logger=logger)

    record = use_case.execute("2026-02-10", {"made_up": 3, "health_ax": 1})

    logger.warning.assert_called_once()
    assert "made_up" in logger.warning.call_args.args[0]
    assert record.totals.total_minutes == 60


def test_build_line_items_snapshots_catalog() -> None:
    rows = build_line_items({"mdt_739": 2})

    mdt = next(row for row in rows if row.item_key == "mdt_739")
    assert mdt.item_label == "MDT (739)"
    assert mdt.minutes_per_unit == 20
    assert mdt.base_amount == Decimal("141.05")
    assert mdt.count == 2
    assert all(row.count == 0 for row in rows if row.item_key != "mdt_739")
