"""Use case to save a day's item counts with their computed totals."""

from collections.abc import Callable, Mapping
from datetime import date, datetime, timezone

from billing_log.application.ports.billing_repository import (
    BillingRepositoryPort,
)
from billing_log.domain.catalog import LINE_ITEMS, LINE_ITEM_KEYS
from billing_log.domain.errors import ConflictError
from billing_log.domain.models import DayRecord, NewDayRecord, NewLineItemRow
from billing_log.domain.services.calendar import as_date
from billing_log.domain.services.totals import compute_totals
from billing_log.domain.services.validation import validate_counts
from billing_log.infrastructure.logging.logger import get_app_logger


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def build_line_items(counts: Mapping[str, int]) -> list[NewLineItemRow]:
    """Expand counts into one snapshot row per catalog item.

    Args:
        counts: Validated mapping of item key to count.

    Returns:
        list[NewLineItemRow]: Rows in catalog order, zero counts included.
    """
    return [
        NewLineItemRow(
            item_key=item.key,
            item_label=item.label,
            minutes_per_unit=item.minutes_per_unit,
            base_amount=item.base_amount,
            secondary_amount=item.secondary_amount,
            count=counts.get(item.key, 0),
        )
        for item in LINE_ITEMS
    ]


class SaveDayUseCase:
    """Validate counts, compute totals and persist a new day record."""

    def __init__(
        self,
        repository: BillingRepositoryPort,
        logger=None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing billings persistence.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning the creation timestamp.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._clock = clock or _utc_now

    def execute(
        self,
        day: date | str,
        counts: Mapping[str, int],
    ) -> DayRecord:
        """Save the counts for ``day``.

        Args:
            day: Calendar date or ``YYYY-MM-DD`` string.
            counts: Mapping of item key to non-negative count.

        Returns:
            DayRecord: The persisted record.

        Raises:
            ValidationError: If the date or a count is malformed.
            ConflictError: If the date is already logged.
        """
        day_date = as_date(day)
        validated = validate_counts(counts)
        unknown = sorted(set(validated) - set(LINE_ITEM_KEYS))
        if unknown:
            self._logger.warning(
                f"Ignoring unknown item keys for {day_date}: {unknown}"
            )

        totals = compute_totals(validated)
        payload = NewDayRecord(
            date=day_date,
            created_at=self._clock(),
            totals=totals,
        )
        try:
            record = self._repository.create_day(
                payload,
                build_line_items(validated),
            )
        except ConflictError:
            self._logger.warning(f"Refused duplicate day {day_date}")
            raise
        self._logger.info(
            f"Saved day {day_date}: minutes={totals.total_minutes}, "
            f"total={totals.grand_total}"
        )
        return record


__all__ = ["SaveDayUseCase", "build_line_items"]
