"""Use cases to export logged days as CSV."""

from billing_log.application.ports.billing_repository import (
    BillingRepositoryPort,
)
from billing_log.application.use_cases.get_day_detail import (
    GetDayDetailUseCase,
)
from billing_log.domain.services.csv_export import (
    ALL_DAYS_FILENAME,
    CsvExport,
    day_csv_filename,
    render_all_days_csv,
    render_day_csv,
)
from billing_log.domain.services.grouping import group_by_work_week
from billing_log.infrastructure.logging.logger import get_app_logger


class ExportDayCsvUseCase:
    """Export one day's billed items and summary."""

    def __init__(self, repository: BillingRepositoryPort, logger=None) -> None:
        self._detail = GetDayDetailUseCase(repository)
        self._logger = logger or get_app_logger()

    def execute(self, day_id: int) -> CsvExport:
        """Return the CSV export of ``day_id``.

        Raises:
            NotFoundError: If no day has this id.
        """
        detail = self._detail.execute(day_id)
        self._logger.info(f"Exported day {detail.day.date} to CSV")
        return CsvExport(
            filename=day_csv_filename(detail.day.date),
            content=render_day_csv(detail),
        )


class ExportAllCsvUseCase:
    """Export every day, grouped by work week."""

    def __init__(self, repository: BillingRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self) -> CsvExport:
        """Return the bulk CSV export."""
        weeks = group_by_work_week(self._repository.list_days())
        items_by_day = {
            day.id: self._repository.list_line_items(day.id)
            for week in weeks
            for day in week.days
        }
        self._logger.info(
            f"Exported {len(items_by_day)} days across {len(weeks)} weeks"
        )
        return CsvExport(
            filename=ALL_DAYS_FILENAME,
            content=render_all_days_csv(weeks, items_by_day),
        )


__all__ = ["ExportDayCsvUseCase", "ExportAllCsvUseCase", "CsvExport"]
