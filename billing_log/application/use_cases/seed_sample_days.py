"""Use case to load sample days into an empty log.

The sample covers eight days across the two work weeks starting
2026-02-02 and 2026-02-09.
"""

from billing_log.application.ports.billing_repository import (
    BillingRepositoryPort,
)
from billing_log.application.use_cases.save_day import SaveDayUseCase
from billing_log.infrastructure.logging.logger import get_app_logger

SAMPLE_DAYS: tuple[tuple[str, dict[str, int]], ...] = (
    (
        "2026-02-09",
        {
            "facilities_visited": 1,
            "consult_a_90020": 4,
            "consult_b_90035": 6,
            "consult_c_90043": 2,
            "rmmr_standalone": 1,
        },
    ),
    (
        "2026-02-10",
        {
            "facilities_visited": 1,
            "consult_a_90020": 3,
            "consult_b_90035": 5,
            "consult_d_90051": 1,
            "mdcp_731_standalone": 2,
        },
    ),
    (
        "2026-02-11",
        {
            "facilities_visited": 1,
            "consult_b_90035": 4,
            "consult_c_90043": 3,
            "consult_e_90054": 1,
            "mdt_739": 1,
        },
    ),
    (
        "2026-02-12",
        {
            "facilities_visited": 1,
            "consult_a_90020": 5,
            "consult_b_90035": 3,
            "consult_c_90043": 1,
            "health_ax": 1,
        },
    ),
    (
        "2026-02-13",
        {
            "consult_a_90020": 2,
            "consult_b_90035": 7,
            "consult_d_90051": 2,
            "rmmr_cobilled": 2,
        },
    ),
    (
        "2026-02-03",
        {
            "facilities_visited": 2,
            "consult_a_90020": 6,
            "consult_b_90035": 4,
            "consult_c_90043": 3,
            "urgent_unsociable_599": 1,
        },
    ),
    (
        "2026-02-04",
        {
            "facilities_visited": 1,
            "consult_b_90035": 8,
            "consult_c_90043": 2,
            "consult_a_ah_5010": 2,
            "rmmr_standalone": 3,
        },
    ),
    (
        "2026-02-05",
        {
            "consult_a_90020": 3,
            "consult_b_90035": 5,
            "consult_d_90051": 1,
            "mdcp_731_cobilled": 2,
            "mdt_739": 1,
        },
    ),
)


class SeedSampleDaysUseCase:
    """Insert the sample days when the log holds no records."""

    def __init__(
        self,
        repository: BillingRepositoryPort,
        logger=None,
        save_day: SaveDayUseCase | None = None,
    ) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._save_day = save_day or SaveDayUseCase(
            repository,
            logger=self._logger,
        )

    def run(self) -> int:
        """Seed the log and return the number of days inserted."""
        if self._repository.list_days():
            self._logger.info("Log already has days; skipping sample data")
            return 0
        for day, counts in SAMPLE_DAYS:
            self._save_day.execute(day, counts)
        self._logger.info(
            f"Seeded {len(SAMPLE_DAYS)} sample days across 2 work weeks"
        )
        return len(SAMPLE_DAYS)


__all__ = ["SeedSampleDaysUseCase", "SAMPLE_DAYS"]
