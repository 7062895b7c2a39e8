"""CLI adapter to load the sample days into an empty billings log."""

from billing_log.application.use_cases.seed_sample_days import (
    SeedSampleDaysUseCase,
)
from billing_log.infrastructure.container import build_billing_repository
from billing_log.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run the seeding use case."""
    logger = get_app_logger()
    repository = build_billing_repository()
    use_case = SeedSampleDaysUseCase(repository=repository, logger=logger)

    inserted = use_case.run()

    if inserted:
        print(f"Seeded {inserted} sample days into the billings log.")
    else:
        print("The billings log already has days; nothing seeded.")


if __name__ == "__main__":  # pragma: no cover
    main()
