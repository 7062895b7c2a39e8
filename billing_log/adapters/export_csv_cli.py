"""CLI adapter to export logged days as CSV.

Without arguments every day is exported, grouped by work week. With
``--date YYYY-MM-DD`` only that day is exported with its summary block.
"""

import argparse
import sys

from billing_log.application.use_cases.export_csv import (
    ExportAllCsvUseCase,
    ExportDayCsvUseCase,
)
from billing_log.domain.errors import BillingLogError, NotFoundError
from billing_log.domain.services.validation import parse_iso_date
from billing_log.infrastructure.container import build_billing_repository
from billing_log.infrastructure.logging.logger import get_app_logger


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Export the billings log as CSV.",
    )
    parser.add_argument(
        "--date",
        help="Export a single day (YYYY-MM-DD) instead of the whole log.",
    )
    parser.add_argument(
        "--output",
        help="Write to this file instead of standard output.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the export and return the process exit code."""
    args = _build_parser().parse_args(argv)
    logger = get_app_logger()
    repository = build_billing_repository()

    try:
        if args.date:
            day = repository.get_day_by_date(parse_iso_date(args.date))
            if day is None:
                raise NotFoundError(f"No day logged for {args.date}")
            export = ExportDayCsvUseCase(repository, logger=logger).execute(
                day.id
            )
        else:
            export = ExportAllCsvUseCase(repository, logger=logger).execute()
    except BillingLogError as exc:
        logger.error(str(exc))
        print(str(exc), file=sys.stderr)
        return 1

    if args.output:
        with open(args.output, "w", encoding="utf-8", newline="") as handle:
            handle.write(export.content)
        print(f"Wrote {export.filename} content to {args.output}")
    else:
        print(export.content)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
