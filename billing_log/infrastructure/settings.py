"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path

import dotenv

from billing_log.infrastructure.logging.logger import get_app_logger
from billing_log.utils.utils import get_project_root

TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class BillingSettings:
    """Settings for the billings database.

    Attributes:
        database_url: SQLAlchemy URL of the billings store.
        seed_sample_data: Whether the interface seeds sample days into an
            empty log on startup.
    """

    database_url: str
    seed_sample_data: bool = False

    @classmethod
    def from_env(cls) -> "BillingSettings":
        """Build settings from environment variables (and ``.env``).

        Returns:
            BillingSettings: Settings sourced from the environment.
        """
        dotenv.load_dotenv()
        raw_url = os.getenv("BILLING_DB_URL", "").strip()
        database_url = raw_url or cls._default_database_url()
        seed_flag = os.getenv("BILLING_SEED_SAMPLE_DATA", "").strip().lower()
        return cls(
            database_url=database_url,
            seed_sample_data=seed_flag in TRUE_VALUES,
        )

    @staticmethod
    def _default_database_url() -> str:
        """Return a SQLite URL under ``data/`` in the project root."""
        data_dir = get_project_root() / "data"
        if not data_dir.exists():
            data_dir.mkdir(parents=True, exist_ok=True)
            get_app_logger().info(f"Created data directory at {data_dir}")
        return f"sqlite:///{Path(data_dir, 'billings.db')}"


__all__ = ["BillingSettings"]
