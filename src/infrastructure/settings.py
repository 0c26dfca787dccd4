"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from src.domain.constants import DEFAULT_WINDOW_DAYS
from src.infrastructure.logging.logger import get_app_logger


SUPPORTED_BACKENDS = ("sqlalchemy", "memory")


@dataclass(frozen=True)
class TrackerSettings:
    """Settings for selecting the transaction store and windows.

    Attributes:
        backend: Store identifier (sqlalchemy or memory).
        db_url: Optional SQLAlchemy URL of the transactions database.
        window_days: Length of each dashboard comparison window.
    """

    backend: str = "sqlalchemy"
    db_url: str | None = None
    window_days: int = DEFAULT_WINDOW_DAYS

    @classmethod
    def from_env(cls) -> "TrackerSettings":
        """Build settings from environment variables.

        Returns:
            TrackerSettings: Settings sourced from the environment and .env.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        backend = os.getenv("TRACKER_BACKEND", "sqlalchemy").strip().lower()
        if backend not in SUPPORTED_BACKENDS:
            logger.warning(
                f"Unsupported TRACKER_BACKEND '{backend}'; "
                "falling back to sqlalchemy"
            )
            backend = "sqlalchemy"
        db_url = os.getenv("TRACKER_DB_URL") or None
        window_days = cls._parse_window_days(
            os.getenv("TRACKER_WINDOW_DAYS"),
            logger=logger,
        )
        return cls(backend=backend, db_url=db_url, window_days=window_days)

    @staticmethod
    def _parse_window_days(raw_value: str | None, logger) -> int:
        """Parse the comparison window length.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            int: Positive number of days, or the default when invalid.
        """
        if not raw_value:
            return DEFAULT_WINDOW_DAYS
        try:
            days = int(raw_value)
        except ValueError:
            days = 0
        if days <= 0:
            logger.warning(
                f"Invalid TRACKER_WINDOW_DAYS '{raw_value}'; "
                f"using {DEFAULT_WINDOW_DAYS}"
            )
            return DEFAULT_WINDOW_DAYS
        return days


__all__ = ["TrackerSettings", "SUPPORTED_BACKENDS"]
