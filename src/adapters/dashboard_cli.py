"""CLI adapter printing a user's dashboard as JSON.

This is the hand-off point to presentation layers: the printed structure is
the serialized DashboardView with amounts rendered as two-decimal strings.
"""

import argparse
from datetime import date
import json

from src.infrastructure.container import build_dashboard_use_case
from src.infrastructure.logging.logger import get_app_logger


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print monthly rollups and 30-day change statistics.",
    )
    parser.add_argument("--user-id", required=True)
    parser.add_argument(
        "--today",
        help="Reference date (YYYY-MM-DD); defaults to the current date.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Compute and print the dashboard for one user."""
    args = _build_parser().parse_args(argv)
    logger = get_app_logger()
    today = _parse_date(args.today, logger)

    use_case = build_dashboard_use_case()
    view = use_case.execute(args.user_id, today=today)

    print(json.dumps(view.to_dict(), indent=2))


if __name__ == "__main__":  # pragma: no cover
    main()
