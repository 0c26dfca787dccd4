"""Use case to assemble the dashboard view for one user."""

from datetime import date, timedelta

from src.application.ports.transaction_store import TransactionStorePort
from src.domain.constants import DEFAULT_WINDOW_DAYS
from src.domain.models import DashboardView
from src.domain.services import aggregate_by_month, compare_windows
from src.infrastructure.logging.logger import get_app_logger


class GetDashboardUseCase:
    """Combine monthly rollups and 30-day change statistics."""

    def __init__(
        self,
        transaction_store: TransactionStorePort,
        logger=None,
        window_days: int = DEFAULT_WINDOW_DAYS,
    ) -> None:
        """Initialize the use case.

        Args:
            transaction_store: Port providing the user's transactions.
            logger: Optional logger compatible with logging.Logger-like API.
            window_days: Length of each comparison window in days.
        """
        self._transaction_store = transaction_store
        self._logger = logger or get_app_logger()
        self._window_days = window_days

    def execute(self, user_id: str, today: date | None = None) -> DashboardView:
        """Return the dashboard view for a user.

        Args:
            user_id: Owner of the transactions to aggregate.
            today: Reference date; defaults to the current date.

        Returns:
            DashboardView: Stats in Expenses, Income, Result order and the
            current year's monthly buckets.
        """
        today = today or date.today()
        year_start, year_end = self.year_bounds(today)
        yearly = self._transaction_store.fetch_transactions(
            user_id,
            year_start,
            year_end,
        )
        self._logger.info(
            f"Fetched {len(yearly)} transactions for {today.year} "
            f"(user={user_id})"
        )
        buckets = aggregate_by_month(yearly, today)

        (current_start, current_end), (previous_start, previous_end) = (
            self.comparison_windows(today, self._window_days)
        )
        current = self._transaction_store.fetch_transactions(
            user_id,
            current_start,
            current_end,
        )
        previous = self._transaction_store.fetch_transactions(
            user_id,
            previous_start,
            previous_end,
        )
        comparison = compare_windows(current, previous)
        self._logger.info(
            f"Dashboard computed for user={user_id}: "
            f"months={len(buckets)}, current={len(current)}, "
            f"previous={len(previous)}, "
            f"result={comparison.total_stat.stat}"
        )
        return DashboardView(
            stats=comparison.as_list(),
            monthly_buckets=buckets,
        )

    @staticmethod
    def year_bounds(today: date) -> tuple[date, date]:
        """Return the first and last day of the year containing today."""
        return date(today.year, 1, 1), date(today.year, 12, 31)

    @staticmethod
    def comparison_windows(
        today: date,
        window_days: int = DEFAULT_WINDOW_DAYS,
    ) -> tuple[tuple[date, date], tuple[date, date]]:
        """Return the inclusive current and previous windows.

        The current window is ``[today - n, today]`` and the previous one
        ends the day before it starts, at ``today - 2n``, so no date belongs
        to both.
        """
        current_start = today - timedelta(days=window_days)
        previous_end = current_start - timedelta(days=1)
        previous_start = today - timedelta(days=2 * window_days)
        return (current_start, today), (previous_start, previous_end)


__all__ = ["GetDashboardUseCase", "DashboardView"]
