"""Use case to list a user's transactions grouped by day."""

from datetime import date

from src.application.ports.transaction_store import TransactionStorePort
from src.domain.models import Transaction
from src.domain.services import group_by_date
from src.infrastructure.logging.logger import get_app_logger


class ListTransactionsUseCase:
    """List transactions for presentation, most recent day first."""

    def __init__(
        self,
        transaction_store: TransactionStorePort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            transaction_store: Port providing the user's transactions.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._transaction_store = transaction_store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: str,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> dict[date, list[Transaction]]:
        """Return the user's transactions grouped by date.

        Args:
            user_id: Owner of the transactions.
            start_date: Optional inclusive lower bound.
            end_date: Optional inclusive upper bound.

        Returns:
            dict[date, list[Transaction]]: Groups keyed by day.
        """
        transactions = self._transaction_store.fetch_transactions(
            user_id,
            start_date,
            end_date,
        )
        self._logger.info(
            f"Fetched {len(transactions)} transactions for user={user_id}"
        )
        return group_by_date(transactions)


__all__ = ["ListTransactionsUseCase"]
