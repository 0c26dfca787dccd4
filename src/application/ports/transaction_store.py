"""Application port for transaction storage."""

from datetime import date
from typing import Protocol

from src.domain.models import Transaction


class TransactionStorePort(Protocol):
    """Port exposing a user's transactions to the application layer."""

    def fetch_transactions(
        self,
        user_id: str,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[Transaction]:
        """Return the user's transactions sorted by date descending.

        Bounds are inclusive; a missing bound leaves that side open.
        """

    def get_transaction(
        self,
        user_id: str,
        transaction_id: str,
    ) -> Transaction | None:
        """Return one of the user's transactions, or None."""

    def add_transaction(self, transaction: Transaction) -> Transaction:
        """Persist a new transaction and return it."""

    def delete_transaction(self, user_id: str, transaction_id: str) -> int:
        """Delete one of the user's transactions; return rows deleted."""


__all__ = ["TransactionStorePort"]
