"""In-memory transaction store for local runs and tests."""

from collections.abc import Iterable
from datetime import date

from src.application.ports.transaction_store import TransactionStorePort
from src.domain.models import Transaction


class InMemoryTransactionStore(TransactionStorePort):
    """Transaction store keeping records in a list."""

    def __init__(self, transactions: Iterable[Transaction] = ()) -> None:
        self._transactions: list[Transaction] = list(transactions)

    def fetch_transactions(
        self,
        user_id: str,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[Transaction]:
        selected = [
            transaction
            for transaction in self._transactions
            if transaction.user_id == user_id
            and (start_date is None or transaction.date >= start_date)
            and (end_date is None or transaction.date <= end_date)
        ]
        return sorted(
            selected,
            key=lambda transaction: transaction.date,
            reverse=True,
        )

    def get_transaction(
        self,
        user_id: str,
        transaction_id: str,
    ) -> Transaction | None:
        for transaction in self._transactions:
            if (
                transaction.id == transaction_id
                and transaction.user_id == user_id
            ):
                return transaction
        return None

    def add_transaction(self, transaction: Transaction) -> Transaction:
        self._transactions.append(transaction)
        return transaction

    def delete_transaction(self, user_id: str, transaction_id: str) -> int:
        remaining = [
            transaction
            for transaction in self._transactions
            if not (
                transaction.id == transaction_id
                and transaction.user_id == user_id
            )
        ]
        deleted = len(self._transactions) - len(remaining)
        self._transactions = remaining
        return deleted


__all__ = ["InMemoryTransactionStore"]
