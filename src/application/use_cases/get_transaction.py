"""Use case to read a single transaction."""

from src.application.ports.transaction_store import TransactionStorePort
from src.domain.errors import TransactionNotFoundError
from src.domain.models import Transaction


class GetTransactionUseCase:
    """Fetch one transaction owned by a user."""

    def __init__(self, transaction_store: TransactionStorePort) -> None:
        """Initialize the use case with its required dependencies."""
        self._transaction_store = transaction_store

    def execute(self, user_id: str, transaction_id: str) -> Transaction:
        """Return the transaction or raise TransactionNotFoundError."""
        transaction = self._transaction_store.get_transaction(
            user_id,
            transaction_id,
        )
        if transaction is None:
            raise TransactionNotFoundError(transaction_id, user_id)
        return transaction


__all__ = ["GetTransactionUseCase"]
