"""Use case to delete a transaction owned by a user."""

from src.application.ports.transaction_store import TransactionStorePort
from src.infrastructure.logging.logger import get_usage_logger


class DeleteTransactionUseCase:
    """Delete a transaction only when the user owns it."""

    def __init__(
        self,
        transaction_store: TransactionStorePort,
        logger=None,
    ) -> None:
        self._transaction_store = transaction_store
        self._logger = logger or get_usage_logger()

    def execute(self, user_id: str, transaction_id: str) -> int:
        """Delete the transaction and return the number of rows removed."""
        deleted = self._transaction_store.delete_transaction(
            user_id,
            transaction_id,
        )
        if deleted:
            self._logger.info(
                f"Transaction {transaction_id} deleted for user={user_id}"
            )
        else:
            self._logger.warning(
                f"Transaction {transaction_id} not found for user={user_id}"
            )
        return deleted


__all__ = ["DeleteTransactionUseCase"]
