"""Use case to record a new transaction for a user."""

from collections.abc import Callable
from datetime import date
from uuid import uuid4

from src.application.ports.transaction_store import TransactionStorePort
from src.domain.models import Transaction
from src.domain.services import validate_transaction_input
from src.infrastructure.logging.logger import get_usage_logger


class CreateTransactionUseCase:
    """Validate raw input and persist it as a transaction."""

    def __init__(
        self,
        transaction_store: TransactionStorePort,
        logger=None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            transaction_store: Port used to persist the transaction.
            logger: Optional logger compatible with logging.Logger-like API.
            id_factory: Optional callable returning new transaction ids.
        """
        self._transaction_store = transaction_store
        self._logger = logger or get_usage_logger()
        self._id_factory = id_factory or (lambda: uuid4().hex)

    def execute(
        self,
        user_id: str,
        title,
        amount,
        transaction_type,
        frequency=None,
        transaction_date=None,
    ) -> Transaction:
        """Create the transaction.

        Args:
            user_id: Owner of the new transaction.
            title: Display label.
            amount: Raw positive amount.
            transaction_type: EXPENSE or INCOME.
            frequency: FIXED or VARIABLE; FIXED when omitted.
            transaction_date: ISO date or date; today when omitted.

        Returns:
            Transaction: The stored transaction.

        Raises:
            ValidationError: If any field is invalid.
        """
        draft = validate_transaction_input(
            title,
            amount,
            transaction_type,
            frequency=frequency,
            transaction_date=transaction_date or date.today(),
        )
        transaction = Transaction(
            id=self._id_factory(),
            title=draft.title,
            amount=draft.amount,
            type=draft.type,
            frequency=draft.frequency,
            date=draft.date,
            user_id=user_id,
        )
        stored = self._transaction_store.add_transaction(transaction)
        self._logger.info(
            f"Transaction {stored.id} created for user={user_id}: "
            f"{stored.type.value} {stored.amount} on {stored.date}"
        )
        return stored


__all__ = ["CreateTransactionUseCase"]
