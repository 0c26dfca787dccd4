"""Tests for the transaction create/get/list/delete use cases."""

from datetime import date
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.create_transaction import (
    CreateTransactionUseCase,
)
from src.application.use_cases.delete_transaction import (
    DeleteTransactionUseCase,
)
from src.application.use_cases.get_transaction import GetTransactionUseCase
from src.application.use_cases.list_transactions import (
    ListTransactionsUseCase,
)
from src.domain.errors import TransactionNotFoundError, ValidationError
from src.domain.models import (
    CurrencyValue,
    TransactionFrequency,
    TransactionType,
)
from src.infrastructure.memory_store import InMemoryTransactionStore


def _create(store, user_id: str, txn_id: str, **kwargs):
    use_case = CreateTransactionUseCase(
        store,
        logger=MagicMock(),
        id_factory=lambda: txn_id,
    )
    return use_case.execute(user_id, **kwargs)


def test_create_validates_and_persists() -> None:
    """A valid transaction should be stored with a generated id."""
    store = InMemoryTransactionStore()
    logger = MagicMock()
    use_case = CreateTransactionUseCase(
        store,
        logger=logger,
        id_factory=lambda: "txn-1",
    )

    transaction = use_case.execute(
        "user-1",
        title="Coffee",
        amount="3.50",
        transaction_type="EXPENSE",
        frequency="VARIABLE",
        transaction_date="2024-04-03",
    )

    assert transaction.id == "txn-1"
    assert transaction.amount == CurrencyValue("3.50")
    assert transaction.type is TransactionType.EXPENSE
    assert transaction.frequency is TransactionFrequency.VARIABLE
    assert store.fetch_transactions("user-1") == [transaction]
    logger.info.assert_called_once()


def test_create_defaults_date_to_today() -> None:
    """Omitting the date should record the transaction today."""
    store = InMemoryTransactionStore()

    transaction = _create(
        store,
        "user-1",
        "txn-1",
        title="Salary",
        amount=100,
        transaction_type="INCOME",
    )

    assert transaction.date == date.today()


def test_create_rejects_invalid_input_without_storing() -> None:
    """Validation errors should surface and nothing should be stored."""
    store = MagicMock()
    use_case = CreateTransactionUseCase(store, logger=MagicMock())

    with pytest.raises(ValidationError) as exc_info:
        use_case.execute(
            "user-1",
            title="",
            amount="0",
            transaction_type="INCOME",
        )

    assert set(exc_info.value.errors) == {"title", "amount"}
    store.add_transaction.assert_not_called()


def test_get_returns_only_owned_transactions() -> None:
    """Another user's transaction should be reported as missing."""
    store = InMemoryTransactionStore()
    created = _create(
        store,
        "user-1",
        "txn-1",
        title="Rent",
        amount="900",
        transaction_type="EXPENSE",
        transaction_date="2024-04-01",
    )
    use_case = GetTransactionUseCase(store)

    assert use_case.execute("user-1", "txn-1") == created
    with pytest.raises(TransactionNotFoundError):
        use_case.execute("user-2", "txn-1")


def test_list_groups_transactions_by_day() -> None:
    """Listing should group transactions, most recent day first."""
    store = InMemoryTransactionStore()
    for txn_id, day in [("a", "2024-04-01"), ("b", "2024-04-03"), ("c", "2024-04-01")]:
        _create(
            store,
            "user-1",
            txn_id,
            title=f"Item {txn_id}",
            amount="1",
            transaction_type="EXPENSE",
            transaction_date=day,
        )

    groups = ListTransactionsUseCase(store, logger=MagicMock()).execute(
        "user-1"
    )

    assert list(groups) == [date(2024, 4, 3), date(2024, 4, 1)]
    assert {txn.id for txn in groups[date(2024, 4, 1)]} == {"a", "c"}


def test_delete_only_removes_owned_transaction() -> None:
    """Deleting should be scoped to the owner."""
    store = InMemoryTransactionStore()
    _create(
        store,
        "user-1",
        "txn-1",
        title="Gym",
        amount="30",
        transaction_type="EXPENSE",
        transaction_date="2024-04-01",
    )
    logger = MagicMock()
    use_case = DeleteTransactionUseCase(store, logger=logger)

    assert use_case.execute("user-2", "txn-1") == 0
    logger.warning.assert_called_once()
    assert use_case.execute("user-1", "txn-1") == 1
    assert store.fetch_transactions("user-1") == []
