"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.transaction_store import TransactionStorePort
from src.application.use_cases.create_transaction import (
    CreateTransactionUseCase,
)
from src.application.use_cases.delete_transaction import (
    DeleteTransactionUseCase,
)
from src.application.use_cases.get_dashboard import GetDashboardUseCase
from src.application.use_cases.list_transactions import (
    ListTransactionsUseCase,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.memory_store import InMemoryTransactionStore
from src.infrastructure.settings import TrackerSettings
from src.infrastructure.transaction_repository import (
    SqlAlchemyTransactionStore,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_transaction_store(
    settings: TrackerSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> TransactionStorePort:
    """Return the configured transaction store."""
    resolved_settings = settings or TrackerSettings.from_env()
    if resolved_settings.backend == "memory":
        get_app_logger().warning(
            "Using the in-memory transaction store; data is not persisted"
        )
        return InMemoryTransactionStore()
    store = SqlAlchemyTransactionStore(db_port or build_database_adapter())
    store.ensure_schema()
    return store


def build_dashboard_use_case(
    settings: TrackerSettings | None = None,
    store: TransactionStorePort | None = None,
) -> GetDashboardUseCase:
    """Return the dashboard use case wired to the configured store."""
    resolved_settings = settings or TrackerSettings.from_env()
    resolved_store = store or build_transaction_store(resolved_settings)
    return GetDashboardUseCase(
        resolved_store,
        window_days=resolved_settings.window_days,
    )


def build_create_transaction_use_case(
    store: TransactionStorePort | None = None,
) -> CreateTransactionUseCase:
    """Return the transaction creation use case."""
    return CreateTransactionUseCase(store or build_transaction_store())


def build_list_transactions_use_case(
    store: TransactionStorePort | None = None,
) -> ListTransactionsUseCase:
    """Return the transaction listing use case."""
    return ListTransactionsUseCase(store or build_transaction_store())


def build_delete_transaction_use_case(
    store: TransactionStorePort | None = None,
) -> DeleteTransactionUseCase:
    """Return the transaction deletion use case."""
    return DeleteTransactionUseCase(store or build_transaction_store())


__all__ = [
    "build_database_adapter",
    "build_transaction_store",
    "build_dashboard_use_case",
    "build_create_transaction_use_case",
    "build_list_transactions_use_case",
    "build_delete_transaction_use_case",
]
