"""Tests for the composition root."""

from unittest.mock import MagicMock

from src.infrastructure import container
from src.infrastructure.memory_store import InMemoryTransactionStore
from src.infrastructure.settings import TrackerSettings
from src.infrastructure.transaction_repository import (
    SqlAlchemyTransactionStore,
)


def test_memory_backend_builds_in_memory_store(monkeypatch) -> None:
    """The memory backend should not touch the database."""
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    monkeypatch.setattr(
        container,
        "build_database_adapter",
        MagicMock(side_effect=AssertionError("no database")),
    )

    store = container.build_transaction_store(
        TrackerSettings(backend="memory")
    )

    assert isinstance(store, InMemoryTransactionStore)


def test_sqlalchemy_backend_ensures_schema(monkeypatch) -> None:
    """The SQL backend should create its table on startup."""
    calls = []
    monkeypatch.setattr(
        SqlAlchemyTransactionStore,
        "ensure_schema",
        lambda self: calls.append(self),
    )

    store = container.build_transaction_store(
        TrackerSettings(backend="sqlalchemy"),
        db_port=MagicMock(),
    )

    assert isinstance(store, SqlAlchemyTransactionStore)
    assert calls == [store]


def test_dashboard_use_case_uses_configured_window() -> None:
    """The window length should come from settings."""
    store = InMemoryTransactionStore()

    use_case = container.build_dashboard_use_case(
        TrackerSettings(backend="memory", window_days=14),
        store=store,
    )

    assert use_case._window_days == 14
    assert use_case._transaction_store is store
