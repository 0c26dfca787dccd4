"""Tests for the check_db_connection adapter."""

from src.adapters import check_db_connection


class _DummyConnection:
    def __init__(self) -> None:
        self.executed: list[str] = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False

    def exec_driver_sql(self, statement: str) -> None:
        self.executed.append(statement)


class _DummyEngine:
    def __init__(self, url: str) -> None:
        self.url = url
        self.connection = _DummyConnection()

    def connect(self):
        return self.connection


def test_main_logs_successful_check(monkeypatch):
    """The CLI should log the URL, run SELECT 1 and ensure the schema."""
    engine = _DummyEngine("sqlite:///tracker.db")

    class _Adapter:
        def get_tracker_engine(self):
            return engine

    log_messages: list[str] = []
    schema_calls: list[object] = []

    class _Logger:
        def info(self, msg: str) -> None:
            log_messages.append(msg)

    class _Store:
        def __init__(self, adapter) -> None:
            self.adapter = adapter

        def ensure_schema(self) -> None:
            schema_calls.append(self.adapter)

    adapter = _Adapter()
    monkeypatch.setattr(
        check_db_connection,
        "build_database_adapter",
        lambda: adapter,
    )
    monkeypatch.setattr(
        check_db_connection,
        "get_app_logger",
        lambda: _Logger(),
    )
    monkeypatch.setattr(
        check_db_connection,
        "SqlAlchemyTransactionStore",
        _Store,
    )

    check_db_connection.main()

    assert "sqlite:///tracker.db" in log_messages[0]
    assert engine.connection.executed == ["SELECT 1"]
    assert schema_calls == [adapter]
