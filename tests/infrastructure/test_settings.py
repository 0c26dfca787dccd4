"""Tests for infrastructure settings."""

from unittest.mock import MagicMock

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import TrackerSettings


def _isolate(monkeypatch) -> MagicMock:
    logger = MagicMock()
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: logger)
    for name in ("TRACKER_BACKEND", "TRACKER_DB_URL", "TRACKER_WINDOW_DAYS"):
        monkeypatch.delenv(name, raising=False)
    return logger


def test_from_env_uses_defaults(monkeypatch) -> None:
    """Missing variables should fall back to defaults."""
    _isolate(monkeypatch)

    settings = TrackerSettings.from_env()

    assert settings == TrackerSettings(
        backend="sqlalchemy",
        db_url=None,
        window_days=30,
    )


def test_from_env_reads_variables(monkeypatch) -> None:
    """Configured variables should be normalized into settings."""
    _isolate(monkeypatch)
    monkeypatch.setenv("TRACKER_BACKEND", " Memory ")
    monkeypatch.setenv("TRACKER_DB_URL", "sqlite:///tracker.db")
    monkeypatch.setenv("TRACKER_WINDOW_DAYS", "14")

    settings = TrackerSettings.from_env()

    assert settings.backend == "memory"
    assert settings.db_url == "sqlite:///tracker.db"
    assert settings.window_days == 14


def test_invalid_values_warn_and_fall_back(monkeypatch) -> None:
    """Unsupported backends and window lengths should warn."""
    logger = _isolate(monkeypatch)
    monkeypatch.setenv("TRACKER_BACKEND", "mongo")
    monkeypatch.setenv("TRACKER_WINDOW_DAYS", "-3")

    settings = TrackerSettings.from_env()

    assert settings.backend == "sqlalchemy"
    assert settings.window_days == 30
    assert logger.warning.call_count == 2
