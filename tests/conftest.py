"""Shared pytest fixtures."""

import pytest

from src.infrastructure.logging import logger as logger_module


@pytest.fixture(autouse=True, scope="session")
def _isolate_log_dir(tmp_path_factory):
    """Write log files under a temporary root instead of the repository."""
    log_root = tmp_path_factory.mktemp("project_root")
    patcher = pytest.MonkeyPatch()
    patcher.setattr(logger_module, "get_project_root", lambda: log_root)
    yield log_root
    patcher.undo()
