# tests/conftest.py
"""Shared test setup for project."""

from collections.abc import Generator
from pathlib import Path

import pytest

import solresolve.logs as mod_logs
from tests.utils import DEFAULT_TEST_LOG_LEVEL


# ----------------------------------------------------------------------
# Fixtures
# ----------------------------------------------------------------------


@pytest.fixture(autouse=True)
def reset_logger_level() -> Generator[None, None, None]:
    """Reset the app logger level before and after each test.

    The app logger is a module-level singleton, so a test that changes its
    level (e.g. via the CLI's --log-level) would otherwise leak into the next.
    """
    logger = mod_logs.getAppLogger()
    logger.setLevel(DEFAULT_TEST_LOG_LEVEL)
    yield
    logger.setLevel(DEFAULT_TEST_LOG_LEVEL)


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """An empty project root directory."""
    root = tmp_path / "project"
    root.mkdir()
    return root.resolve()
