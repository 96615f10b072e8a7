# tests/conftest.py

"""Shared pytest fixtures for all market_catalog tests."""

from collections.abc import Generator
from pathlib import Path

import pytest

from src.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_paths(tmp_path: Path) -> Generator[None, None, None]:
    """Point log and catalog paths at a per-test temp directory."""
    original_logs = Settings.LOGS_DIR
    original_catalog = Settings.CATALOG_PATH
    Settings.LOGS_DIR = tmp_path / "logs"
    Settings.CATALOG_PATH = tmp_path / "data" / "market_catalog.json"
    yield
    Settings.LOGS_DIR = original_logs
    Settings.CATALOG_PATH = original_catalog
