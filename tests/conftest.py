# tests/conftest.py

"""Shared pytest fixtures for the border_helper tests."""

from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest

from src.config.settings import Settings


@pytest.fixture(autouse=True)
def mock_sleep() -> Generator[None, None, None]:
    """Patch time.sleep globally so API retry loops run instantly."""
    with patch("time.sleep"):
        yield


@pytest.fixture(autouse=True)
def isolated_saved_places(tmp_path: Path) -> Generator[Path, None, None]:
    """Keep saved places written by tests out of the real data dir."""
    path = tmp_path / "saved_places.json"
    with patch.object(Settings, "SAVED_PLACES_PATH", path):
        yield path
