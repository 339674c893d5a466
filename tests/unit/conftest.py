# Copyright 2025 The Charmarr Project
# See LICENSE file for licensing details.

"""Fixtures for unit tests."""

import logging
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from _settings import Settings
from _settings._constants import LOG_HANDLER_NAME


@pytest.fixture
def settings() -> Settings:
    """Valid settings with default interval and URLs."""
    return Settings(username="admin", password="adminadmin", poll_interval=1800)


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop the stdout handler installed by setup_logging after each test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler.get_name() == LOG_HANDLER_NAME:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def no_retry_wait():
    """Skip tenacity backoff sleeps."""
    with patch("time.sleep") as mock_sleep:
        yield mock_sleep


@pytest.fixture
def mock_qbittorrent():
    """Patch QBittorrentApi in port_sync; the context manager yields the same mock."""
    with patch("port_sync.QBittorrentApi") as mock_class:
        mock_instance = MagicMock()
        mock_instance.__enter__.return_value = mock_instance
        mock_class.return_value = mock_instance
        yield mock_instance


@pytest.fixture
def mock_gluetun():
    """Patch GluetunApi in port_sync; the context manager yields the same mock."""
    with patch("port_sync.GluetunApi") as mock_class:
        mock_instance = MagicMock()
        mock_instance.__enter__.return_value = mock_instance
        mock_class.return_value = mock_instance
        yield mock_instance
