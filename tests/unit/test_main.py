# Copyright 2025 The Charmarr Project
# See LICENSE file for licensing details.

"""Unit tests for the process entry point."""

import re
from unittest.mock import patch

import pytest

import port_sync
from _settings import ENV_VARS, LogLevel


@pytest.fixture
def clean_env(monkeypatch):
    """Remove any port sync variables inherited from the test runner."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_missing_credentials_exit_before_network(clean_env, capsys):
    """Missing credentials terminate immediately with no client created."""
    with (
        patch("port_sync.PortSyncReconciler") as mock_reconciler,
        patch("port_sync.QBittorrentApi") as mock_qbittorrent,
        patch("port_sync.GluetunApi") as mock_gluetun,
        pytest.raises(SystemExit) as exc_info,
    ):
        port_sync.main()

    assert exc_info.value.code == port_sync.EXIT_FAILURE
    mock_reconciler.assert_not_called()
    mock_qbittorrent.assert_not_called()
    mock_gluetun.assert_not_called()
    out = capsys.readouterr().out
    assert "[ERROR] qbUsername is undefined" in out


def test_invalid_log_level_still_timestamped(clean_env, capsys):
    """An invalid log level is reported as a timestamped error line."""
    clean_env.setenv("qbUsername", "admin")
    clean_env.setenv("qbPassword", "pass")
    clean_env.setenv("logLevel", "VERBOSE")

    with pytest.raises(SystemExit) as exc_info:
        port_sync.main()

    assert exc_info.value.code == port_sync.EXIT_FAILURE
    (line,) = capsys.readouterr().out.splitlines()
    assert re.match(r"^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] ", line)
    assert "[ERROR] logLevel was set to an invalid value" in line


def test_valid_settings_run_reconciler(clean_env, capsys):
    """Valid settings start the loop and its status becomes the exit status."""
    clean_env.setenv("qbUsername", "admin")
    clean_env.setenv("qbPassword", "hunter2")
    clean_env.setenv("logLevel", "DEBUG")
    clean_env.setenv("sleepTime", "60")

    with (
        patch("port_sync.PortSyncReconciler") as mock_reconciler,
        pytest.raises(SystemExit) as exc_info,
    ):
        mock_reconciler.return_value.run.return_value = port_sync.EXIT_FAILURE
        port_sync.main()

    assert exc_info.value.code == port_sync.EXIT_FAILURE
    settings = mock_reconciler.call_args.args[0]
    assert settings.poll_interval == 60
    assert settings.log_level is LogLevel.DEBUG
    out = capsys.readouterr().out
    assert "Data validation checks all passed" in out
    assert "hunter2" not in out
