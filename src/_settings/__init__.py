# Copyright 2025 The Charmarr Project
# See LICENSE file for licensing details.

"""Settings and logging setup for the port sync service."""

from _settings._constants import ENV_VARS
from _settings._logging import LogLevel, log, setup_logging
from _settings._settings import ConfigError, Settings, load_settings

__all__ = [
    "ENV_VARS",
    "ConfigError",
    "LogLevel",
    "Settings",
    "load_settings",
    "log",
    "setup_logging",
]
