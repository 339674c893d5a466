# Copyright 2025 The Charmarr Project
# See LICENSE file for licensing details.

"""Level-filtered, timestamped logging to stdout."""

import logging
import sys
from enum import Enum

from _settings._constants import LOG_DATE_FORMAT, LOG_FORMAT, LOG_HANDLER_NAME, QUIET_LOGGERS

logger = logging.getLogger(__name__)


class LogLevel(str, Enum):
    """Supported log verbosities, lowest first."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    ERROR = "ERROR"

    @property
    def rank(self) -> int:
        """Numeric rank: DEBUG=0, INFO=1, ERROR=2."""
        return list(LogLevel).index(self)

    @property
    def logging_level(self) -> int:
        """Matching level of the logging module."""
        return getattr(logging, self.value)


def setup_logging(level: LogLevel | str = LogLevel.DEBUG) -> None:
    """Install the stdout handler on the root logger and set the threshold.

    Safe to call more than once: the previous port-sync handler is replaced,
    so reconfiguring the level after settings load does not duplicate lines.
    """
    level = LogLevel(level)
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == LOG_HANDLER_NAME:
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(LOG_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    root.addHandler(handler)
    root.setLevel(level.logging_level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def log(message: str, level: str) -> None:
    """Log a message at a level given by name.

    An unknown level name is reported as an error line instead of raising.
    """
    try:
        log_level = LogLevel(level)
    except ValueError:
        logger.error("Log level %s not defined", level)
        return
    logger.log(log_level.logging_level, message)
