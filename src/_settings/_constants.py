# Copyright 2025 The Charmarr Project
# See LICENSE file for licensing details.

"""Environment variable names and defaults."""

from _gluetun._constants import GLUETUN_HTTP_PORT
from _qbittorrent._constants import WEBUI_PORT

ENV_USERNAME = "qbUsername"
ENV_PASSWORD = "qbPassword"
ENV_POLL_INTERVAL = "sleepTime"
ENV_LOG_LEVEL = "logLevel"
ENV_QBITTORRENT_URL = "qbHostname"
ENV_GLUETUN_URL = "gtHostname"
ENV_HTTP_TIMEOUT = "httpTimeout"

ENV_VARS = (
    ENV_USERNAME,
    ENV_PASSWORD,
    ENV_POLL_INTERVAL,
    ENV_LOG_LEVEL,
    ENV_QBITTORRENT_URL,
    ENV_GLUETUN_URL,
    ENV_HTTP_TIMEOUT,
)

DEFAULT_POLL_INTERVAL = 1800
MAX_POLL_INTERVAL = 365 * 24 * 3600
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_QBITTORRENT_URL = f"http://localhost:{WEBUI_PORT}"
DEFAULT_GLUETUN_URL = f"http://localhost:{GLUETUN_HTTP_PORT}"
DEFAULT_HTTP_TIMEOUT = 10

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_HANDLER_NAME = "port-sync"
QUIET_LOGGERS = ("httpx", "httpcore")
