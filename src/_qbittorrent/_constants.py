# Copyright 2025 The Charmarr Project
# See LICENSE file for licensing details.

"""qBittorrent-specific constants."""

WEBUI_PORT = 8080
API_BASE_PATH = "/api/v2"

LOGIN_OK = "Ok."
LISTEN_PORT_KEY = "listen_port"
MAX_BODY_LOG = 10000
