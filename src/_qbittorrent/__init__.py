# Copyright 2025 The Charmarr Project
# See LICENSE file for licensing details.

"""qBittorrent-specific utilities."""

from _qbittorrent._api import QBittorrentApi, QBittorrentApiError, QBittorrentAuthError
from _qbittorrent._constants import API_BASE_PATH, WEBUI_PORT

__all__ = [
    "API_BASE_PATH",
    "WEBUI_PORT",
    "QBittorrentApi",
    "QBittorrentApiError",
    "QBittorrentAuthError",
]
