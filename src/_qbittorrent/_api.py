# Copyright 2025 The Charmarr Project
# See LICENSE file for licensing details.

"""qBittorrent WebUI API client."""

import json

import httpx

from _qbittorrent._constants import API_BASE_PATH, LISTEN_PORT_KEY, LOGIN_OK, MAX_BODY_LOG


class QBittorrentApiError(Exception):
    """Base exception for qBittorrent API errors."""


class QBittorrentAuthError(QBittorrentApiError):
    """The WebUI rejected the login."""


def _truncate(body: str) -> str:
    if len(body) > MAX_BODY_LOG:
        return body[:MAX_BODY_LOG] + "... (truncated)"
    return body


class QBittorrentApi:
    """qBittorrent WebUI API client.

    Uses cookie-based session authentication. Call authenticate() before
    making other API calls. The session cookie lives in this instance's
    client and is dropped on close(), so use one instance per sync cycle.
    """

    def __init__(self, base_url: str, timeout: float = 10.0) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = httpx.Client(timeout=timeout, follow_redirects=True)

    def _url(self, path: str) -> str:
        """Build full API URL for given path."""
        return f"{self._base_url}{API_BASE_PATH}{path}"

    def authenticate(self, username: str, password: str) -> None:
        """Authenticate and store session cookie.

        The Referer header is required by the WebUI's CSRF protection.
        """
        try:
            response = self._client.post(
                self._url("/auth/login"),
                data={"username": username, "password": password},
                headers={"Referer": self._base_url},
            )
        except httpx.HTTPError as e:
            raise QBittorrentApiError(f"Authentication request failed: {e}") from e
        if response.status_code != 200 or response.text != LOGIN_OK:
            raise QBittorrentAuthError(
                f"API returned the following message upon authentication attempt: {response.text}"
            )

    def get_listen_port(self) -> int:
        """Get the configured incoming connections port."""
        try:
            response = self._client.get(self._url("/app/preferences"))
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise QBittorrentApiError(f"Failed to read preferences: {e}") from e

        # Banned IP lists come back newline separated, sometimes unescaped.
        try:
            prefs = json.loads(response.text, strict=False)
        except ValueError as e:
            raise QBittorrentApiError(
                f"Preferences response is not valid JSON: {_truncate(response.text)}"
            ) from e

        port = prefs.get(LISTEN_PORT_KEY) if isinstance(prefs, dict) else None
        if not isinstance(port, int) or isinstance(port, bool):
            raise QBittorrentApiError(f"Preferences response has no usable listen_port: {port!r}")
        return port

    def set_listen_port(self, port: int) -> bool:
        """Set the incoming connections port.

        The WebUI expects the value as a string inside the json form field.

        Returns:
            True if qBittorrent accepted the request. The new value is not re-read.
        """
        try:
            response = self._client.post(
                self._url("/app/setPreferences"),
                data={"json": json.dumps({LISTEN_PORT_KEY: str(port)})},
            )
        except httpx.HTTPError as e:
            raise QBittorrentApiError(f"Failed to set preferences: {e}") from e
        return response.status_code == 200

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "QBittorrentApi":
        return self

    def __exit__(self, *args) -> None:
        self.close()
