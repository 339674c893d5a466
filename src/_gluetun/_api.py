# Copyright 2025 The Charmarr Project
# See LICENSE file for licensing details.

"""Gluetun control server client."""

import re

import httpx
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from _gluetun._constants import API_RETRIES, API_WAIT_MAX, API_WAIT_MIN, PORT_FORWARDED_PATH

_PORT_PATTERN = re.compile(r"^[0-9]{1,5}$")


class GluetunApiError(Exception):
    """Base exception for Gluetun API errors."""


class GluetunPortNotReadyError(GluetunApiError):
    """Gluetun answered but has not obtained a forwarded port yet."""


class GluetunInvalidResponseError(GluetunApiError):
    """Gluetun was unreachable or answered with something that is not a port."""


class GluetunApi:
    """Gluetun HTTP control server client.

    The control server needs no authentication when reached from inside the
    gateway's network namespace.
    """

    def __init__(self, base_url: str, timeout: float = 10.0) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = httpx.Client(timeout=timeout, follow_redirects=True)

    def _url(self, path: str) -> str:
        """Build full API URL for given path."""
        return f"{self._base_url}{path}"

    @retry(
        stop=stop_after_attempt(API_RETRIES),
        wait=wait_exponential(min=API_WAIT_MIN, max=API_WAIT_MAX),
        retry=retry_if_exception_type((httpx.ConnectError, httpx.TimeoutException)),
        reraise=True,
    )
    def _fetch_forwarded_port(self) -> httpx.Response:
        """GET the forwarded port endpoint, retrying transport failures."""
        return self._client.get(self._url(PORT_FORWARDED_PATH))

    def get_forwarded_port(self) -> int:
        """Get the port currently forwarded by the VPN provider.

        Raises:
            GluetunPortNotReadyError: Gluetun reports port 0.
            GluetunInvalidResponseError: the request failed or the body holds no port.
        """
        try:
            response = self._fetch_forwarded_port()
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise GluetunInvalidResponseError(
                f"Gluetun API returned HTTP {e.response.status_code}. Value was: {e.response.text}"
            ) from e
        except httpx.HTTPError as e:
            raise GluetunInvalidResponseError(f"Gluetun API request failed: {e}") from e

        body = response.text
        try:
            port = response.json().get("port")
        except (ValueError, AttributeError) as e:
            raise GluetunInvalidResponseError(
                f"Response from Gluetun API is invalid. Value was: {body}"
            ) from e

        value = str(port) if isinstance(port, (int, str)) and not isinstance(port, bool) else ""
        if not _PORT_PATTERN.match(value):
            raise GluetunInvalidResponseError(
                f"Response from Gluetun API is invalid. Value was: {body}"
            )
        if int(value) == 0:
            raise GluetunPortNotReadyError("Gluetun has not gotten a port yet")
        return int(value)

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "GluetunApi":
        return self

    def __exit__(self, *args) -> None:
        self.close()
