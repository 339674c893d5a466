# Copyright 2025 The Charmarr Project
# See LICENSE file for licensing details.

"""Gluetun-specific utilities."""

from _gluetun._api import (
    GluetunApi,
    GluetunApiError,
    GluetunInvalidResponseError,
    GluetunPortNotReadyError,
)
from _gluetun._constants import GLUETUN_HTTP_PORT, PORT_FORWARDED_PATH

__all__ = [
    "GLUETUN_HTTP_PORT",
    "PORT_FORWARDED_PATH",
    "GluetunApi",
    "GluetunApiError",
    "GluetunInvalidResponseError",
    "GluetunPortNotReadyError",
]
