# Copyright 2025 The Charmarr Project
# See LICENSE file for licensing details.

"""Gluetun control server constants."""

GLUETUN_HTTP_PORT = 8000
PORT_FORWARDED_PATH = "/v1/openvpn/portforwarded"

API_RETRIES = 3
API_WAIT_MIN = 1
API_WAIT_MAX = 5
