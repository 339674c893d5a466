#!/usr/bin/env python3
# Copyright 2025 The Charmarr Project
# See LICENSE file for licensing details.

"""Keep qBittorrent's listen port in sync with Gluetun's forwarded port.

Each cycle authenticates to the qBittorrent WebUI, reads the forwarded port
from Gluetun, reads qBittorrent's listen port and updates it when the two
differ. Any failure ends the process with a non-zero status; retrying is left
to the container restart policy.
"""

import logging
import os
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass

from _gluetun import GluetunApi, GluetunApiError
from _qbittorrent import QBittorrentApi, QBittorrentApiError
from _settings import ConfigError, Settings, load_settings, log, setup_logging

logger = logging.getLogger(__name__)

STARTUP_DELAY = 30
EXIT_FAILURE = 1


@dataclass(frozen=True)
class CycleResult:
    """Outcome of one successful sync cycle."""

    forwarded_port: int
    previous_port: int
    updated: bool


class PortSyncReconciler:
    """Reconciles qBittorrent's listen port against Gluetun's forwarded port."""

    def __init__(
        self,
        settings: Settings,
        sleep: Callable[[float], None] = time.sleep,
        startup_delay: int = STARTUP_DELAY,
    ) -> None:
        self._settings = settings
        self._sleep = sleep
        self._startup_delay = startup_delay

    def run_cycle(self) -> CycleResult:
        """Run one sync cycle.

        The qBittorrent session only lives for the duration of the cycle.

        Raises:
            GluetunApiError: the forwarded port could not be read.
            QBittorrentApiError: login, reading or writing preferences failed.
        """
        settings = self._settings
        with QBittorrentApi(settings.qbittorrent_url, timeout=settings.http_timeout) as qbittorrent:
            logger.debug("Attempting to authenticate to %s", settings.qbittorrent_url)
            qbittorrent.authenticate(settings.username, settings.password)
            logger.debug("Successfully authenticated to the qBittorrent API")

            logger.debug("Requesting forwarded port from %s", settings.gluetun_url)
            with GluetunApi(settings.gluetun_url, timeout=settings.http_timeout) as gluetun:
                forwarded_port = gluetun.get_forwarded_port()
            logger.debug("Gluetun has a forwarded port %s", forwarded_port)

            listen_port = qbittorrent.get_listen_port()
            logger.debug("qBittorrent is currently listening on port %s", listen_port)

            if forwarded_port == listen_port:
                logger.info(
                    "qBittorrent listening port is already configured properly. "
                    "Currently listening on %s",
                    forwarded_port,
                )
                return CycleResult(forwarded_port, listen_port, updated=False)

            if not qbittorrent.set_listen_port(forwarded_port):
                logger.debug("qBittorrent did not acknowledge the preferences update")
            logger.info(
                "Updated qBittorrent listening port from %s to %s", listen_port, forwarded_port
            )
            return CycleResult(forwarded_port, listen_port, updated=True)

    def run(self) -> int:
        """Sync forever.

        Returns:
            Exit status, only once a cycle has failed.
        """
        logger.debug("Waiting %ss for Gluetun to get a port forwarded", self._startup_delay)
        self._sleep(self._startup_delay)

        while True:
            try:
                self.run_cycle()
            except (GluetunApiError, QBittorrentApiError) as e:
                logger.error("%s - exiting to retry", e)
                return EXIT_FAILURE
            self._sleep(self._settings.poll_interval)


def main() -> None:
    """Entry point: validate the environment, then run the sync loop."""
    setup_logging()
    try:
        settings = load_settings(os.environ)
    except ConfigError as e:
        log(str(e), "ERROR")
        sys.exit(EXIT_FAILURE)

    setup_logging(settings.log_level)
    logger.debug("Data validation checks all passed: %s", settings.redacted())
    sys.exit(PortSyncReconciler(settings).run())


if __name__ == "__main__":
    main()
