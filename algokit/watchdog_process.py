"""The watchdog side of a mutually monitoring pair of processes.

The client publishes its settings in the environment and starts this program.
It runs a :class:`~algokit.watchdog.Watchdog` of its own, so that each side
revives the other when it stops answering heartbeats.
"""

from __future__ import annotations

import logging
import os
import sys
import time
from collections.abc import Mapping, Sequence
from typing import Optional

from algokit.watchdog import (
    ENV_INTERVAL,
    ENV_THRESHOLD,
    SET_ENV_FAILURE,
    SUCCESS,
    Watchdog,
    WatchdogError,
)

logger = logging.getLogger(__name__)

_POLL_SECONDS = 0.05


def _positive_setting(environ: Mapping[str, str], name: str) -> int:
    raw = environ.get(name)
    if raw is None:
        raise WatchdogError(SET_ENV_FAILURE, f"environment variable {name} is not set")
    try:
        value = int(raw.strip())
    except ValueError:
        value = 0
    if value <= 0:
        raise WatchdogError(
            SET_ENV_FAILURE, f"environment variable {name} must be a positive integer"
        )
    return value


def read_settings(environ: Mapping[str, str]) -> tuple[int, int]:
    """Return ``(threshold, interval)`` as published by the client."""
    return (
        _positive_setting(environ, ENV_THRESHOLD),
        _positive_setting(environ, ENV_INTERVAL),
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the watchdog until asked to stop; return its status code."""
    args = list(sys.argv if argv is None else argv)
    try:
        threshold, interval = read_settings(os.environ)
    except WatchdogError as exc:
        logger.debug("%s", exc)
        return exc.code

    watchdog = Watchdog(threshold, interval, args)
    try:
        watchdog.start()
    except WatchdogError as exc:
        logger.debug("failed to start watchdog: %s", exc)
        return exc.code

    while not watchdog.stop_requested and watchdog.status == SUCCESS:
        time.sleep(_POLL_SECONDS)

    try:
        watchdog.stop()
    except WatchdogError as exc:
        logger.debug("failed to stop watchdog: %s", exc)
        return exc.code
    logger.debug("watchdog process exiting")
    return watchdog.status


if __name__ == "__main__":
    sys.exit(main())