"""A thread that keeps a peer process alive by exchanging heartbeat signals.

The client starts a :class:`Watchdog`. A background thread sends ``SIGUSR1``
to the peer named by ``WD_PID`` at each interval and counts the signals sent.
Every ``SIGUSR1`` received back resets that count. Once the count reaches the
threshold, the peer is taken as dead and its program is started again.
``SIGUSR2`` asks the watchdog to stop.
"""

from __future__ import annotations

import logging
import os
import signal
import subprocess
import threading
from collections.abc import Sequence
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)

SUCCESS = 0
FAIL = -1
SCHED_RUN_FAILURE = -2
IPC_FAILURE = -3
SIGNAL_HANDLER_FAILURE = -4
WATCHDOG_CREATION_FAILURE = -5
SCHEDULER_CREATION_FAILURE = -6
TASK_ADDITION_FAILURE = -7
THREAD_CREATION_FAILURE = -8
SET_ENV_FAILURE = -9

ENV_WD_PID = "WD_PID"
ENV_CLIENT_PID = "WD_CLIENT_PID"
ENV_THRESHOLD = "WD_THRESHOLD"
ENV_INTERVAL = "WD_INTERVAL"
ENV_WD_RUNNING = "WD_RUNNING"
ENV_PROCESS_TYPE = "WD_PROCESS_TYPE"
PROCESS_TYPE_CLIENT = "CLIENT"
PROCESS_TYPE_WATCHDOG = "WATCHDOG"

SIG_CHECK = signal.SIGUSR1
SIG_STOP = signal.SIGUSR2

_JOIN_TIMEOUT = 1.0
_JOIN_RETRIES = 5

_ENV_NAMES = (
    ENV_WD_PID,
    ENV_WD_RUNNING,
    ENV_PROCESS_TYPE,
    ENV_THRESHOLD,
    ENV_INTERVAL,
    ENV_CLIENT_PID,
)


class WatchdogError(Exception):
    """A watchdog operation failed; ``code`` holds the failure code."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(message)
        self.code = code


def configure_environment(threshold: int, interval: int) -> None:
    """Publish the watchdog settings in this process's environment."""
    os.environ[ENV_THRESHOLD] = str(threshold)
    os.environ[ENV_INTERVAL] = str(interval)
    os.environ[ENV_CLIENT_PID] = str(os.getpid())
    os.environ[ENV_WD_RUNNING] = "1"
    os.environ[ENV_PROCESS_TYPE] = PROCESS_TYPE_CLIENT


def clear_environment() -> None:
    """Remove every watchdog setting from this process's environment."""
    for name in _ENV_NAMES:
        os.environ.pop(name, None)


def _env_int(name: str) -> Optional[int]:
    raw = os.environ.get(name)
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return 0


def _process_exists(pid: int) -> bool:
    try:
        os.kill(pid, 0)
    except ProcessLookupError:
        return False
    except PermissionError:
        return True
    return True


class Watchdog:
    """Monitors a peer process and revives ``argv[0]`` when it stops answering."""

    def __init__(
        self,
        threshold: int,
        interval: int,
        argv: Optional[Sequence[str]] = None,
    ) -> None:
        if threshold < 1 or interval < 1:
            raise ValueError("threshold and interval must be positive")
        self.threshold = threshold
        self.interval = interval
        self._argv = list(argv) if argv else []
        self.status = SUCCESS
        self.image_process: Optional[subprocess.Popen] = None
        self._counter = 0
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._previous_handlers: dict[int, Any] = {}

    @property
    def counter(self) -> int:
        """Signals sent since the peer last answered."""
        with self._lock:
            return self._counter

    @property
    def stop_requested(self) -> bool:
        """Whether the watchdog has been asked to stop."""
        return self._stop.is_set()

    def start(self) -> None:
        """Set up the environment and handlers and start the monitoring thread."""
        pid = os.getpid()
        logger.debug("start: threshold=%d interval=%d", self.threshold, self.interval)
        self._terminate_existing(pid)
        self._install_handlers()
        configure_environment(self.threshold, self.interval)
        self._stop.clear()

        if len(self._argv) > 2:
            self._create_image(self._argv[1:])
        else:
            os.environ[ENV_WD_PID] = str(pid)

        self._thread = threading.Thread(
            target=self._run, name="watchdog", daemon=True
        )
        try:
            self._thread.start()
        except RuntimeError as exc:
            self._restore_handlers()
            raise WatchdogError(THREAD_CREATION_FAILURE, str(exc)) from exc
        logger.debug("start completed")

    def stop(self) -> None:
        """Stop the monitoring thread and remove the watchdog settings."""
        if ENV_WD_PID not in os.environ:
            raise WatchdogError(SET_ENV_FAILURE, f"{ENV_WD_PID} is not set")
        self._stop.set()
        if self._previous_handlers:
            try:
                os.kill(os.getpid(), SIG_STOP)
            except OSError as exc:
                raise WatchdogError(FAIL, f"cannot send stop signal: {exc}") from exc

        thread = self._thread
        if thread is not None:
            for _ in range(_JOIN_RETRIES):
                thread.join(_JOIN_TIMEOUT)
                if not thread.is_alive():
                    break
                logger.debug("watchdog thread join timed out, retrying")
            else:
                logger.debug("watchdog thread did not exit; abandoning it")
        self._thread = None
        self._restore_handlers()
        clear_environment()
        logger.debug("stop completed")

    def send_signal(self, pid: Union[int, str]) -> int:
        """Send a heartbeat to ``pid``; return the interval until the next one.

        Returns 0 and requests a stop when the peer no longer exists.
        """
        try:
            target = int(pid)
        except (TypeError, ValueError) as exc:
            raise WatchdogError(IPC_FAILURE, f"invalid pid: {pid!r}") from exc
        if target <= 0:
            raise WatchdogError(IPC_FAILURE, f"invalid pid: {pid!r}")

        if not _process_exists(target):
            logger.debug("peer %d does not exist", target)
            self._stop.set()
            return 0
        try:
            os.kill(target, SIG_CHECK)
        except OSError as exc:
            logger.debug("failed to deliver a signal: %s", exc)
        else:
            with self._lock:
                self._counter += 1
                logger.debug("signal sent, counter=%d", self._counter)

        interval = _env_int(ENV_INTERVAL)
        return 0 if interval is None else interval

    def check_threshold(self) -> int:
        """Revive the peer if it missed too many signals; return the interval."""
        threshold = _env_int(ENV_THRESHOLD)
        interval = _env_int(ENV_INTERVAL)
        if threshold is None or interval is None:
            logger.debug("threshold or interval not set")
            return 0

        count = self.counter
        logger.debug("counter=%d threshold=%d", count, threshold)
        if count >= threshold:
            if not self._argv or not self._argv[0]:
                logger.debug("no program to restart")
                return interval
            program = self._argv[0]
            try:
                process = subprocess.Popen([program])
            except OSError as exc:
                raise WatchdogError(
                    WATCHDOG_CREATION_FAILURE, f"cannot restart {program}: {exc}"
                ) from exc
            logger.debug("restarted %s as %d", program, process.pid)
            with self._lock:
                self._counter = 0
        return interval

    def reset_counter(self) -> None:
        """Record an answer from the peer, unless a stop was requested."""
        if self._stop.is_set():
            logger.debug("heartbeat ignored: stopping")
            return
        with self._lock:
            self._counter = 0

    def request_stop(self) -> None:
        """Ask the monitoring thread to finish."""
        self._stop.set()

    def _terminate_existing(self, own_pid: int) -> None:
        existing = _env_int(ENV_WD_PID)
        if existing is None:
            return
        if existing > 0 and existing != own_pid and _process_exists(existing):
            logger.debug("terminating existing watchdog %d", existing)
            try:
                os.kill(existing, signal.SIGTERM)
                os.waitpid(existing, 0)
            except (ChildProcessError, ProcessLookupError):
                pass
        os.environ.pop(ENV_WD_PID, None)

    def _install_handlers(self) -> None:
        def on_check(signum: int, frame: Any) -> None:
            self.reset_counter()

        def on_stop(signum: int, frame: Any) -> None:
            self.request_stop()

        try:
            self._previous_handlers = {
                SIG_CHECK: signal.signal(SIG_CHECK, on_check),
                SIG_STOP: signal.signal(SIG_STOP, on_stop),
            }
        except ValueError as exc:
            self._restore_handlers()
            raise WatchdogError(SIGNAL_HANDLER_FAILURE, str(exc)) from exc

    def _restore_handlers(self) -> None:
        for signum, handler in self._previous_handlers.items():
            if handler is not None:
                signal.signal(signum, handler)
        self._previous_handlers = {}

    def _create_image(self, command: list[str]) -> None:
        env = {key: value for key, value in os.environ.items() if key != ENV_WD_PID}
        try:
            self.image_process = subprocess.Popen(command, env=env)
        except OSError as exc:
            self._restore_handlers()
            raise WatchdogError(
                WATCHDOG_CREATION_FAILURE, f"cannot start watchdog image: {exc}"
            ) from exc
        os.environ[ENV_WD_PID] = str(self.image_process.pid)
        logger.debug("watchdog image started with pid %d", self.image_process.pid)

    def _run(self) -> None:
        logger.debug("watchdog thread started")
        while not self._stop.is_set():
            pid = os.environ.get(ENV_WD_PID)
            if pid is None:
                logger.debug("%s not set, leaving loop", ENV_WD_PID)
                break
            try:
                self.send_signal(pid)
                if self._stop.wait(min(1, self.interval)):
                    break
                self.check_threshold()
            except WatchdogError as exc:
                logger.debug("watchdog failure: %s", exc)
                self.status = exc.code
                break
            self._stop.wait(max(self.interval - 1, 0))
        logger.debug("watchdog thread exiting")