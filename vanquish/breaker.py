"""
Circuit breaker guarding calls to a flaky upstream provider.

Closed   - calls go through; consecutive network failures are counted.
Open     - calls are refused until ``reset_timeout`` seconds have passed.
HalfOpen - a single trial call is let through; its outcome decides whether
           the breaker closes again or re-opens for another timeout.
"""
from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Optional

import requests

LOG = logging.getLogger(__name__)

CLOSED = "closed"
OPEN = "open"
HALF_OPEN = "half_open"


def is_network_error(exc: BaseException) -> bool:
    """True for transport-level failures (no connection, timeouts)."""
    return isinstance(exc, (requests.exceptions.ConnectionError, requests.exceptions.Timeout))


class CircuitBreaker:
    def __init__(
        self,
        failure_threshold: int = 3,
        reset_timeout: float = 300.0,
        clock: Optional[Callable[[], float]] = None,
        name: str = "provider",
    ):
        self.failure_threshold = max(1, int(failure_threshold))
        self.reset_timeout = float(reset_timeout)
        self.clock = clock or time.monotonic
        self.name = name

        self._state = CLOSED
        self._failures = 0
        self._opened_at: Optional[float] = None
        self._trial_in_flight = False
        self._lock = threading.Lock()

    @property
    def state(self) -> str:
        with self._lock:
            self._maybe_half_open()
            return self._state

    @property
    def failures(self) -> int:
        return self._failures

    def _maybe_half_open(self) -> None:
        if self._state == OPEN and self._opened_at is not None:
            if self.clock() - self._opened_at >= self.reset_timeout:
                self._state = HALF_OPEN
                self._trial_in_flight = False
                LOG.info(f"{self.name} breaker half-open: allowing a trial call")

    def allow_request(self) -> bool:
        with self._lock:
            self._maybe_half_open()
            if self._state == CLOSED:
                return True
            if self._state == HALF_OPEN and not self._trial_in_flight:
                self._trial_in_flight = True
                return True
            return False

    def record_success(self) -> None:
        with self._lock:
            if self._state != CLOSED:
                LOG.info(f"{self.name} breaker closed after successful call")
            self._state = CLOSED
            self._failures = 0
            self._opened_at = None
            self._trial_in_flight = False

    def record_failure(self, exc: Optional[BaseException] = None) -> None:
        """Count a failed call. Only network failures move the breaker."""
        if exc is not None and not is_network_error(exc):
            with self._lock:
                # a non-network failure still ends a half-open trial
                self._trial_in_flight = False
            return

        with self._lock:
            if self._state == HALF_OPEN:
                self._open()
                return
            self._failures += 1
            LOG.warning(f"{self.name} network error ({self._failures}/{self.failure_threshold})")
            if self._failures >= self.failure_threshold:
                self._open()

    def _open(self) -> None:
        self._state = OPEN
        self._opened_at = self.clock()
        self._trial_in_flight = False
        LOG.warning(
            f"{self.name} breaker open: skipping live calls for {self.reset_timeout:.0f}s"
        )

    def reset(self) -> None:
        with self._lock:
            self._state = CLOSED
            self._failures = 0
            self._opened_at = None
            self._trial_in_flight = False
