"""Blocking, thread-safe sliding-window rate limiter."""

import enum
import logging
import threading
import time
from collections import deque
from typing import Callable, Optional, Union

from docgate.errors import AdmissionInterrupted

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 1


class TimeUnit(enum.Enum):
    """Window lengths expressed as one unit of time."""

    SECONDS = 1.0
    MINUTES = 60.0
    HOURS = 3600.0
    DAYS = 86400.0

    @property
    def seconds(self) -> float:
        return self.value


class RateLimiter:
    """Admit at most ``capacity`` operations per trailing ``window_seconds``.

    Admission timestamps live in a fixed-size FIFO guarded by a lock.  A
    caller that finds the FIFO full either evicts the oldest timestamp (when
    it has aged out of the window) or sleeps until it will have, then checks
    again from scratch.  Each admission is recorded permanently and only
    ages out; nothing is released early.

    Usage::

        limiter = RateLimiter(capacity=10, window_seconds=TimeUnit.MINUTES)
        limiter.acquire()   # blocks while 10 calls started in the last minute
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY,
                 window_seconds: Union[float, TimeUnit] = 1.0,
                 *, clock: Callable[[], float] = time.monotonic) -> None:
        """Initialize the limiter.

        Args:
            capacity: Maximum admissions per window.  Values below 1 fall
                back to ``DEFAULT_CAPACITY`` instead of raising.
            window_seconds: Window length in seconds, or a ``TimeUnit``
                meaning one unit of that length.
            clock: Monotonic time source, in seconds.

        Raises:
            ValueError: If the window is not positive.
        """
        if isinstance(window_seconds, TimeUnit):
            window_seconds = window_seconds.seconds
        if window_seconds <= 0:
            raise ValueError("window_seconds must be > 0")

        if capacity < 1:
            logger.warning(
                "Invalid capacity %r, falling back to %d", capacity, DEFAULT_CAPACITY
            )
            capacity = DEFAULT_CAPACITY

        self._capacity = capacity
        self._window = float(window_seconds)
        self._clock = clock
        self._lock = threading.Lock()
        self._closed = threading.Event()
        self._admissions: deque[float] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def window_seconds(self) -> float:
        return self._window

    # -----------------------------------------------------------------
    # Admission
    # -----------------------------------------------------------------

    def _try_admit(self) -> Optional[float]:
        """One atomic admission attempt.

        Returns ``None`` when admitted, otherwise the number of seconds
        until the oldest admission leaves the window.
        """
        with self._lock:
            while True:
                now = self._clock()
                if len(self._admissions) < self._capacity:
                    self._admissions.append(now)
                    return None

                elapsed = now - self._admissions[0]
                if elapsed >= self._window:
                    self._admissions.popleft()
                    continue

                return self._window - elapsed

    def acquire(self, cancel: Optional[threading.Event] = None) -> None:
        """Block until an admission can be recorded, then record it.

        Args:
            cancel: Optional event; setting it aborts the wait.

        Raises:
            AdmissionInterrupted: If *cancel* is set or the limiter is
                closed while waiting.  Nothing is recorded in that case.
        """
        while True:
            if self._closed.is_set() or (cancel is not None and cancel.is_set()):
                raise AdmissionInterrupted("rate limiter wait was cancelled")

            wait = self._try_admit()
            if wait is None:
                return

            logger.debug("Rate limit reached, waiting %.3fs", wait)
            self._sleep(wait, cancel)

    def _sleep(self, seconds: float, cancel: Optional[threading.Event]) -> None:
        """Wait up to *seconds*, waking early only when interrupted."""
        if cancel is None:
            self._closed.wait(seconds)
            return

        deadline = self._clock() + seconds
        # Poll both events in short slices; threading has no multi-event wait.
        while not (self._closed.is_set() or cancel.is_set()):
            remaining = deadline - self._clock()
            if remaining <= 0:
                return
            cancel.wait(min(remaining, 0.05))

    def try_acquire(self) -> bool:
        """Record an admission only if a slot is free right now.

        Denied attempts do not consume a slot.
        """
        if self._closed.is_set():
            return False
        return self._try_admit() is None

    # -----------------------------------------------------------------
    # Introspection
    # -----------------------------------------------------------------

    def _evict_stale(self, now: float) -> None:
        while self._admissions and now - self._admissions[0] >= self._window:
            self._admissions.popleft()

    def remaining(self) -> int:
        """Admissions still available in the current window."""
        with self._lock:
            self._evict_stale(self._clock())
            return self._capacity - len(self._admissions)

    def retry_after(self) -> Optional[float]:
        """Seconds until the oldest admission expires.

        Returns ``None`` if the limiter is not currently full.
        """
        with self._lock:
            now = self._clock()
            self._evict_stale(now)
            if len(self._admissions) < self._capacity:
                return None
            return self._window - (now - self._admissions[0])

    # -----------------------------------------------------------------
    # Shutdown
    # -----------------------------------------------------------------

    def close(self) -> None:
        """Abort every pending and future ``acquire()``."""
        self._closed.set()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def __enter__(self) -> "RateLimiter":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
