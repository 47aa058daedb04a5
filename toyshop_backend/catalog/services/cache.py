# catalog/services/cache.py

"""
EXPIRING VALUE HOLDER

A single memoized value that carries its own expiry timestamp.

Contract:
- get_or_compute(fn) returns the held value while it is fresh, otherwise
  calls fn(), stores the result with a new expiry and returns it.
- invalidate() drops the value; the next read recomputes.
- ttl_seconds <= 0 disables holding (every read computes).
- Failures in fn() propagate and leave the previous state untouched.

Staleness up to ttl_seconds is accepted by callers that do not invalidate.
"""

from __future__ import annotations

import threading
import time
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class ExpiringValue(Generic[T]):
    def __init__(self, ttl_seconds: float, *, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = float(ttl_seconds)
        self._clock = clock
        self._lock = threading.Lock()
        self._value: Optional[T] = None
        self._expires_at: Optional[float] = None

    @property
    def is_fresh(self) -> bool:
        if self._expires_at is None:
            return False
        return self._clock() < self._expires_at

    def get_or_compute(self, compute: Callable[[], T]) -> T:
        if self.ttl_seconds <= 0:
            return compute()

        with self._lock:
            if self.is_fresh:
                return self._value

            value = compute()
            self._value = value
            self._expires_at = self._clock() + self.ttl_seconds
            return value

    def invalidate(self) -> None:
        with self._lock:
            self._value = None
            self._expires_at = None
