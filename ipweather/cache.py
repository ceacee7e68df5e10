from __future__ import annotations

import time
from threading import Lock
from typing import Optional, Tuple

from .entities import WeatherData


class WeatherCache:
    """Single-slot store for the last successful lookup.

    There is one entry per process: the weather for wherever the caller
    resolved to last time.  A stale entry is not evicted, ``read`` just stops
    returning it until the next ``write`` replaces it.
    """

    DEFAULT_TTL = 30 * 60

    def __init__(self, ttl: float = DEFAULT_TTL, time_func=time.monotonic) -> None:
        self.ttl = ttl
        self._time_func = time_func
        self._entry: Optional[Tuple[WeatherData, float]] = None
        self._lock = Lock()

    def read(self) -> Optional[WeatherData]:
        with self._lock:
            entry = self._entry
            now = self._time_func()
        if entry is None:
            return None
        value, captured_at = entry
        if now - captured_at < self.ttl:
            return value
        return None

    def write(self, value: WeatherData) -> None:
        with self._lock:
            self._entry = (value, self._time_func())

    def clear(self) -> None:
        with self._lock:
            self._entry = None

    @property
    def captured_at(self) -> Optional[float]:
        with self._lock:
            return self._entry[1] if self._entry else None


__all__ = ["WeatherCache"]
