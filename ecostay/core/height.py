"""Height sources: the non-decreasing integer clock used for timestamps and expiry."""

import threading
import time
from typing import Callable, Protocol


class HeightSource(Protocol):
    """Supplies the current height. Must never go backwards."""

    def current_height(self) -> int:
        ...


class WallClockHeightSource:
    """
    Derive height from wall-clock time: (now - genesis) // block_interval.
    Remembers the highest height handed out so clock adjustments cannot rewind it.
    """

    def __init__(
        self,
        genesis_timestamp: int,
        block_interval_seconds: int,
        time_fn: Callable[[], float] = time.time,
    ) -> None:
        if block_interval_seconds <= 0:
            raise ValueError("block_interval_seconds must be positive")
        self._genesis = genesis_timestamp
        self._interval = block_interval_seconds
        self._time_fn = time_fn
        self._highest = 0
        self._lock = threading.Lock()

    def current_height(self) -> int:
        elapsed = max(0.0, self._time_fn() - self._genesis)
        height = int(elapsed // self._interval)
        with self._lock:
            if height > self._highest:
                self._highest = height
            return self._highest


class ManualHeightSource:
    """Explicitly driven height. Used by tests and replay tooling."""

    def __init__(self, height: int = 0) -> None:
        if height < 0:
            raise ValueError("height must be non-negative")
        self._height = height

    def current_height(self) -> int:
        return self._height

    def set(self, height: int) -> None:
        if height < self._height:
            raise ValueError(
                f"height cannot decrease (current={self._height}, requested={height})"
            )
        self._height = height

    def advance(self, blocks: int = 1) -> int:
        self.set(self._height + blocks)
        return self._height
