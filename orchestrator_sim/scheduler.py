from __future__ import annotations

import heapq
import itertools
import time
from typing import Any, List, Tuple

from loguru import logger


class VirtualClock:
    """Millisecond clock that jumps forward instead of sleeping."""

    def __init__(self, start_ms: int = 0) -> None:
        self._now = start_ms

    def now_ms(self) -> int:
        return self._now

    def sleep_until(self, due_ms: int) -> None:
        if due_ms > self._now:
            self._now = due_ms


class RealClock:
    """Wall clock on time.monotonic; time_scale stretches or shrinks every wait."""

    def __init__(self, time_scale: float = 1.0) -> None:
        if time_scale <= 0:
            raise ValueError(f"time_scale must be > 0, got {time_scale}")
        self.time_scale = time_scale
        self._origin = time.monotonic()

    def now_ms(self) -> int:
        return int((time.monotonic() - self._origin) * 1000 / self.time_scale)

    def sleep_until(self, due_ms: int) -> None:
        remaining = due_ms - self.now_ms()
        if remaining > 0:
            time.sleep(remaining * self.time_scale / 1000.0)


class Scheduler:
    def __init__(self, clock=None) -> None:
        self.clock = clock or VirtualClock()
        self._queue: List[Tuple[int, int, Any]] = []
        self._seq = itertools.count()

    @property
    def pending(self) -> int:
        return len(self._queue)

    def now_ms(self) -> int:
        return self.clock.now_ms()

    def schedule(self, delay_ms: int, item: Any, base_ms: int | None = None) -> int:
        """Queue ``item`` ``delay_ms`` after ``base_ms`` (default: now). Returns the due time."""
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be >= 0, got {delay_ms}")
        start = self.clock.now_ms() if base_ms is None else base_ms
        due = start + delay_ms
        heapq.heappush(self._queue, (due, next(self._seq), item))
        return due

    def pop_due(self) -> Tuple[int, Any]:
        """Wait for the earliest item and return ``(due_ms, item)``."""
        if not self._queue:
            raise IndexError("pop_due from an empty scheduler")
        due, _, item = heapq.heappop(self._queue)
        self.clock.sleep_until(due)
        return due, item

    def clear(self) -> None:
        if self._queue:
            logger.debug(f"scheduler_clear | dropped={len(self._queue)}")
        self._queue.clear()
