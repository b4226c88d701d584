from __future__ import annotations

import threading
import time
from typing import Callable, Optional


class MillisecondIdSource:
    """Creation-timestamp ids (epoch milliseconds).

    Ids stay unique when several are requested within the same millisecond:
    the next id is bumped to ``last + 1``.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        self._clock = clock or time.time
        self._last = 0
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            candidate = int(self._clock() * 1000)
            if candidate <= self._last:
                candidate = self._last + 1
            self._last = candidate
            return candidate
