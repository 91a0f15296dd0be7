"""
pipelines/ids.py

Prefixed, millisecond-stamped identifiers ("RES-1718000000000").

Stamps are strictly increasing per factory: when the clock has not moved past
the last issued stamp (same millisecond, or the wall clock stepped back) the
next stamp is ``last + 1``.
"""

from __future__ import annotations

import threading
import time
from typing import Callable


def _wall_clock_millis() -> int:
    return time.time_ns() // 1_000_000


class IdFactory:
    def __init__(self, clock: Callable[[], int] = _wall_clock_millis) -> None:
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def next_stamp(self) -> int:
        with self._lock:
            stamp = max(self._clock(), self._last + 1)
            self._last = stamp
            return stamp

    def new_id(self, prefix: str) -> str:
        return f"{prefix}-{self.next_stamp()}"
