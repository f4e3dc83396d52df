"""Per-game throttling of expensive requests."""

from __future__ import annotations

import math
import threading
import time
from typing import Callable

WAIT_REQUEST_TIMEOUT = 10.0


class RetryTimers:
    """Remembers when each game was last served and how long to wait."""

    def __init__(
        self,
        timeout: float = WAIT_REQUEST_TIMEOUT,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.timeout = timeout
        self.timers: dict[int, float] = {}
        self._clock = clock
        self._lock = threading.Lock()

    def discard_outdated(self) -> None:
        """Forget timers older than the timeout."""
        now = self._clock()
        self.timers = {
            group_id: started
            for group_id, started in self.timers.items()
            if now - started <= self.timeout
        }

    def setup(self, group_id: int) -> None:
        """Start a timer for the game."""
        self.timers[group_id] = self._clock()

    def retry_after_seconds(self, group_id: int) -> int:
        """Seconds the client must wait, or 0 after starting a fresh timer."""
        with self._lock:
            self.discard_outdated()
            started = self.timers.get(group_id)
            if started is not None:
                since = self._clock() - started
                if since < self.timeout:
                    return math.ceil(self.timeout - since)
            self.setup(group_id)
            return 0