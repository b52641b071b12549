# privachat/services/rate_limiter.py
"""
Fixed-window request limiter keyed by client address
"""

import math
import time
from typing import Callable, Dict, List

# Expired windows are swept once this many keys are tracked
_SWEEP_THRESHOLD = 10000


class FixedWindowRateLimiter:
    def __init__(self, max_requests: int, window_seconds: int, clock: Callable[[], float] = time.monotonic):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.clock = clock
        self._windows: Dict[str, List[float]] = {}  # key -> [window_start, count]

    def hit(self, key: str) -> bool:
        """Count one request for `key`. False once the window's budget is spent."""
        now = self.clock()
        window = self._windows.get(key)
        if window is None or now - window[0] >= self.window_seconds:
            if len(self._windows) >= _SWEEP_THRESHOLD:
                self._sweep(now)
            window = [now, 0]
            self._windows[key] = window

        if window[1] >= self.max_requests:
            return False
        window[1] += 1
        return True

    def retry_after(self, key: str) -> int:
        """Whole seconds until `key`'s current window resets"""
        window = self._windows.get(key)
        if window is None:
            return 0
        remaining = self.window_seconds - (self.clock() - window[0])
        return max(1, math.ceil(remaining))

    def reset(self):
        self._windows.clear()

    def _sweep(self, now: float):
        expired = [k for k, (start, _) in self._windows.items() if now - start >= self.window_seconds]
        for k in expired:
            del self._windows[k]
