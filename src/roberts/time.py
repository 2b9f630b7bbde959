from __future__ import annotations

import math
import time


class Time:
    """Frame clock sampled once per frame from a monotonic source."""

    def __init__(self, clock=time.monotonic) -> None:
        self._clock = clock
        self.last = clock()
        self.delta = 0.0
        self.fps = 0.0

    def tick(self) -> float:
        now = self._clock()
        self.delta = clamp_delta(now - self.last)
        self.last = now
        if self.delta > 0:
            self.fps = 1.0 / self.delta
        return self.delta


def clamp_delta(delta: float) -> float:
    """Elapsed time usable by animation: never negative, never NaN."""
    if not math.isfinite(delta) or delta < 0.0:
        return 0.0
    return delta
