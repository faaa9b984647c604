# core/ticker.py
from __future__ import annotations

class FixedTicker:
    """Fixed-interval tick source driven by elapsed wall time.

    Stands in for a periodic timer: the host feeds it the milliseconds that
    passed since the last frame and gets back how many ticks are due.
    """
    def __init__(self, interval_ms: int = 90):
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self.interval_ms = interval_ms
        self._acc = 0.0
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        self._running = True
        self._acc = 0.0

    def stop(self) -> None:
        self._running = False
        self._acc = 0.0

    def update(self, elapsed_ms: float) -> int:
        if not self._running:
            return 0
        self._acc += max(0.0, float(elapsed_ms))
        due = int(self._acc // self.interval_ms)
        self._acc -= due * self.interval_ms
        return due
