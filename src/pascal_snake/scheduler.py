# scheduler.py
from __future__ import annotations
from typing import Callable

from .config import CFG


class VirtualClock:
    """Manually advanced millisecond clock for headless runs and tests."""

    def __init__(self, start_ms: int = 0):
        self.now_ms = start_ms

    def __call__(self) -> int:
        return self.now_ms

    def advance(self, ms: int) -> int:
        self.now_ms += ms
        return self.now_ms


class FixedRateScheduler:
    """
    Gates ticks to one per `interval_ms` of the injected clock.
    Late calls still yield a single tick; missed ticks are dropped, never queued.
    """

    def __init__(self, clock: Callable[[], int], interval_ms: int = CFG.tick_ms):
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        self.clock = clock
        self.interval_ms = interval_ms
        self.running = False
        self.last_tick = 0

    def start(self) -> None:
        self.running = True
        self.last_tick = self.clock()

    def stop(self) -> None:
        self.running = False

    def due(self) -> bool:
        if not self.running:
            return False
        now = self.clock()
        if now - self.last_tick < self.interval_ms:
            return False  # not time to move yet
        self.last_tick = now
        return True
