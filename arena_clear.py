"""Timed blink animation between full-row detection and row removal"""
from dataclasses import dataclass, field
from typing import List


@dataclass
class LineClear:
    blink_ms: int = 100
    duration_ms: int = 400
    active: bool = False
    rows: List[int] = field(default_factory=list)
    start: float = 0
    elapsed: float = 0

    def begin(self, rows, now):
        self.active = True
        self.rows = sorted(rows)
        self.start = now
        self.elapsed = 0

    def update(self, now) -> bool:
        """Advance to `now`; True once the animation has run its full duration."""
        if not self.active:
            return False
        self.elapsed = now - self.start
        return self.elapsed >= self.duration_ms

    @property
    def blink_visible(self) -> bool:
        return self.active and int(self.elapsed // self.blink_ms) % 2 == 0

    def reset(self):
        self.active = False
        self.rows = []
        self.start = 0
        self.elapsed = 0
