"""Tick-based single-shot delays for the simulated photo analysis and voice
recording. A started task always completes after its delay; there is no
cancellation and no failure outcome.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SimulatedTask:
    duration_ms: int
    started_at: int | None = None
    completed: bool = False

    @property
    def running(self) -> bool:
        return self.started_at is not None and not self.completed

    def start(self, now: int) -> bool:
        """Start the delay; returns False if it is already running."""
        if self.running:
            return False
        self.started_at = now
        self.completed = False
        return True

    def poll(self, now: int) -> bool:
        """Return True exactly once, on the first poll after the delay."""
        if not self.running or self.started_at is None:
            return False
        if now - self.started_at < self.duration_ms:
            return False
        self.completed = True
        return True

    def progress(self, now: int) -> float:
        if self.started_at is None:
            return 0.0
        if self.completed or self.duration_ms <= 0:
            return 1.0
        return max(0.0, min(1.0, (now - self.started_at) / self.duration_ms))

    def reset(self) -> None:
        self.started_at = None
        self.completed = False
