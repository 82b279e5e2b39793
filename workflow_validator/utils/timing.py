# workflow_validator/utils/timing.py
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional


# ---------------- Monotonic time helpers ----------------

def now_ms() -> float:
    """Monotonic time in milliseconds (sub-millisecond precision)."""
    return time.perf_counter_ns() / 1_000_000


def human_ms(ms: float) -> str:
    return f"{ms:.3f} milliseconds" if ms < 1000 else f"{ms / 1000:.3f} seconds"


# ---------------- Stopwatch ----------------

@dataclass
class Stopwatch:
    """Simple stopwatch usable as a context manager."""
    start_ms: Optional[float] = None
    stop_ms: Optional[float] = None

    def start(self) -> "Stopwatch":
        self.start_ms = now_ms()
        self.stop_ms = None
        return self

    def stop(self) -> float:
        self.stop_ms = now_ms()
        return self.elapsed_ms()

    def elapsed_ms(self) -> float:
        if self.start_ms is None:
            return 0.0
        end = self.stop_ms if self.stop_ms is not None else now_ms()
        return max(0.0, end - self.start_ms)

    def __enter__(self) -> "Stopwatch":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
