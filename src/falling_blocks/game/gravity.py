from __future__ import annotations

from typing import Optional


class GravityScheduler:
    """Accumulates frame time and reports when an automatic drop is due.

    Hosts either pass the elapsed time of each frame to `advance`, or pass
    absolute frame timestamps to `advance_to`, in which case the scheduler
    keeps its own timing base. `rebase` forgets that base so the first frame
    after a pause contributes no time.
    """

    def __init__(self, interval_ms: float) -> None:
        self.interval_ms = interval_ms
        self.accumulator_ms = 0.0
        self._last_timestamp_ms: Optional[float] = None

    def advance(self, elapsed_ms: float) -> bool:
        self.accumulator_ms += max(0.0, float(elapsed_ms))
        return self.accumulator_ms > self.interval_ms

    def advance_to(self, timestamp_ms: float) -> bool:
        if self._last_timestamp_ms is None:
            elapsed = 0.0
        else:
            elapsed = timestamp_ms - self._last_timestamp_ms
        self._last_timestamp_ms = timestamp_ms
        return self.advance(elapsed)

    def reset(self) -> None:
        self.accumulator_ms = 0.0

    def rebase(self) -> None:
        self._last_timestamp_ms = None
