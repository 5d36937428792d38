"""Steps-per-second estimation over whole-second windows."""

from dataclasses import dataclass, field
from typing import Optional

MIN_WINDOW = 1.0


@dataclass
class RateEstimator:
    """Convert a step counter observed over wall time into a rate.

    Updates closer than ``MIN_WINDOW`` seconds to the last accepted one are
    ignored, so the rate is always an average over at least one second.
    """

    _last_step: int = field(default=0, init=False)
    _last_time: Optional[float] = field(default=None, init=False)
    _step_duration: float = field(default=0.0, init=False)

    def update(self, step: int, now: float) -> None:
        """Feed the current step counter and time (seconds)."""
        if self._last_time is None:
            self._last_step = step
            self._last_time = now
            return

        delta = now - self._last_time
        if delta < MIN_WINDOW:
            return

        steps = step - self._last_step
        if steps > 0:
            self._step_duration = delta / steps

        self._last_step = step
        self._last_time = now

    @property
    def step_duration(self) -> float:
        """Seconds per step, 0 until a rate has been established."""
        return self._step_duration

    @property
    def rate(self) -> float:
        """Steps per second, 0 until a rate has been established."""
        if self._step_duration == 0:
            return 0.0
        return 1.0 / self._step_duration
