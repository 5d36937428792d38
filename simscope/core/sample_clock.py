"""Wall-clock gate deciding when a new sample is due."""

from dataclasses import dataclass

from simscope.logging import get_logger

logger = get_logger(__name__)

DEFAULT_SAMPLE_INTERVAL = 1.0


@dataclass
class SampleClock:
    """Cooperative sampling gate.

    The clock never fires on its own. Callers poll :meth:`is_due` each
    frame and call :meth:`reset` after taking a sample, so sampling happens
    at most once per ``interval`` and otherwise at the caller's cadence.
    """

    interval: float = DEFAULT_SAMPLE_INTERVAL
    last_sample: float = 0.0

    def __post_init__(self) -> None:
        if self.interval <= 0:
            logger.warning(
                "Sample interval %s is not positive, using %s s",
                self.interval, DEFAULT_SAMPLE_INTERVAL,
            )
            self.interval = DEFAULT_SAMPLE_INTERVAL

    def is_due(self, now: float) -> bool:
        return now - self.last_sample >= self.interval

    def reset(self, now: float) -> None:
        self.last_sample = now
