"""Fixed-capacity rolling series backed by a preallocated numpy array."""

from typing import Iterator

import numpy as np

from simscope.logging import get_logger

logger = get_logger(__name__)


class RollingSeries:
    """
    Ring buffer of numeric samples.

    The buffer is allocated once. Appending past capacity overwrites the
    oldest sample in place; iteration always runs oldest to newest.
    """

    DEFAULT_CAPACITY = 300

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity <= 0:
            logger.warning(
                "Series capacity %s is not positive, using %s",
                capacity, self.DEFAULT_CAPACITY,
            )
            capacity = self.DEFAULT_CAPACITY
        self._data = np.zeros(capacity, dtype=np.float64)
        self._start = 0
        self._len = 0

    @property
    def capacity(self) -> int:
        return self._data.shape[0]

    def append(self, value: float) -> None:
        """Add a sample, evicting the oldest one when full."""
        cap = self.capacity
        if self._len < cap:
            self._data[(self._start + self._len) % cap] = value
            self._len += 1
            return
        self._data[self._start] = value
        self._start = (self._start + 1) % cap

    def get(self, index: int) -> float:
        """Sample at logical position ``index`` (0 is the oldest)."""
        if index < 0 or index >= self._len:
            raise IndexError(f"Series index {index} out of range ({self._len} samples)")
        return float(self._data[(self._start + index) % self.capacity])

    def values(self) -> np.ndarray:
        """Ordered copy of the stored samples, oldest first."""
        if self._len == 0:
            return np.empty(0, dtype=np.float64)
        idx = (self._start + np.arange(self._len)) % self.capacity
        return self._data[idx]

    def max(self) -> float:
        """Largest stored sample, 0 for an empty series."""
        if self._len == 0:
            return 0.0
        return float(self.values().max())

    def last(self) -> float:
        if self._len == 0:
            return 0.0
        return self.get(self._len - 1)

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[float]:
        for i in range(self._len):
            yield self.get(i)
