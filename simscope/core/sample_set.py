"""Named group of rolling series appended together once per sample."""

from enum import Enum
from typing import Dict, Iterator

from .ring_buffer import RollingSeries


class Metric(Enum):
    """Time series kept by the monitor, with their plot captions."""
    ENTITIES = "Entities"
    ENTITY_CAPACITY = "Capacity"
    MEMORY = "Memory"
    MEMORY_USED = "Memory used"
    RATE = "TPS"


class TimeSeries:
    """
    One RollingSeries per Metric, all sharing a capacity.

    Index ``i`` in every series refers to the same sample tick, because
    samples are only ever added through :meth:`append`.
    """

    def __init__(self, capacity: int = RollingSeries.DEFAULT_CAPACITY):
        self._series: Dict[Metric, RollingSeries] = {
            metric: RollingSeries(capacity) for metric in Metric
        }

    def append(
        self,
        entities: float,
        entity_capacity: float,
        memory: float,
        memory_used: float,
        rate: float,
    ) -> None:
        """Append one sample to every series."""
        self._series[Metric.ENTITIES].append(entities)
        self._series[Metric.ENTITY_CAPACITY].append(entity_capacity)
        self._series[Metric.MEMORY].append(memory)
        self._series[Metric.MEMORY_USED].append(memory_used)
        self._series[Metric.RATE].append(rate)

    def __getitem__(self, metric: Metric) -> RollingSeries:
        return self._series[metric]

    def __iter__(self) -> Iterator[Metric]:
        return iter(self._series)

    def __len__(self) -> int:
        """Number of samples taken so far, capped at capacity."""
        return len(self._series[Metric.ENTITIES])

    @property
    def capacity(self) -> int:
        return self._series[Metric.ENTITIES].capacity
