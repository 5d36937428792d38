import logging

import numpy as np
import pytest

from simscope.core.ring_buffer import RollingSeries
from simscope.core.sample_set import Metric, TimeSeries


def test_series_keeps_last_values_in_order() -> None:
    series = RollingSeries(capacity=4)

    for v in range(10):
        series.append(v)

    assert len(series) == 4
    assert list(series) == [6.0, 7.0, 8.0, 9.0]
    np.testing.assert_array_equal(series.values(), [6, 7, 8, 9])


@pytest.mark.parametrize("capacity", [1, 3, 300])
def test_series_never_exceeds_capacity(capacity) -> None:
    series = RollingSeries(capacity=capacity)

    for v in range(capacity * 3 + 1):
        series.append(v)
        assert len(series) <= capacity

    expected = list(range(capacity * 2 + 1, capacity * 3 + 1))
    assert list(series) == expected


def test_series_partial_fill() -> None:
    series = RollingSeries(capacity=5)
    series.append(1.5)
    series.append(2.5)

    assert len(series) == 2
    assert series.get(0) == 1.5
    assert series.last() == 2.5
    assert series.max() == 2.5


def test_series_overwrites_in_place() -> None:
    series = RollingSeries(capacity=3)
    buffer = series._data

    for v in range(20):
        series.append(v)

    assert series._data is buffer


def test_empty_series() -> None:
    series = RollingSeries(capacity=3)

    assert len(series) == 0
    assert list(series) == []
    assert series.values().shape == (0,)
    assert series.max() == 0.0
    with pytest.raises(IndexError):
        series.get(0)


@pytest.mark.parametrize("capacity", [0, -5])
def test_non_positive_capacity_uses_default(capacity, caplog) -> None:
    caplog.set_level(logging.WARNING)
    series = RollingSeries(capacity=capacity)

    assert series.capacity == RollingSeries.DEFAULT_CAPACITY
    assert "not positive" in caplog.text


def test_time_series_appends_all_metrics_together() -> None:
    ts = TimeSeries(capacity=2)

    ts.append(1, 2, 3, 4, 5)
    ts.append(10, 20, 30, 40, 50)
    ts.append(100, 200, 300, 400, 500)

    assert len(ts) == 2
    assert ts.capacity == 2
    assert list(ts[Metric.ENTITIES]) == [10, 100]
    assert list(ts[Metric.ENTITY_CAPACITY]) == [20, 200]
    assert list(ts[Metric.MEMORY]) == [30, 300]
    assert list(ts[Metric.MEMORY_USED]) == [40, 400]
    assert list(ts[Metric.RATE]) == [50, 500]
    assert all(len(ts[m]) == 2 for m in ts)
