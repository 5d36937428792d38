import numpy as np
import pytest

from simscope.core.layout import Rect
from simscope.core.ring_buffer import RollingSeries
from simscope.gui.canvas import DrawBatch, PolylinePrim
from simscope.plots.series_plot import draw_series_plot, series_points


def _series(values, capacity=10):
    s = RollingSeries(capacity)
    for v in values:
        s.append(v)
    return s


class TestSeriesPoints:
    def test_spans_width_newest_at_right(self):
        rect = Rect(10, 0, 100, 50)
        points = series_points(np.array([0.0, 5.0, 10.0]), rect, 2.0)

        np.testing.assert_allclose(points[:, 0], [10, 60, 110])
        np.testing.assert_allclose(points[:, 1], [50, 40, 30])

    @pytest.mark.parametrize("values", [[], [3.0]])
    def test_fewer_than_two_samples(self, values):
        points = series_points(np.array(values), Rect(0, 0, 100, 50), 1.0)
        assert points.shape == (0, 2)


class TestDrawSeriesPlot:
    def test_shared_scale_across_series(self):
        batch = DrawBatch()
        rect = Rect(0, 0, 100, 100)
        drawn = draw_series_plot(batch, rect, [_series([10, 20]), _series([50, 100])], caption="Memory")

        assert drawn == 2
        lines = batch.of_type(PolylinePrim)
        # 100 maps to 95% of the height, 20 to 19%
        assert lines[1].points[-1, 1] == pytest.approx(5.0)
        assert lines[0].points[-1, 1] == pytest.approx(81.0)
        assert "Memory" in batch.texts()

    def test_empty_series_draw_frame_only(self):
        batch = DrawBatch()
        drawn = draw_series_plot(batch, Rect(0, 0, 100, 100), [_series([])], caption="TPS")

        assert drawn == 0
        assert batch.texts() == ["TPS"]

    def test_all_zero_values_draw_no_lines(self):
        batch = DrawBatch()
        assert draw_series_plot(batch, Rect(0, 0, 100, 100), [_series([0, 0, 0])]) == 0

    def test_wrapped_buffer_drawn_oldest_first(self):
        series = _series(range(15), capacity=4)
        batch = DrawBatch()
        draw_series_plot(batch, Rect(0, 0, 30, 100), [series])

        ys = batch.of_type(PolylinePrim)[0].points[:, 1]
        assert list(np.diff(ys) < 0) == [True, True, True]
