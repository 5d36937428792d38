"""
Strip chart for rolling time series.

Draws one or more series into a rectangle, sharing a Y scale derived
from the largest value across all of them. The newest sample sits at the
right edge.
"""

from typing import Sequence

import numpy as np

from simscope.core.axis_scaler import value_scale
from simscope.core.layout import Rect
from simscope.core.ring_buffer import RollingSeries
from simscope.gui.canvas import Align, DrawBatch


def series_points(values: np.ndarray, rect: Rect, y_scale: float) -> np.ndarray:
    """Map samples to canvas points spanning the full rect width.

    Returns an empty array for fewer than two samples.
    """
    n = len(values)
    if n < 2 or y_scale <= 0:
        return np.empty((0, 2), dtype=np.float64)
    xs = rect.x + np.arange(n, dtype=np.float64) * (rect.w / (n - 1))
    ys = rect.bottom - values * y_scale
    return np.column_stack([xs, ys])


def draw_series_plot(
    batch: DrawBatch,
    rect: Rect,
    series: Sequence[RollingSeries],
    caption: str = "",
) -> int:
    """Draw ``series`` into ``rect``. Returns the number of polylines drawn."""
    style = batch.style
    batch.rect(rect, style.color('plot_background'))

    y_max = max((s.max() for s in series), default=0.0)
    y_scale = value_scale(y_max, rect.h)

    drawn = 0
    for s in series:
        points = series_points(s.values(), rect, y_scale)
        if len(points):
            batch.polyline(points, style.color('plot_line'))
            drawn += 1

    batch.rect(rect, style.color('axis'), filled=False)
    batch.text(rect.right - 3, rect.y + 3, caption, style.color('text'), align=Align.RIGHT)
    return drawn
