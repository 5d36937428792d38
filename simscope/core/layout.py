"""
Canvas partitioning for the monitor.

All values are logical drawing units with the origin at the top-left.
Group rows are sized from the number of groups: a few groups get large
rows (capped at MAX_ROW_HEIGHT), many groups get a dense grid, and past
MIN_ROW_HEIGHT the group pane switches to an overflow notice.
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional

X0 = 6.0
GAP = 10.0
SUMMARY_HEIGHT = 20.0
SUMMARY_HEIGHT_SPLIT = 34.0
SPLIT_WIDTH = 1080.0
FOOTER_HEIGHT = 28.0
PLOT_COUNT = 3
PLOT_FRACTION = 0.25
MAX_PLOT_HEIGHT = 150.0
MIN_ROW_HEIGHT = 8
MAX_ROW_HEIGHT = 20


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h


@dataclass(frozen=True)
class GroupLayout:
    area: Rect
    row_height: int
    overflow: bool
    scale: Optional[Rect] = None
    rows: List[Rect] = field(default_factory=list)


@dataclass(frozen=True)
class MonitorLayout:
    summary: Rect
    footer: Rect
    split_summary: bool
    plots: List[Rect] = field(default_factory=list)
    groups: Optional[GroupLayout] = None


def raw_row_height(available: float, group_count: int) -> int:
    """``floor(available / (group_count + 1))``; one extra row holds the scale."""
    if available <= 0:
        return 0
    return int(math.floor(available / (group_count + 1)))


def group_row_height(available: float, group_count: int) -> int:
    """Row height for the group pane, capped at MAX_ROW_HEIGHT.

    Returns 0 when rows would be below MIN_ROW_HEIGHT.
    """
    height = raw_row_height(available, group_count)
    if height < MIN_ROW_HEIGHT:
        return 0
    return min(height, MAX_ROW_HEIGHT)


def compute_layout(
    width: float,
    height: float,
    group_count: int,
    show_plots: bool = True,
    show_groups: bool = True,
) -> MonitorLayout:
    """Split the canvas into summary, plot column, group column and footer."""
    split = width < SPLIT_WIDTH
    summary_h = SUMMARY_HEIGHT_SPLIT if split else SUMMARY_HEIGHT
    summary = Rect(0.0, 0.0, width, summary_h)
    footer = Rect(0.0, max(summary_h, height - FOOTER_HEIGHT), width, FOOTER_HEIGHT)

    top = summary_h
    available = max(0.0, footer.y - top)

    plots: List[Rect] = []
    group_x = X0
    if show_plots:
        plot_w = max(0.0, width - 20)
        if show_groups:
            plot_w *= PLOT_FRACTION
        plot_h = min(max(0.0, (available - GAP * (PLOT_COUNT - 1)) / PLOT_COUNT), MAX_PLOT_HEIGHT)
        for i in range(PLOT_COUNT):
            plots.append(Rect(X0, top + i * (plot_h + GAP), plot_w, plot_h))
        group_x = X0 + math.ceil(plot_w + GAP)

    groups = None
    if show_groups:
        area = Rect(group_x, top, max(0.0, width - group_x - 10), available)
        row_h = group_row_height(available, group_count)
        if row_h == 0:
            groups = GroupLayout(area=area, row_height=raw_row_height(available, group_count), overflow=True)
        else:
            groups = GroupLayout(
                area=area,
                row_height=row_h,
                overflow=False,
                scale=Rect(area.x, top, area.w, row_h),
                rows=[Rect(area.x, top + (i + 1) * row_h, area.w, row_h) for i in range(group_count)],
            )

    return MonitorLayout(
        summary=summary,
        footer=footer,
        split_summary=split,
        plots=plots,
        groups=groups,
    )
