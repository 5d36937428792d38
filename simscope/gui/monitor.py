"""
Monitor drawer for world and performance statistics.

Symbology:
  - Green bars: groups without entity relations
  - Cyan bars: groups with entity relations
  - Bright green/cyan: currently used
  - Dark green/cyan: reserved

Top info: tick, entity count, groups, component types, cached filters,
reserved memory, steps per second (TPS), time per step (TPT) and run time.

Keys: [p] toggles plots, [g] toggles groups.
"""

import datetime
import time
from typing import Callable, Optional, Tuple

from PyQt6.QtCore import Qt

from simscope.logging import get_logger
from simscope.core.host import Host, WorldStats
from simscope.core.layout import Rect, compute_layout
from simscope.core.rate_estimator import RateEstimator
from simscope.core.sample_clock import SampleClock
from simscope.core.sample_set import Metric, TimeSeries
from simscope.core.settings import OverlayConfig
from simscope.core.snapshot import SnapshotAggregator
from simscope.plots.group_bars import draw_group_overflow, draw_group_row, draw_group_scale
from simscope.plots.series_plot import draw_series_plot
from .canvas import Align, DrawBatch
from .drawer import Drawer, InputState
from .style import OverlayStyle

logger = get_logger(__name__)

PLOTS = (
    (Metric.ENTITIES, Metric.ENTITY_CAPACITY),
    (Metric.MEMORY, Metric.MEMORY_USED),
    (Metric.RATE,),
)


def to_mem_text(num_bytes: int) -> Tuple[float, str]:
    if num_bytes <= 10 * 1_024_000:
        return num_bytes / 1024, "kB"
    return num_bytes / 1_024_000, "MB"


class Monitor(Drawer):
    """Time series plots, group bars and a run progress bar."""

    def __init__(
        self,
        config: Optional[OverlayConfig] = None,
        style: Optional[OverlayStyle] = None,
        clock: Callable[[], float] = time.perf_counter,
    ):
        super().__init__(style)
        self.config = config or OverlayConfig()
        self._clock = clock

        now = clock()
        self.start_time = now
        self.sample_clock = SampleClock(self.config.sample_interval, last_sample=now)
        self.rate = RateEstimator()
        self.time_series = TimeSeries(self.config.plot_capacity)
        self.groups = SnapshotAggregator()

    # ── Frame callbacks ──────────────────────────────────────────────────────

    def update_inputs(self, inputs: InputState) -> None:
        if inputs.just_pressed(Qt.Key.Key_P):
            self.config.hide_plots = not self.config.hide_plots
            logger.debug(f"Monitor plots hidden: {self.config.hide_plots}")
            return
        if inputs.just_pressed(Qt.Key.Key_G):
            self.config.hide_groups = not self.config.hide_groups
            logger.debug(f"Monitor groups hidden: {self.config.hide_groups}")

    def update(self, host: Host) -> None:
        now = self._clock()
        self.rate.update(host.step, now)

        stats = host.stats()
        self.groups.update(stats)

        if self.config.hide_plots or not self.sample_clock.is_due(now):
            return
        self.time_series.append(
            stats.entities_used,
            stats.entities_total,
            stats.memory,
            stats.memory_used,
            self.rate.rate,
        )
        self.sample_clock.reset(now)

    def draw(self, batch: DrawBatch, width: float, height: float, host: Host) -> None:
        stats = host.stats()
        rows = self.groups.rows(stats)
        layout = compute_layout(
            width, height, len(rows),
            show_plots=not self.config.hide_plots,
            show_groups=not self.config.hide_groups,
        )

        batch.text(layout.summary.x + 6, layout.summary.y + 4,
                   self.summary_text(host.step, stats, layout.split_summary))

        for rect, metrics in zip(layout.plots, PLOTS):
            draw_series_plot(
                batch, rect,
                [self.time_series[m] for m in metrics],
                caption=metrics[0].value,
            )

        if layout.groups is not None:
            if layout.groups.overflow:
                draw_group_overflow(batch, layout.groups.area)
            else:
                max_capacity = self.groups.max_capacity(stats)
                draw_group_scale(batch, layout.groups.scale, max_capacity)
                for rect, row in zip(layout.groups.rows, rows):
                    draw_group_row(batch, rect, row, max_capacity)

        self.draw_progress(batch, layout.footer, host.step, host.run_length)

    # ── Pieces ───────────────────────────────────────────────────────────────

    def summary_text(self, step: int, stats: WorldStats, split: bool) -> str:
        mem, units = to_mem_text(stats.memory)
        elapsed = datetime.timedelta(seconds=round(self._clock() - self.start_time))
        first = (
            f"Tick: {step:8d}  |  Ent.: {stats.entities_used:7d}  |  Groups: {len(stats.groups):3d}"
            f"  |  Comp: {stats.component_types:3d}  |  Cache: {stats.cached_filters:3d}"
        )
        second = (
            f"Mem: {mem:6.1f} {units}  |  TPS: {self.rate.rate:8.1f}"
            f"  |  TPT: {self.rate.step_duration * 1000:6.2f} ms  |  Time: {elapsed}"
        )
        return f"{first}\n{second}" if split else f"{first}  |  {second}"

    def draw_progress(self, batch: DrawBatch, footer: Rect, step: int, run_length: Optional[int]) -> None:
        """Progress towards the host's run length; tick count only when unbounded."""
        style = batch.style
        bar = Rect(footer.x + 10, footer.y + 5, max(0.0, footer.w - 20), 18)
        batch.rect(bar, style.color('progress_background'))

        if run_length:
            progress = min(1.0, step / run_length)
            batch.rect(Rect(bar.x, bar.y, bar.w * progress, bar.h), style.color('progress_fill'))
            label = f"Progress: {step} / {run_length} ({progress * 100:.0f}%)"
        else:
            label = f"Tick: {step}"
        batch.text(bar.x + bar.w / 2, bar.y + bar.h / 2, label, align=Align.CENTER, vcenter=True)
