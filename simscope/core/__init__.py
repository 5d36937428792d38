"""Sampling, retention, layout and introspection logic (no Qt)."""

from .axis_scaler import calc_scale_correction, calc_ticks_step, tick_values, value_scale
from .fields import FieldDescriptor, describe_dataclass, describe_fields
from .formatter import InspectorToggles, ReflectiveFormatter
from .host import EntityRef, GroupStats, Host, ProcessEntry, ProcessKind, WorldStats
from .layout import MonitorLayout, Rect, compute_layout
from .rate_estimator import RateEstimator
from .ring_buffer import RollingSeries
from .sample_clock import SampleClock
from .sample_set import Metric, TimeSeries
from .scroll import LinePager, ScrollCursor
from .settings import OverlayConfig
from .snapshot import GroupRow, GroupSnapshot, SnapshotAggregator

__all__ = [
    "calc_scale_correction",
    "calc_ticks_step",
    "tick_values",
    "value_scale",
    "FieldDescriptor",
    "describe_dataclass",
    "describe_fields",
    "InspectorToggles",
    "ReflectiveFormatter",
    "EntityRef",
    "GroupStats",
    "Host",
    "ProcessEntry",
    "ProcessKind",
    "WorldStats",
    "MonitorLayout",
    "Rect",
    "compute_layout",
    "RateEstimator",
    "RollingSeries",
    "SampleClock",
    "Metric",
    "TimeSeries",
    "LinePager",
    "ScrollCursor",
    "OverlayConfig",
    "GroupRow",
    "GroupSnapshot",
    "SnapshotAggregator",
]
