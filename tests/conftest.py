"""Shared test fixtures for the simscope test suite.

Provides the session QApplication, a scriptable fake host and a
controllable clock.
"""

import os
import sys
from dataclasses import dataclass, field
from typing import Any, List, Optional

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication

from simscope.core.host import EntityRef, GroupStats, ProcessEntry, WorldStats


@pytest.fixture(scope="session")
def qapp():
    """Session-scoped QApplication shared by all tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app


def _make_stats(entities=10, groups=None, memory=4096, memory_used=2048) -> WorldStats:
    return WorldStats(
        entities_used=entities,
        entities_total=max(entities, 64),
        memory=memory,
        memory_used=memory_used,
        groups=list(groups or []),
        component_types=3,
        cached_filters=1,
    )


@dataclass
class FakeHost:
    """Host whose statistics and records are set directly by the test."""

    step: int = 0
    run_length: Optional[int] = None
    current_stats: WorldStats = field(default_factory=_make_stats)
    selected: Optional[EntityRef] = None
    alive: bool = True
    entity_components: List[Any] = field(default_factory=list)
    resource_list: List[Any] = field(default_factory=list)
    process_list: List[ProcessEntry] = field(default_factory=list)
    component_reads: int = 0

    def stats(self) -> WorldStats:
        return self.current_stats

    def selected_entity(self) -> Optional[EntityRef]:
        return self.selected

    def is_alive(self, ref: EntityRef) -> bool:
        return self.alive

    def components(self, ref: EntityRef) -> List[Any]:
        self.component_reads += 1
        return list(self.entity_components)

    def resources(self) -> List[Any]:
        return list(self.resource_list)

    def processes(self) -> List[ProcessEntry]:
        return list(self.process_list)


@pytest.fixture
def stats_factory():
    """Factory fixture: create WorldStats with defaults."""
    return _make_stats


@pytest.fixture
def fake_host():
    return FakeHost()


@pytest.fixture
def group_factory():
    """Factory fixture: create GroupStats with defaults."""
    def _make(size=10, capacity=32, memory_per_entity=24, types=("Position", "Velocity"),
              is_relation=False, tables_used=1, tables_free=0):
        return GroupStats(
            size=size,
            capacity=capacity,
            memory_per_entity=memory_per_entity,
            component_types=tuple(types),
            is_relation=is_relation,
            tables_used=tables_used,
            tables_free=tables_free,
        )
    return _make


class ManualClock:
    """Callable clock advanced by the test."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return ManualClock()
