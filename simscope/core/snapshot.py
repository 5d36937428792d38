"""Change-detected snapshot of the host's group list."""

from dataclasses import dataclass
from typing import List

from simscope.logging import get_logger
from .host import GroupStats, WorldStats

logger = get_logger(__name__)


@dataclass(frozen=True)
class GroupSnapshot:
    """Cached label for a group plus its position in the host's group list."""

    index: int
    label: str


@dataclass(frozen=True)
class GroupRow:
    """A snapshot joined with the group's current live numbers."""

    index: int
    label: str
    size: int
    capacity: int
    is_relation: bool
    tables_used: int
    tables_total: int


def group_label(group: GroupStats) -> str:
    """Per-entity footprint followed by the contained type names."""
    parts = [f"              {group.memory_per_entity:4d} B  "]
    for name in group.component_types:
        parts.append(name)
        parts.append(" ")
    return "".join(parts)


class SnapshotAggregator:
    """
    Keeps group labels across frames, rebuilding them only when the number
    of groups changes.
    """

    def __init__(self):
        self._snapshots: List[GroupSnapshot] = []
        self._rebuilds = 0

    def update(self, stats: WorldStats) -> bool:
        """Rebuild labels if the group count changed. Returns True on rebuild."""
        if len(stats.groups) == len(self._snapshots):
            return False

        self._snapshots = [
            GroupSnapshot(index=i, label=group_label(group))
            for i, group in enumerate(stats.groups)
        ]
        self._rebuilds += 1
        logger.debug("Rebuilt group snapshot: %d groups", len(self._snapshots))
        return True

    def rows(self, stats: WorldStats) -> List[GroupRow]:
        """Join cached labels with the groups in ``stats``."""
        rows = []
        for snap in self._snapshots:
            if snap.index >= len(stats.groups):
                continue
            group = stats.groups[snap.index]
            rows.append(GroupRow(
                index=snap.index,
                label=snap.label,
                size=group.size,
                capacity=group.capacity,
                is_relation=group.is_relation,
                tables_used=group.tables_used,
                tables_total=group.tables_total,
            ))
        return rows

    def max_capacity(self, stats: WorldStats) -> int:
        return max((row.capacity for row in self.rows(stats)), default=0)

    @property
    def snapshots(self) -> List[GroupSnapshot]:
        return list(self._snapshots)

    @property
    def rebuild_count(self) -> int:
        """How many times the snapshot has been regenerated."""
        return self._rebuilds

    def __len__(self) -> int:
        return len(self._snapshots)
