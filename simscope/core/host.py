"""
Read-only interface the overlay expects from the host simulation.

The host owns every object referenced here. Drawers fetch fresh values on
each frame and never keep host objects across frames, apart from the
positional indices cached by the snapshot aggregator.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, List, Optional, Protocol, Tuple


@dataclass(frozen=True)
class GroupStats:
    """Statistics for one structural group (archetype) of the host."""

    size: int
    capacity: int
    memory_per_entity: int
    component_types: Tuple[str, ...] = ()
    is_relation: bool = False
    tables_used: int = 1
    tables_free: int = 0

    @property
    def tables_total(self) -> int:
        return self.tables_used + self.tables_free


@dataclass(frozen=True)
class WorldStats:
    """One statistics query result."""

    entities_used: int
    entities_total: int
    memory: int
    memory_used: int
    groups: List[GroupStats] = field(default_factory=list)
    component_types: int = 0
    cached_filters: int = 0


@dataclass(frozen=True)
class EntityRef:
    """Opaque entity identifier. ``id == 0`` is the unset value."""

    id: int = 0
    gen: int = 0

    def is_zero(self) -> bool:
        return self.id == 0

    def __str__(self) -> str:
        return f"{{id:{self.id} gen:{self.gen}}}"


class ProcessKind(Enum):
    GENERAL = auto()
    RENDER = auto()


@dataclass(frozen=True)
class ProcessEntry:
    """A scheduled process and the phase it runs in."""

    kind: ProcessKind
    record: Any


class Host(Protocol):
    """What a simulation exposes to the overlay."""

    @property
    def step(self) -> int: ...

    @property
    def run_length(self) -> Optional[int]: ...

    def stats(self) -> WorldStats: ...

    def selected_entity(self) -> Optional[EntityRef]: ...

    def is_alive(self, ref: EntityRef) -> bool: ...

    def components(self, ref: EntityRef) -> List[Any]: ...

    def resources(self) -> List[Any]: ...

    def processes(self) -> List[ProcessEntry]: ...
