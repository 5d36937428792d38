"""
Small entity/component world implementing the overlay's host interface.

Entities live in groups (archetypes) keyed by their set of component
types. Groups keep a reserved capacity that doubles when full and never
shrinks. Groups holding a ``ChildOf`` relation are split into one table
per parent entity.
"""

from collections import Counter
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional, Tuple, Type

from simscope.logging import get_logger
from simscope.core.host import EntityRef, GroupStats, ProcessEntry, ProcessKind, WorldStats
from .components import ChildOf

logger = get_logger(__name__)

INITIAL_CAPACITY = 32
ENTITY_BYTES = 8


def type_size(tp: type) -> int:
    """Approximate footprint of a component: 8 bytes per field."""
    return 8 * max(1, len(fields(tp)))


@dataclass
class _Group:
    types: Tuple[type, ...]
    members: set = field(default_factory=set)
    capacity: int = INITIAL_CAPACITY
    parents: Counter = field(default_factory=Counter)
    tables_created: int = 0

    def add(self, eid: int, parent: Optional[int]) -> None:
        self.members.add(eid)
        if parent is not None:
            self.parents[parent] += 1
            self.tables_created = max(self.tables_created, len(self.parents))

    def discard(self, eid: int, parent: Optional[int]) -> None:
        self.members.discard(eid)
        if parent is not None:
            self.parents[parent] -= 1
            if self.parents[parent] <= 0:
                del self.parents[parent]

    @property
    def is_relation(self) -> bool:
        return ChildOf in self.types

    @property
    def memory_per_entity(self) -> int:
        return ENTITY_BYTES + sum(type_size(tp) for tp in self.types)


class World:
    """Toy simulation world."""

    def __init__(self, run_length: Optional[int] = None):
        self._run_length = run_length
        self._step = 0
        self._gens: List[int] = [0]  # index 0 is the reserved unset id
        self._free: List[int] = []
        self._components: Dict[int, Dict[type, Any]] = {}
        self._groups: Dict[Tuple[type, ...], _Group] = {}
        self._resources: Dict[type, Any] = {}
        self._processes: List[ProcessEntry] = []
        self._selected: Optional[EntityRef] = None

    # ── Entities ─────────────────────────────────────────────────────────────

    def new_entity(self, *components) -> EntityRef:
        if self._free:
            eid = self._free.pop()
        else:
            eid = len(self._gens)
            self._gens.append(0)
        self._components[eid] = {type(c): c for c in components}
        self._group_for(eid).add(eid, self._parent_of(eid))
        return EntityRef(eid, self._gens[eid])

    def remove_entity(self, ref: EntityRef) -> None:
        if not self.is_alive(ref):
            raise ValueError(f"Can't remove dead entity {ref}")
        self._groups[self._group_key(ref.id)].discard(ref.id, self._parent_of(ref.id))
        del self._components[ref.id]
        self._gens[ref.id] += 1
        self._free.append(ref.id)

    def is_alive(self, ref: EntityRef) -> bool:
        return (
            0 < ref.id < len(self._gens)
            and ref.id in self._components
            and self._gens[ref.id] == ref.gen
        )

    def get(self, ref: EntityRef, tp: Type) -> Any:
        return self._components[ref.id][tp]

    def components(self, ref: EntityRef) -> List[Any]:
        return list(self._components[ref.id].values())

    def query(self, *types: type) -> List[EntityRef]:
        return [
            EntityRef(eid, self._gens[eid])
            for eid, comps in self._components.items()
            if all(tp in comps for tp in types)
        ]

    def alive_ids(self) -> List[int]:
        return list(self._components)

    @property
    def entity_count(self) -> int:
        return len(self._components)

    def _group_key(self, eid: int) -> Tuple[type, ...]:
        return tuple(sorted(self._components[eid], key=lambda tp: tp.__name__))

    def _parent_of(self, eid: int) -> Optional[int]:
        relation = self._components[eid].get(ChildOf)
        return relation.parent if relation is not None else None

    def _group_for(self, eid: int) -> _Group:
        types = self._group_key(eid)
        group = self._groups.get(types)
        if group is None:
            group = _Group(types)
            self._groups[types] = group
            logger.debug("New group: %s", ", ".join(tp.__name__ for tp in types))
        while len(group.members) + 1 > group.capacity:
            group.capacity *= 2
        return group

    # ── Selection, resources, processes ─────────────────────────────────────

    def select(self, ref: Optional[EntityRef]) -> None:
        self._selected = ref

    def selected_entity(self) -> Optional[EntityRef]:
        return self._selected

    def add_resource(self, res: Any) -> None:
        self._resources[type(res)] = res

    def resource(self, tp: Type) -> Any:
        return self._resources[tp]

    def resources(self) -> List[Any]:
        return list(self._resources.values())

    def add_process(self, proc: Any, kind: ProcessKind = ProcessKind.GENERAL) -> None:
        self._processes.append(ProcessEntry(kind, proc))

    def processes(self) -> List[ProcessEntry]:
        return list(self._processes)

    # ── Stepping ─────────────────────────────────────────────────────────────

    @property
    def step(self) -> int:
        return self._step

    @property
    def run_length(self) -> Optional[int]:
        return self._run_length

    @property
    def finished(self) -> bool:
        return self._run_length is not None and self._step >= self._run_length

    def advance(self) -> None:
        """Run all general processes once."""
        for entry in self._processes:
            if entry.kind is ProcessKind.GENERAL:
                entry.record.run(self)
        self._step += 1

    # ── Statistics ───────────────────────────────────────────────────────────

    def stats(self) -> WorldStats:
        groups = []
        memory = memory_used = 0
        for group in self._groups.values():
            used, free = self._tables(group)
            mpe = group.memory_per_entity
            memory += group.capacity * mpe
            memory_used += len(group.members) * mpe
            groups.append(GroupStats(
                size=len(group.members),
                capacity=group.capacity,
                memory_per_entity=mpe,
                component_types=tuple(tp.__name__ for tp in group.types),
                is_relation=group.is_relation,
                tables_used=used,
                tables_free=free,
            ))
        component_types = {tp for comps in self._components.values() for tp in comps}
        return WorldStats(
            entities_used=len(self._components),
            entities_total=len(self._gens) - 1,
            memory=memory,
            memory_used=memory_used,
            groups=groups,
            component_types=len(component_types),
            cached_filters=0,
        )

    def _tables(self, group: _Group) -> Tuple[int, int]:
        if not group.is_relation:
            return 1, 0
        used = len(group.parents)
        return used, group.tables_created - used
