"""Component and resource types of the demo simulation."""

from dataclasses import dataclass, field


@dataclass
class Position:
    x: float = 0.0
    y: float = 0.0


@dataclass
class Velocity:
    dx: float = 0.0
    dy: float = 0.0


@dataclass
class Energy:
    value: float = 100.0
    decay: float = 0.5


@dataclass
class ChildOf:
    """Relation component: the entity belongs to a parent entity."""
    parent: int = 0


@dataclass
class Bounds:
    width: float = 640.0
    height: float = 480.0


@dataclass
class Params:
    speed: float = 2.0
    spawn_rate: float = 0.3
    bounds: Bounds = field(default_factory=Bounds)


@dataclass
class SimClock:
    tick: int = 0
    dt: float = 1.0
