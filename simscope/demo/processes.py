"""Processes scheduled by the demo world."""

from dataclasses import dataclass, field

import numpy as np

from .components import ChildOf, Energy, Params, Position, SimClock, Velocity


@dataclass
class ClockProcess:
    """Advances the SimClock resource."""

    def run(self, world) -> None:
        clock = world.resource(SimClock)
        clock.tick += 1


@dataclass
class MoveProcess:
    """Moves entities and wraps them around the world bounds."""

    wrap: bool = True

    def run(self, world) -> None:
        params = world.resource(Params)
        for ref in world.query(Position, Velocity):
            pos = world.get(ref, Position)
            vel = world.get(ref, Velocity)
            pos.x += vel.dx * params.speed
            pos.y += vel.dy * params.speed
            if self.wrap:
                pos.x %= params.bounds.width
                pos.y %= params.bounds.height


@dataclass
class LifecycleProcess:
    """Drains energy, removes depleted entities and spawns new ones."""

    max_entities: int = 2000
    relation_share: float = 0.2
    _rng: np.random.Generator = field(default_factory=lambda: np.random.default_rng(7), repr=False)

    def run(self, world) -> None:
        params = world.resource(Params)

        dead = []
        for ref in world.query(Energy):
            energy = world.get(ref, Energy)
            energy.value -= energy.decay
            if energy.value <= 0:
                dead.append(ref)
        for ref in dead:
            world.remove_entity(ref)

        spawn = int(self._rng.poisson(params.spawn_rate * 10))
        spawn = min(spawn, max(0, self.max_entities - world.entity_count))
        for _ in range(spawn):
            self.spawn_one(world, params)

    def spawn_one(self, world, params: Params):
        rng = self._rng
        comps = [
            Position(float(rng.uniform(0, params.bounds.width)), float(rng.uniform(0, params.bounds.height))),
            Velocity(float(rng.normal()), float(rng.normal())),
        ]
        if rng.random() < 0.7:
            comps.append(Energy(float(rng.uniform(20, 100)), float(rng.uniform(0.1, 1.0))))
        alive = world.alive_ids()
        if alive and rng.random() < self.relation_share:
            comps.append(ChildOf(parent=int(rng.choice(alive))))
        return world.new_entity(*comps)


@dataclass
class ParticleRenderer:
    """Render-phase process; the demo has no renderer of its own."""

    point_size: int = 2
    color: str = "#00ff00"

    def run(self, world) -> None:
        pass
