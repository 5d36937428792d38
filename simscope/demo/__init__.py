"""Demo simulation used by the command line entry point and the tests."""

import numpy as np

from simscope.core.host import ProcessKind
from .components import Bounds, ChildOf, Energy, Params, Position, SimClock, Velocity
from .processes import ClockProcess, LifecycleProcess, MoveProcess, ParticleRenderer
from .world import World


def build_world(entities: int = 100, run_length=None, seed: int = 7) -> World:
    """World with the demo resources, processes and ``entities`` initial entities.

    The first entity is selected for inspection.
    """
    world = World(run_length=run_length)
    world.add_resource(Params())
    world.add_resource(SimClock())

    lifecycle = LifecycleProcess(_rng=np.random.default_rng(seed))
    world.add_process(ClockProcess())
    world.add_process(MoveProcess())
    world.add_process(lifecycle)
    world.add_process(ParticleRenderer(), ProcessKind.RENDER)

    params = world.resource(Params)
    first = None
    for _ in range(entities):
        ref = lifecycle.spawn_one(world, params)
        if first is None:
            first = ref
    world.select(first)
    return world


__all__ = [
    "World",
    "build_world",
    "Bounds",
    "ChildOf",
    "Energy",
    "Params",
    "Position",
    "SimClock",
    "Velocity",
    "ClockProcess",
    "LifecycleProcess",
    "MoveProcess",
    "ParticleRenderer",
]
