"""Application runner: demo simulation plus overlay windows."""

import sys
from typing import List, Optional

from PyQt6.QtCore import QTimer
from PyQt6.QtWidgets import QApplication

from simscope.logging import get_logger
from simscope.core.settings import OverlayConfig
from simscope.demo import build_world
from .inspectors import EntityInspector, ProcessesView, ResourcesView
from .monitor import Monitor
from .window import MonitorWindow

logger = get_logger(__name__)

VIEWS = ("monitor", "entity", "resources", "processes")


def create_windows(world, view: str, config: OverlayConfig, fps: float = 30.0) -> List[MonitorWindow]:
    """One overlay window per requested view (``all`` opens every view)."""
    names = VIEWS if view == "all" else (view,)
    windows = []
    for name in names:
        if name == "monitor":
            drawer = Monitor(config)
        elif name == "entity":
            drawer = EntityInspector()
        elif name == "resources":
            drawer = ResourcesView()
        elif name == "processes":
            drawer = ProcessesView()
        else:
            raise ValueError(f"Unknown view: {name}")
        windows.append(MonitorWindow(world, [drawer], title=name.capitalize(), fps=fps, scale=config.scale))
    return windows


def run_app(
    entities: int = 100,
    run_length: Optional[int] = None,
    tps: float = 60.0,
    view: str = "monitor",
    config: Optional[OverlayConfig] = None,
) -> int:
    """Run the demo simulation with overlay windows until closed or finished."""
    config = config or OverlayConfig()
    config.validate()

    app = QApplication.instance() or QApplication(sys.argv)
    world = build_world(entities, run_length=run_length)
    windows = create_windows(world, view, config)
    for win in windows:
        win.show()

    sim_timer = QTimer()

    def tick():
        if world.finished:
            sim_timer.stop()
            logger.info(f"Simulation finished after {world.step} steps")
            return
        world.advance()

    sim_timer.timeout.connect(tick)
    sim_timer.start(int(1000 / tps) if tps > 0 else 0)

    logger.info(f"Running demo: entities={entities}, run_length={run_length}, tps={tps}, view={view}")
    return app.exec()
