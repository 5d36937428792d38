"""
Overlay window running the drawer frame sequence.

Each frame: ``update_inputs`` on every drawer with the events collected
since the previous frame, then ``update``, then a repaint request. The
paint event lays out all drawers into a fresh DrawBatch and flushes it.
"""

from typing import List, Optional

from PyQt6.QtCore import QTimer
from PyQt6.QtGui import QColor, QPainter
from PyQt6.QtWidgets import QWidget

from simscope.logging import get_logger
from simscope.core.axis_scaler import screen_scale_correction
from simscope.core.host import Host
from simscope.core.settings import OverlayConfig
from .canvas import DrawBatch
from .drawer import Drawer, InputState
from .monitor import Monitor
from .style import DEFAULT_STYLE, OverlayStyle

logger = get_logger(__name__)

WHEEL_NOTCH = 120.0


class MonitorWindow(QWidget):
    """Top-level widget hosting one or more drawers."""

    def __init__(
        self,
        host: Host,
        drawers: List[Drawer],
        title: str = "Monitor",
        fps: float = 30.0,
        scale: Optional[float] = None,
        style: Optional[OverlayStyle] = None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self._host = host
        self._drawers = list(drawers)
        self._style = style or DEFAULT_STYLE
        self._inputs = InputState()
        self._frames = 0

        self.setWindowTitle(title)
        self.resize(1024, 768)

        # One-time display scale; layout works in logical units
        self._scale = scale if scale else screen_scale_correction(self.screen())
        logger.debug(f"MonitorWindow '{title}' scale={self._scale}")

        self._timer = QTimer(self)
        self._timer.timeout.connect(self.frame)
        if fps > 0:
            self._timer.start(int(1000 / fps))

    @classmethod
    def with_defaults(cls, host: Host, **kwargs) -> "MonitorWindow":
        """Window with a single Monitor sampling three times per second."""
        style = kwargs.get('style')
        config = OverlayConfig(sample_interval=1.0 / 3)
        return cls(host, [Monitor(config, style=style)], **kwargs)

    @property
    def drawers(self) -> List[Drawer]:
        return list(self._drawers)

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def frame_count(self) -> int:
        return self._frames

    def frame(self) -> None:
        """Run the input and update passes, then request a repaint.

        A drawer that raises is logged and skipped for this pass.
        """
        for drawer in self._drawers:
            try:
                drawer.update_inputs(self._inputs)
            except Exception:
                logger.exception(f"{type(drawer).__name__}.update_inputs failed")
        self._inputs.clear()
        for drawer in self._drawers:
            try:
                drawer.update(self._host)
            except Exception:
                logger.exception(f"{type(drawer).__name__}.update failed")
        self._frames += 1
        self.update()

    def stop(self) -> None:
        self._timer.stop()

    def layout_frame(self, batch: DrawBatch) -> None:
        """Let every drawer add its primitives for the current widget size."""
        width = self.width() / self._scale
        height = self.height() / self._scale
        for drawer in self._drawers:
            try:
                drawer.draw(batch, width, height, self._host)
            except Exception:
                logger.exception(f"{type(drawer).__name__}.draw failed")

    # ── Qt events ────────────────────────────────────────────────────────────

    def keyPressEvent(self, event) -> None:  # noqa: N802
        self._inputs.press(event.key())
        super().keyPressEvent(event)

    def wheelEvent(self, event) -> None:  # noqa: N802
        self._inputs.add_wheel(event.angleDelta().y() / WHEEL_NOTCH)
        event.accept()

    def paintEvent(self, event) -> None:  # noqa: N802
        painter = QPainter(self)
        try:
            painter.fillRect(self.rect(), QColor(self._style.color('background')))
            painter.scale(self._scale, self._scale)
            with DrawBatch(self._style) as batch:
                self.layout_frame(batch)
                batch.flush(painter)
        except Exception:
            logger.exception("Overlay paint failed")
        finally:
            painter.end()
