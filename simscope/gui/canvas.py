"""
Per-draw primitive buffer.

Drawers append rectangles, lines, polylines and text to a ``DrawBatch``
while laying out a frame; the window flushes the batch to a ``QPainter``
once all drawers are done. A batch is cleared when its ``with`` block is
entered and again when it is left, so nothing leaks into the next frame.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

import numpy as np
import pyqtgraph as pg
from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QFont, QPainter, QPolygonF

from simscope.core.layout import Rect
from .style import DEFAULT_STYLE, OverlayStyle

_TEXT_BOX = 10000.0


class Align(Enum):
    LEFT = 'left'
    CENTER = 'center'
    RIGHT = 'right'


@dataclass(frozen=True)
class RectPrim:
    rect: Rect
    color: str
    filled: bool = True
    width: float = 1.0


@dataclass(frozen=True)
class LinePrim:
    x1: float
    y1: float
    x2: float
    y2: float
    color: str
    width: float = 1.0


@dataclass(frozen=True)
class PolylinePrim:
    points: np.ndarray  # shape (n, 2)
    color: str
    width: float = 1.0


@dataclass(frozen=True)
class TextPrim:
    x: float
    y: float
    text: str
    color: str
    align: Align = Align.LEFT
    vcenter: bool = False


Primitive = Union[RectPrim, LinePrim, PolylinePrim, TextPrim]


class DrawBatch:
    """Accumulates primitives for one draw call."""

    def __init__(self, style: Optional[OverlayStyle] = None):
        self.style = style or DEFAULT_STYLE
        self.primitives: List[Primitive] = []

    def __enter__(self) -> "DrawBatch":
        self.clear()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.clear()

    def clear(self) -> None:
        self.primitives.clear()

    # ── Recording ────────────────────────────────────────────────────────────

    def rect(self, rect: Rect, color: str, filled: bool = True, width: float = 1.0) -> None:
        if rect.w <= 0 or rect.h <= 0:
            return
        self.primitives.append(RectPrim(rect, color, filled, width))

    def line(self, x1: float, y1: float, x2: float, y2: float, color: str, width: float = 1.0) -> None:
        self.primitives.append(LinePrim(x1, y1, x2, y2, color, width))

    def polyline(self, points: np.ndarray, color: str, width: float = 1.0) -> None:
        if len(points) < 2:
            return
        self.primitives.append(PolylinePrim(np.asarray(points, dtype=np.float64), color, width))

    def text(
        self,
        x: float,
        y: float,
        text: str,
        color: Optional[str] = None,
        align: Align = Align.LEFT,
        vcenter: bool = False,
    ) -> None:
        if not text:
            return
        self.primitives.append(TextPrim(x, y, text, color or self.style.color('text'), align, vcenter))

    def of_type(self, kind: type) -> List[Primitive]:
        return [p for p in self.primitives if isinstance(p, kind)]

    def texts(self) -> List[str]:
        return [p.text for p in self.primitives if isinstance(p, TextPrim)]

    # ── Output ───────────────────────────────────────────────────────────────

    def flush(self, painter: QPainter) -> None:
        """Paint all primitives in insertion order."""
        font = QFont(self.style.font_family, self.style.font_size)
        font.setStyleHint(QFont.StyleHint.Monospace)
        painter.setFont(font)

        for prim in self.primitives:
            if isinstance(prim, RectPrim):
                r = QRectF(prim.rect.x, prim.rect.y, prim.rect.w, prim.rect.h)
                if prim.filled:
                    painter.fillRect(r, pg.mkBrush(prim.color))
                else:
                    painter.setPen(pg.mkPen(prim.color, width=prim.width))
                    painter.setBrush(Qt.BrushStyle.NoBrush)
                    painter.drawRect(r)
            elif isinstance(prim, LinePrim):
                painter.setPen(pg.mkPen(prim.color, width=prim.width))
                painter.drawLine(QPointF(prim.x1, prim.y1), QPointF(prim.x2, prim.y2))
            elif isinstance(prim, PolylinePrim):
                painter.setPen(pg.mkPen(prim.color, width=prim.width))
                painter.drawPolyline(QPolygonF([QPointF(float(x), float(y)) for x, y in prim.points]))
            elif isinstance(prim, TextPrim):
                painter.setPen(pg.mkPen(prim.color))
                painter.drawText(*_text_box(prim), prim.text)

        self.clear()


def _text_box(prim: TextPrim):
    """Bounding rect and alignment flags anchoring text at (x, y)."""
    if prim.align is Align.RIGHT:
        x = prim.x - _TEXT_BOX
        h_flag = Qt.AlignmentFlag.AlignRight
    elif prim.align is Align.CENTER:
        x = prim.x - _TEXT_BOX / 2
        h_flag = Qt.AlignmentFlag.AlignHCenter
    else:
        x = prim.x
        h_flag = Qt.AlignmentFlag.AlignLeft

    if prim.vcenter:
        y = prim.y - _TEXT_BOX / 2
        v_flag = Qt.AlignmentFlag.AlignVCenter
    else:
        y = prim.y
        v_flag = Qt.AlignmentFlag.AlignTop

    return QRectF(x, y, _TEXT_BOX, _TEXT_BOX), h_flag | v_flag
