"""
Base class for overlay drawers and the per-frame input snapshot.

A window calls, once per frame and in this order:
``update_inputs`` (toggles and scroll only), ``update`` (sampling, no
drawing) and ``draw`` (layout into a DrawBatch, no state changes).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Set

from PyQt6.QtCore import Qt

from simscope.core.host import Host
from .canvas import DrawBatch
from .style import DEFAULT_STYLE, OverlayStyle


def _key_code(key) -> int:
    return int(getattr(key, "value", key))


@dataclass
class InputState:
    """Keys pressed and wheel movement collected since the last frame."""

    pressed: Set[int] = field(default_factory=set)
    wheel_y: float = 0.0

    def press(self, key) -> None:
        self.pressed.add(_key_code(key))

    def add_wheel(self, notches: float) -> None:
        self.wheel_y += notches

    def just_pressed(self, key: Qt.Key) -> bool:
        return _key_code(key) in self.pressed

    def clear(self) -> None:
        self.pressed.clear()
        self.wheel_y = 0.0


class Drawer(ABC):
    """Something that draws into an overlay window."""

    def __init__(self, style: Optional[OverlayStyle] = None):
        self.style = style or DEFAULT_STYLE

    def update_inputs(self, inputs: InputState) -> None:
        """Handle input events of the previous frame."""

    def update(self, host: Host) -> None:
        """Advance internal state from the host."""

    @abstractmethod
    def draw(self, batch: DrawBatch, width: float, height: float, host: Host) -> None:
        """Lay out this drawer's primitives for a canvas of the given logical size."""
