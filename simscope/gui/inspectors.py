"""
Field-listing drawers: selected entity, resources and processes.

Details can be adjusted through the drawer's ``toggles``. Keys F, T, V
and N toggle fields, types, values and nested field names during a run
(U additionally toggles render-phase processes in ProcessesView). The
view scrolls with the arrow keys or the mouse wheel.
"""

from abc import abstractmethod
from typing import Dict, Optional

from PyQt6.QtCore import Qt

from simscope.logging import get_logger
from simscope.core.formatter import InspectorToggles, ReflectiveFormatter
from simscope.core.host import Host
from simscope.core.scroll import LinePager, ScrollCursor
from .canvas import DrawBatch
from .drawer import Drawer, InputState
from .style import OverlayStyle

logger = get_logger(__name__)


class FieldListDrawer(Drawer):
    """Common input handling and drawing for record listings."""

    HELP_TEXT = "Toggle [f]ields, [t]ypes, [v]alues or [n]ames, scroll with arrows or mouse wheel."

    KEY_TOGGLES: Dict[Qt.Key, str] = {
        Qt.Key.Key_F: 'hide_fields',
        Qt.Key.Key_T: 'hide_types',
        Qt.Key.Key_V: 'hide_values',
        Qt.Key.Key_N: 'hide_names',
    }

    def __init__(self, toggles: Optional[InspectorToggles] = None, style: Optional[OverlayStyle] = None):
        super().__init__(style)
        self.toggles = toggles or InspectorToggles()
        self.scroll = ScrollCursor()
        self.formatter = ReflectiveFormatter(self.toggles)
        self._wheel_rest = 0.0  # sub-notch wheel movement carried across frames

    def update_inputs(self, inputs: InputState) -> None:
        for key, attr in self.KEY_TOGGLES.items():
            if inputs.just_pressed(key):
                setattr(self.toggles, attr, not getattr(self.toggles, attr))
                logger.debug(f"{type(self).__name__}: {attr}={getattr(self.toggles, attr)}")
                return
        if inputs.just_pressed(Qt.Key.Key_Down):
            self.scroll.scroll_down()
            return
        if inputs.just_pressed(Qt.Key.Key_Up):
            self.scroll.scroll_up()
            return
        if inputs.wheel_y:
            total = self._wheel_rest + inputs.wheel_y
            notches = int(total)
            self._wheel_rest = total - notches
            if notches:
                self.scroll.wheel(notches)

    def draw(self, batch: DrawBatch, width: float, height: float, host: Host) -> None:
        batch.text(10, height - 20, self.HELP_TEXT)
        pager = self.pane(host)
        if pager.lines:
            batch.text(10, 10, pager.text())

    @abstractmethod
    def pane(self, host: Host) -> LinePager:
        """Lines to show for the current frame."""


class EntityInspector(FieldListDrawer):
    """Components of the host's currently selected entity."""

    def pane(self, host: Host) -> LinePager:
        return self.formatter.entity_pane(host, host.selected_entity(), self.scroll.offset)


class ResourcesView(FieldListDrawer):
    """All global resources with their public fields."""

    def pane(self, host: Host) -> LinePager:
        return self.formatter.resources_pane(host, self.scroll.offset)


class ProcessesView(FieldListDrawer):
    """General and render-phase processes in scheduling order."""

    HELP_TEXT = "Toggle [u]i processes, [f]ields, [t]ypes, [v]alues or [n]ames, scroll with arrows or mouse wheel."

    KEY_TOGGLES = {
        **FieldListDrawer.KEY_TOGGLES,
        Qt.Key.Key_U: 'hide_ui_processes',
    }

    def pane(self, host: Host) -> LinePager:
        return self.formatter.processes_pane(host, self.scroll.offset)
