"""
Text rendering of introspected records.

Each record becomes a label line, one indented line per public field and
a blank separator. All lines go through a :class:`LinePager`, so scrolling
is a matter of skipping the first N emitted lines.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Optional

from .fields import FieldDescriptor, describe_fields, type_name
from .host import EntityRef, Host, ProcessKind
from .scroll import LinePager

DEAD_MARKER = "dead entity"
NAME_WIDTH = 20
TYPE_WIDTH = 16


@dataclass
class InspectorToggles:
    """Independent visibility switches for field listings."""

    hide_fields: bool = False
    hide_types: bool = False
    hide_values: bool = False
    hide_names: bool = False
    hide_ui_processes: bool = False


class ReflectiveFormatter:
    """Renders arbitrary records as aligned name/type/value lines."""

    def __init__(self, toggles: Optional[InspectorToggles] = None):
        self.toggles = toggles if toggles is not None else InspectorToggles()

    def format_field(self, field: FieldDescriptor) -> str:
        line = f"    {field.name:<{NAME_WIDTH}} "
        if not self.toggles.hide_types:
            line += f"    {field.type_label:<{TYPE_WIDTH}} "
        if not self.toggles.hide_values:
            line += "= " + field.render_value(self.toggles.hide_names)
        return line

    def write_record(self, pager: LinePager, record: Any, label: Optional[str] = None) -> None:
        pager.emit(f"  {label or type_name(record)}")
        if self.toggles.hide_fields:
            return
        for field in describe_fields(record):
            pager.emit(self.format_field(field) if pager.visible else "")
        pager.emit("")

    def write_records(self, pager: LinePager, records: Iterable[Any]) -> None:
        for record in records:
            self.write_record(pager, record)

    def entity_pane(self, host: Host, ref: Optional[EntityRef], offset: int = 0) -> LinePager:
        """Components of the selected entity.

        Unset selections yield no lines; dead entities yield a single
        marker line and their components are never read.
        """
        pager = LinePager(offset)
        if ref is None or ref.is_zero():
            return pager
        if not host.is_alive(ref):
            pager.write(f"Entity {ref}: {DEAD_MARKER}")
            return pager
        pager.write(f"Entity {ref}")
        pager.write("")
        self.write_records(pager, host.components(ref))
        return pager

    def resources_pane(self, host: Host, offset: int = 0) -> LinePager:
        pager = LinePager(offset)
        pager.write("Resources")
        pager.write("")
        self.write_records(pager, host.resources())
        return pager

    def processes_pane(self, host: Host, offset: int = 0) -> LinePager:
        """General processes, then render-phase processes unless hidden."""
        entries = host.processes()
        pager = LinePager(offset)
        pager.write("Processes")
        pager.write("")
        self.write_records(pager, (e.record for e in entries if e.kind is ProcessKind.GENERAL))
        if self.toggles.hide_ui_processes:
            return pager
        pager.write("")
        pager.write("UI Processes")
        pager.write("")
        self.write_records(pager, (e.record for e in entries if e.kind is ProcessKind.RENDER))
        return pager
