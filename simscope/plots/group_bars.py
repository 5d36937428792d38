"""
Horizontal capacity bars for the host's groups.

Each row shows live entities (bright) and reserved capacity (dark) on a
shared scale, green for plain groups and cyan for groups with relations.
"""

from simscope.core.axis_scaler import calc_ticks_step, tick_values
from simscope.core.layout import Rect
from simscope.core.snapshot import GroupRow
from simscope.gui.canvas import Align, DrawBatch

MAX_TICKS = 8
OVERFLOW_TEXT = "Too many groups, hide plots [p] or enlarge the window"


def draw_group_scale(batch: DrawBatch, rect: Rect, max_capacity: int) -> int:
    """Capacity axis along the bottom of ``rect``. Returns the tick count."""
    if calc_ticks_step(max_capacity, MAX_TICKS) < 1:
        return 0
    ticks = tick_values(max_capacity, MAX_TICKS)
    color = batch.style.color('axis')
    base = rect.bottom - 2

    batch.line(rect.x, base, rect.right, base, color)
    for value in ticks:
        x = rect.x + rect.w * value / max_capacity
        batch.line(x, base, x, base - 5, color)
        batch.text(x, rect.y, f"{int(value)}", batch.style.color('text'), align=Align.CENTER)
    return len(ticks)


def draw_group_row(batch: DrawBatch, rect: Rect, row: GroupRow, max_capacity: int) -> None:
    style = batch.style
    if max_capacity > 0:
        used = rect.w * row.size / max_capacity
        reserved = rect.w * row.capacity / max_capacity
    else:
        used = reserved = 0.0

    if row.is_relation:
        used_color, reserved_color = style.color('relation'), style.color('relation_reserved')
    else:
        used_color, reserved_color = style.color('group'), style.color('group_reserved')

    batch.rect(Rect(rect.x, rect.y, used, rect.h), used_color)
    batch.rect(Rect(rect.x + used, rect.y, reserved - used, rect.h), reserved_color)
    batch.rect(rect, style.color('bar_outline'), filled=False)

    batch.text(rect.x + 3, rect.y + 3, row.label)
    if row.is_relation:
        batch.text(rect.x + 5, rect.y + 3, f"{row.tables_used:5d} / {row.tables_total:5d}")
    batch.text(rect.right - 5, rect.y + 3, f"{row.size}", align=Align.RIGHT)


def draw_group_overflow(batch: DrawBatch, area: Rect) -> None:
    batch.text(area.x, area.y + 10, OVERFLOW_TEXT)
