"""Overlay style descriptor passed to every drawer at construction."""

from dataclasses import dataclass, field
from typing import Dict


def _default_colors() -> Dict[str, str]:
    return {
        'background':      '#101010',
        'text':            '#c8c8c8',
        'axis':            '#8c8c8c',
        'plot_background': '#00190a',
        'plot_line':       '#ffffff',
        'group':           '#008228',   # groups without relations, used
        'group_reserved':  '#145019',
        'relation':        '#006478',   # groups with relations, used
        'relation_reserved': '#143246',
        'bar_outline':     '#282828',
        'progress_background': '#3c3c3c',
        'progress_fill':   '#00b450',
    }


@dataclass(frozen=True)
class OverlayStyle:
    """Font and colours for one overlay window."""

    font_family: str = "JetBrains Mono"
    font_size: int = 9
    line_height: float = 13.0
    colors: Dict[str, str] = field(default_factory=_default_colors)

    def color(self, role: str) -> str:
        return self.colors.get(role, self.colors.get('text', '#c8c8c8'))


DEFAULT_STYLE = OverlayStyle()
