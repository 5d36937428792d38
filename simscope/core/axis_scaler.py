"""
Axis helpers: round tick steps and display scale correction.

Tick steps come from the 1-2-5 ladder (1, 2, 5, 10, 20, 50, ...), so axis
labels stay human-legible whatever the value range is.
"""

import math

import numpy as np

LADDER = (1.0, 2.0, 5.0, 10.0)
REFERENCE_DPI = 96.0


def calc_ticks_step(max_value: float, n: int) -> float:
    """Smallest 1-2-5 step with at most ``n`` steps up to ``max_value``.

    Returns 0 for a non-positive maximum or tick count.
    """
    if max_value <= 0 or n <= 0:
        return 0.0
    raw = max_value / n
    magnitude = 10.0 ** math.floor(math.log10(raw))
    for mult in LADDER:
        step = mult * magnitude
        if max_value / step <= n:
            return step
    return 10.0 * magnitude


def tick_values(max_value: float, n: int) -> np.ndarray:
    """Tick positions ``0, step, 2*step, ...`` not exceeding ``max_value``."""
    step = calc_ticks_step(max_value, n)
    if step <= 0:
        return np.empty(0, dtype=np.float64)
    count = int(max_value / step + 1e-9)
    return step * np.arange(count + 1, dtype=np.float64)


def value_scale(max_value: float, extent: float, headroom: float = 0.95) -> float:
    """Pixels per unit so that ``max_value`` fills ``headroom`` of ``extent``."""
    if max_value <= 0 or extent <= 0:
        return 0.0
    return headroom * extent / max_value


def calc_scale_correction(logical_dpi: float, reference_dpi: float = REFERENCE_DPI) -> float:
    """Uniform drawing scale for a display, rounded to quarter steps, never below 1."""
    if logical_dpi <= 0 or reference_dpi <= 0:
        return 1.0
    ratio = round(logical_dpi / reference_dpi * 4) / 4
    return max(1.0, ratio)


def screen_scale_correction(screen) -> float:
    """Scale correction for a ``QScreen``; 1.0 when no screen is available."""
    if screen is None:
        return 1.0
    return calc_scale_correction(screen.logicalDotsPerInch())
