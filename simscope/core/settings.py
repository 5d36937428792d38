"""Persistent overlay settings and the overlay configuration value."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from simscope.logging import get_logger

from .ring_buffer import RollingSeries
from .sample_clock import DEFAULT_SAMPLE_INTERVAL

logger = get_logger(__name__)

SETTINGS_DIR = Path.home() / ".config" / "simscope"
SETTINGS_PATH = SETTINGS_DIR / "settings.json"


@dataclass
class OverlayConfig:
    """Construction parameters of the monitor drawer."""

    plot_capacity: int = RollingSeries.DEFAULT_CAPACITY
    sample_interval: float = DEFAULT_SAMPLE_INTERVAL
    hide_plots: bool = False
    hide_groups: bool = False
    scale: Optional[float] = None

    @classmethod
    def from_settings(cls, data: dict) -> "OverlayConfig":
        """Build a config from a settings dict, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.warning("Ignoring unknown settings: %s", ", ".join(sorted(unknown)))
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_settings(self) -> Dict[str, Any]:
        """Plain dict accepted by ``from_settings``."""
        return asdict(self)

    def validate(self) -> None:
        if self.plot_capacity <= 0:
            raise ValueError(f"plot_capacity must be positive, got {self.plot_capacity}")
        if self.sample_interval <= 0:
            raise ValueError(f"sample_interval must be positive, got {self.sample_interval}")
        if self.scale is not None and self.scale <= 0:
            raise ValueError(f"scale must be positive, got {self.scale}")


def load_settings() -> dict:
    """Saved overlay settings; empty when the file is missing or unreadable."""
    if not SETTINGS_PATH.exists():
        return {}

    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", SETTINGS_PATH, e)
        return {}

    return data if isinstance(data, dict) else {}


def save_settings(data: Dict[str, Any]) -> None:
    """Write settings through a temporary file so readers never see half a file."""
    SETTINGS_DIR.mkdir(parents=True, exist_ok=True)
    tmp_path = SETTINGS_PATH.with_suffix(".tmp")
    tmp_path.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")
    tmp_path.replace(SETTINGS_PATH)
    logger.info("Saved overlay settings to %s", SETTINGS_PATH)
