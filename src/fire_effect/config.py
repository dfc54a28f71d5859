"""Configuration for the fire effect.

All tunable values live in one frozen dataclass so the host can pass them
explicitly instead of relying on hidden constants.
"""

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .geometry import DEFAULT_DENSITY
from .simulation import WindDirection

logger = logging.getLogger(__name__)

DEFAULT_TICK_INTERVAL_MS: int = 100                 # Time between fire steps
DEFAULT_TOGGLE_INTERVAL_MS: int = 5000              # Time between ignite flips
DEFAULT_FIRE_HEIGHT_PX: int = 180                   # Height of the fire strip


@dataclass(frozen=True)
class FireConfig:
    """Fire effect parameters.

    Attributes:
        density: Cells in the shorter dimension of the fire surface.
        wind: Horizontal drift applied while heat rises.
        tick_interval_ms: Milliseconds between simulation steps.
        toggle_interval_ms: Milliseconds between ignite flips.
        fire_height_px: Height of the fire strip at the bottom of the window.
        window_width: Initial window width in pixels.
        window_height: Initial window height in pixels.
        fps: Frame rate cap for the host loop.
        seed: Random seed, None for a fresh one each run.
        inclusive_column_bound: Sweep one column past the right edge each step.
    """

    density: int = DEFAULT_DENSITY
    wind: WindDirection = WindDirection.RIGHT
    tick_interval_ms: int = DEFAULT_TICK_INTERVAL_MS
    toggle_interval_ms: int = DEFAULT_TOGGLE_INTERVAL_MS
    fire_height_px: int = DEFAULT_FIRE_HEIGHT_PX
    window_width: int = 800
    window_height: int = 600
    fps: int = 60
    seed: Optional[int] = None
    inclusive_column_bound: bool = True

    def __post_init__(self) -> None:
        for name in (
            "density",
            "tick_interval_ms",
            "toggle_interval_ms",
            "fire_height_px",
            "window_width",
            "window_height",
            "fps",
        ):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        if not isinstance(self.wind, WindDirection):
            raise ValueError(f"wind must be a WindDirection, got {self.wind!r}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FireConfig":
        """Build a config from plain values, e.g. parsed JSON.

        ``wind`` may be given by name ("right", "left" or "none").
        Unknown keys raise ValueError.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        values = dict(data)
        wind = values.get("wind")
        if isinstance(wind, str):
            try:
                values["wind"] = WindDirection(wind.strip().lower())
            except ValueError:
                raise ValueError(
                    f"Unknown wind direction {wind!r}, expected one of "
                    f"{[w.value for w in WindDirection]}"
                ) from None
        return cls(**values)


def load_config(path: Union[str, Path]) -> FireConfig:
    """Read a FireConfig from a JSON file."""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")
    config = FireConfig.from_dict(data)
    logger.info(f"Loaded configuration from {path}: {config}")
    return config
