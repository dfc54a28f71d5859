"""
Pixel Fire Effect.

A decorative fire animation: heat rises from a seeded bottom row through a
grid of cells, decaying and drifting with the wind as it goes.
"""

from .config import FireConfig, load_config
from .effect import FireEffect, IgniteToggle
from .geometry import FireDimensions, compute_geometry
from .palette import FIRE_COLORS, N_COLORS, color_for
from .simulation import FireFrame, FireSimulation, WindDirection

__version__ = "0.1.0"

__all__ = [
    "FireConfig",
    "load_config",
    "FireEffect",
    "IgniteToggle",
    "FireDimensions",
    "compute_geometry",
    "FIRE_COLORS",
    "N_COLORS",
    "color_for",
    "FireFrame",
    "FireSimulation",
    "WindDirection",
]
