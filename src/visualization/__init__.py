"""Visualization package for the fire effect using Pygame."""

from .colors import *
from .renderer import FireRenderer, cell_rect

__all__ = [
    # Renderer
    'FireRenderer',
    'cell_rect',

    # Window
    'BLACK',
    'WINDOW_TITLE',
]
