"""Color definitions and constants for the fire effect window.

Fire colors themselves live in ``fire_effect.palette``; this module only
holds what the Pygame host draws around the fire.
"""

from typing import Tuple

# Type alias for RGB color tuples
Color = Tuple[int, int, int]

BLACK: Color = (0, 0, 0)                            # Window background

WINDOW_TITLE: str = "Fire"
