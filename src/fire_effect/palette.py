"""Fire color ramp.

Intensity indices produced by the simulation select a color from this table:
index 0 is transparent near-black, the last index is opaque white.
"""

from typing import Tuple

# Type alias for RGBA color tuples
Color = Tuple[int, int, int, int]

OPAQUE: int = 255
TRANSPARENT: int = 0

FIRE_COLORS: Tuple[Color, ...] = (
    (7, 7, 7, TRANSPARENT),
    (31, 7, 7, TRANSPARENT),
    (47, 15, 7, OPAQUE),
    (71, 15, 7, OPAQUE),
    (87, 23, 7, OPAQUE),
    (103, 31, 7, OPAQUE),
    (119, 31, 7, OPAQUE),
    (143, 39, 7, OPAQUE),
    (159, 47, 7, OPAQUE),
    (175, 63, 7, OPAQUE),
    (191, 71, 7, OPAQUE),
    (199, 71, 7, OPAQUE),
    (223, 79, 7, OPAQUE),
    (223, 87, 7, OPAQUE),
    (223, 87, 7, OPAQUE),
    (215, 95, 7, OPAQUE),
    (215, 95, 7, OPAQUE),
    (215, 95, 7, OPAQUE),
    (215, 103, 15, OPAQUE),
    (207, 111, 15, OPAQUE),
    (207, 119, 15, OPAQUE),
    (207, 127, 15, OPAQUE),
    (207, 135, 23, OPAQUE),
    (199, 135, 23, OPAQUE),
    (199, 143, 23, OPAQUE),
    (199, 151, 31, OPAQUE),
    (191, 159, 31, OPAQUE),
    (191, 159, 31, OPAQUE),
    (191, 167, 39, OPAQUE),
    (191, 167, 39, OPAQUE),
    (191, 175, 47, OPAQUE),
    (183, 175, 47, OPAQUE),
    (183, 183, 47, OPAQUE),
    (183, 183, 55, OPAQUE),
    (195, 195, 83, OPAQUE),
    (207, 207, 111, OPAQUE),
    (223, 223, 159, OPAQUE),
    (239, 239, 199, OPAQUE),
    (255, 255, 255, OPAQUE),
)

N_COLORS: int = len(FIRE_COLORS)
COLDEST_INTENSITY: int = 0
HOTTEST_INTENSITY: int = N_COLORS - 1


def color_for(intensity: int) -> Color:
    """Return the RGBA color for an intensity index.

    Raises:
        IndexError: If intensity is outside [0, N_COLORS - 1].
    """
    if not COLDEST_INTENSITY <= intensity <= HOTTEST_INTENSITY:
        raise IndexError(
            f"Intensity {intensity} outside [{COLDEST_INTENSITY}, {HOTTEST_INTENSITY}]"
        )
    return FIRE_COLORS[intensity]
