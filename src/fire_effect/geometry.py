"""Grid geometry for the fire effect.

Derives how many cells fit on a drawing surface and how large each cell is,
given the number of cells wanted across the shorter pixel dimension.
"""

import math
from dataclasses import dataclass

DEFAULT_DENSITY: int = 50


@dataclass(frozen=True)
class FireDimensions:
    """Pixel size of the drawing surface and the cell grid derived from it.

    Attributes:
        width_px: Surface width in pixels.
        height_px: Surface height in pixels.
        density: Number of cells packed into the shorter dimension.
    """

    width_px: int
    height_px: int
    density: int = DEFAULT_DENSITY

    def __post_init__(self) -> None:
        if self.width_px <= 0 or self.height_px <= 0:
            raise ValueError(
                f"Surface size must be positive, got {self.width_px}x{self.height_px}"
            )
        if self.density <= 0:
            raise ValueError(f"density must be positive, got {self.density}")

    @property
    def taller_than_wide(self) -> bool:
        return self.width_px < self.height_px

    @property
    def cell_size_px(self) -> int:
        shortest_px = self.width_px if self.taller_than_wide else self.height_px
        return math.ceil(shortest_px / self.density)

    @property
    def width_in_cells(self) -> int:
        if self.taller_than_wide:
            return self.density
        return math.ceil(self.width_px / self.cell_size_px)

    @property
    def height_in_cells(self) -> int:
        if not self.taller_than_wide:
            return self.density
        return math.ceil(self.height_px / self.cell_size_px)

    @property
    def number_of_cells(self) -> int:
        return self.width_in_cells * self.height_in_cells


def compute_geometry(width_px: int, height_px: int, density: int = DEFAULT_DENSITY) -> FireDimensions:
    """Compute the cell grid for a surface of the given pixel size.

    Args:
        width_px: Surface width in pixels (must be positive).
        height_px: Surface height in pixels (must be positive).
        density: Number of cells in the shorter dimension.

    Returns:
        FireDimensions describing cell size and cell counts.

    Raises:
        ValueError: If any argument is not positive.
    """
    return FireDimensions(int(width_px), int(height_px), int(density))
