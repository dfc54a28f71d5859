"""Fire rendering for the Pygame host.

This module provides the FireRenderer class which draws a published fire
frame as a block of colored cells.
"""

from typing import TYPE_CHECKING, Tuple

import pygame

from fire_effect.palette import color_for

if TYPE_CHECKING:
    from fire_effect.simulation import FireFrame


def cell_rect(column: int, row: int, cell_size: int) -> Tuple[int, int, int, int]:
    """Return (x, y, width, height) of a cell in surface coordinates.

    Width and height are taken as the distance between this cell's edge and
    the next one, so neighbouring cells always tile without gaps.
    """
    x = column * cell_size
    y = row * cell_size
    width = (column + 1) * cell_size - column * cell_size
    height = (row + 1) * cell_size - row * cell_size
    return (x, y, width, height)


class FireRenderer:
    """Renders fire frames onto a Pygame surface.

    The fire is drawn onto its own per-pixel-alpha layer so that the
    transparent colors at the cold end of the ramp show whatever lies
    underneath, then the layer is blitted at the requested offset.
    """

    def __init__(self) -> None:
        self._layer: pygame.Surface | None = None

    def _layer_for(self, size: Tuple[int, int]) -> pygame.Surface:
        if self._layer is None or self._layer.get_size() != size:
            self._layer = pygame.Surface(size, pygame.SRCALPHA)
        return self._layer

    def draw(
        self,
        screen: pygame.Surface,
        frame: "FireFrame",
        offset: Tuple[int, int] = (0, 0),
    ) -> None:
        """Draw every row of the frame except the bottom (source) row."""
        dims = frame.dimensions
        layer = self._layer_for((dims.width_px, dims.height_px))
        layer.fill((0, 0, 0, 0))

        width = dims.width_in_cells
        cell_size = dims.cell_size_px
        grid = frame.grid

        for column in range(width):
            for row in range(dims.height_in_cells - 1):
                intensity = int(grid[column + width * row])
                pygame.draw.rect(layer, color_for(intensity), cell_rect(column, row, cell_size))

        screen.blit(layer, offset)
