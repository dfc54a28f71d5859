"""Fire propagation model.

The fire is a flat, row-major list of intensity indices. The bottom row is the
heat source; every step copies each cell's lower neighbour upward with a random
decay and shifts it sideways according to the wind.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np
from mesa import Model

from .geometry import FireDimensions
from .palette import COLDEST_INTENSITY, HOTTEST_INTENSITY

logger = logging.getLogger(__name__)


class WindDirection(Enum):
    """Horizontal drift applied while heat rises."""
    RIGHT = "right"
    LEFT = "left"
    NONE = "none"


@dataclass(frozen=True, eq=False)
class FireFrame:
    """Read-only view of the fire published after a step.

    Attributes:
        dimensions: Geometry the grid was allocated for.
        grid: Row-major intensity indices (not writeable).
        step: Value of the model step counter when the frame was taken.
    """

    dimensions: FireDimensions
    grid: np.ndarray
    step: int = 0

    def intensity_at(self, column: int, row: int) -> int:
        return int(self.grid[column + self.dimensions.width_in_cells * row])

    def as_rows(self) -> np.ndarray:
        """Return the grid reshaped to (height_in_cells, width_in_cells)."""
        return self.grid.reshape(
            self.dimensions.height_in_cells, self.dimensions.width_in_cells
        )


class FireSimulation(Model):
    """Stochastic cellular model of a flickering fire."""

    def __init__(
        self,
        seed: Optional[int] = None,
        inclusive_column_bound: bool = True,
    ):
        """
        Initialize an empty fire model.

        Args:
            seed: Seed for the random generator driving decay and drift.
            inclusive_column_bound: Visit one column past the right edge on every
                step, as the classic animation does. False limits the sweep to
                the visible columns.
        """
        super().__init__(seed=seed)
        self.inclusive_column_bound = inclusive_column_bound
        self.dimensions: Optional[FireDimensions] = None
        self.grid: list[int] = []

    @property
    def is_allocated(self) -> bool:
        return self.dimensions is not None

    def allocate(self, dimensions: FireDimensions) -> None:
        """Replace the grid with a cold one sized for the given geometry."""
        self.dimensions = dimensions
        self.grid = [COLDEST_INTENSITY] * dimensions.number_of_cells
        logger.info(
            f"Allocated fire grid {dimensions.width_in_cells}x{dimensions.height_in_cells} "
            f"(cell {dimensions.cell_size_px}px) for surface {dimensions.width_px}x{dimensions.height_px}"
        )

    def seed_bottom_row(self, ignite: bool) -> None:
        """
        Set the heat source.

        Every cell of the bottom row becomes the hottest intensity when igniting
        and the coldest one otherwise. No other cell is touched.
        """
        dims = self._require_dimensions()
        width = dims.width_in_cells
        first_bottom_index = dims.number_of_cells - width
        value = HOTTEST_INTENSITY if ignite else COLDEST_INTENSITY

        for column in range(width):
            self.grid[first_bottom_index + column] = value

    def step(self, wind: WindDirection = WindDirection.RIGHT) -> None:
        """
        Advance the fire by one tick.

        Lower neighbours are always read from the grid as it was before the
        step; writes go to a copy that replaces the grid once the sweep is
        done. The sweep stops entirely at the first cell whose
        lower neighbour lies past the end of the grid.
        """
        dims = self._require_dimensions()
        width = dims.width_in_cells
        height = dims.height_in_cells
        overflow_index = dims.number_of_cells
        decay_range = 2 if dims.taller_than_wide else 3
        last_column = width if self.inclusive_column_bound else width - 1

        cells = list(self.grid)
        for column in range(last_column + 1):
            for row in range(1, height - 1):
                current_index = column + width * row
                below_index = current_index + width

                # bottom-right-most cell reached, nothing below to copy from
                if below_index >= overflow_index:
                    self.grid = cells
                    return

                decay = math.floor(self.random.random() * decay_range)
                new_intensity = max(self.grid[below_index] - decay, COLDEST_INTENSITY)
                cells[self._drift(current_index, decay, wind)] = new_intensity

        self.grid = cells

    @staticmethod
    def _drift(index: int, decay: int, wind: WindDirection) -> int:
        if wind == WindDirection.RIGHT:
            return index - decay if index - decay >= 0 else index
        if wind == WindDirection.LEFT:
            return index + decay if index + decay >= 0 else index
        return index

    def read(self) -> FireFrame:
        """Return a read-only snapshot of the current grid."""
        dims = self._require_dimensions()
        grid = np.array(self.grid, dtype=np.int16)
        grid.setflags(write=False)
        return FireFrame(dimensions=dims, grid=grid, step=self.steps)

    def _require_dimensions(self) -> FireDimensions:
        if self.dimensions is None:
            raise RuntimeError("Fire grid has not been allocated yet. Call allocate first.")
        return self.dimensions
