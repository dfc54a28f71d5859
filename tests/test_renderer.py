"""Unit tests for the Pygame fire renderer."""

import numpy as np
import pygame
import pytest
from fire_effect.geometry import compute_geometry
from fire_effect.simulation import FireFrame
from visualization.renderer import FireRenderer, cell_rect


@pytest.fixture
def screen():
    pygame.init()
    surface = pygame.Surface((20, 10))
    surface.fill((0, 0, 0))
    yield surface
    pygame.quit()


def make_frame(dims, values):
    grid = np.array(values, dtype=np.int16)
    grid.setflags(write=False)
    return FireFrame(dimensions=dims, grid=grid)


class TestCellRect:
    """Test cases for cell rectangle arithmetic."""

    def test_cells_tile_without_gaps(self):
        """Test that neighbouring cells share edges."""
        for column in range(10):
            x, _, width, _ = cell_rect(column, 0, 3)
            next_x, _, _, _ = cell_rect(column + 1, 0, 3)
            assert x + width == next_x

    def test_rect_position(self):
        """Test the top-left corner and size of a cell."""
        assert cell_rect(2, 3, 4) == (8, 12, 4, 4)


class TestFireRenderer:
    """Test cases for FireRenderer.draw."""

    def test_draws_cells_with_ramp_colors(self, screen):
        """Test that a hot cell is drawn white and cold cells stay transparent."""
        dims = compute_geometry(20, 10, density=5)   # 10x5 cells of 2px
        values = [0] * dims.number_of_cells
        values[0] = 38
        frame = make_frame(dims, values)

        FireRenderer().draw(screen, frame)

        assert tuple(screen.get_at((0, 0)))[:3] == (255, 255, 255)
        assert tuple(screen.get_at((1, 1)))[:3] == (255, 255, 255)
        assert tuple(screen.get_at((2, 0)))[:3] == (0, 0, 0)

    def test_bottom_row_not_drawn(self, screen):
        """Test that the source row stays off screen."""
        dims = compute_geometry(20, 10, density=5)
        values = [0] * 40 + [38] * 10
        FireRenderer().draw(screen, make_frame(dims, values))
        assert tuple(screen.get_at((5, 9)))[:3] == (0, 0, 0)

    def test_offset(self, screen):
        """Test that the fire layer is placed at the offset."""
        dims = compute_geometry(10, 5, density=5)   # 10x5 cells of 1px
        values = [0] * dims.number_of_cells
        values[0] = 38
        FireRenderer().draw(screen, make_frame(dims, values), (5, 5))
        assert tuple(screen.get_at((5, 5)))[:3] == (255, 255, 255)
        assert tuple(screen.get_at((0, 0)))[:3] == (0, 0, 0)
