"""Test configuration and fixtures."""

import os
import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    """Make `fire_effect` and `visualization` importable from a source checkout."""
    src_dir = Path(__file__).resolve().parents[1] / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))

    # Pygame tests only draw onto off-screen surfaces
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


class FixedRandom:
    """Stand-in for the model's random generator returning one value."""

    def __init__(self, value: float) -> None:
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


@pytest.fixture
def fixed_random():
    """Factory for generators that always return the given value."""
    return FixedRandom


@pytest.fixture
def wide_dimensions():
    """10x5 cells of one pixel each (wider than tall)."""
    from fire_effect.geometry import compute_geometry
    return compute_geometry(10, 5, density=5)


@pytest.fixture
def tall_dimensions():
    """5x10 cells of one pixel each (taller than wide)."""
    from fire_effect.geometry import compute_geometry
    return compute_geometry(5, 10, density=5)
