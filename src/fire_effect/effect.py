"""Host-facing fire effect.

Ties geometry, seeding and stepping together the way a drawing host needs them:
the host reports its surface size every frame, flips the ignite flag from time
to time, calls ``tick`` on a timer and draws whatever frame was last published.
"""

import logging
from typing import Optional

from .config import FireConfig
from .geometry import FireDimensions, compute_geometry
from .simulation import FireFrame, FireSimulation

logger = logging.getLogger(__name__)


class IgniteToggle:
    """Flips the ignite flag once per full interval of elapsed time."""

    def __init__(self, interval_ms: int, ignite: bool = True) -> None:
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self.interval_ms = interval_ms
        self.ignite = ignite
        self._elapsed_ms = 0

    def advance(self, elapsed_ms: int) -> bool:
        """Account for elapsed time and return the current flag."""
        self._elapsed_ms += elapsed_ms
        while self._elapsed_ms >= self.interval_ms:
            self._elapsed_ms -= self.interval_ms
            self.ignite = not self.ignite
            logger.info(f"Fire {'ignited' if self.ignite else 'extinguished'}")
        return self.ignite


class FireEffect:
    """Drives a FireSimulation from host events and publishes frames.

    Attributes:
        config: Effect configuration.
        simulation: The underlying fire model.
        ignite: Ignite flag last applied to the bottom row.
        frame: Last published read-only frame, None until the first allocation.
    """

    def __init__(self, config: Optional[FireConfig] = None, ignite: bool = True) -> None:
        self.config = config or FireConfig()
        self.simulation = FireSimulation(
            seed=self.config.seed,
            inclusive_column_bound=self.config.inclusive_column_bound,
        )
        self.ignite = ignite
        self.frame: Optional[FireFrame] = None

    @property
    def dimensions(self) -> Optional[FireDimensions]:
        return self.simulation.dimensions

    def update_surface(self, width_px: int, height_px: int) -> Optional[FireDimensions]:
        """
        Recompute geometry for the current surface size.

        A surface with no area is ignored until a positive size is reported.
        A geometry different from the current one discards the grid, allocates
        a new one and seeds its bottom row.

        Returns:
            The geometry in use after the update, or None if none is known yet.
        """
        if width_px <= 0 or height_px <= 0:
            logger.debug(f"Ignoring empty surface {width_px}x{height_px}")
            return self.dimensions

        dimensions = compute_geometry(width_px, height_px, self.config.density)
        if dimensions != self.dimensions:
            self.simulation.allocate(dimensions)
            self.simulation.seed_bottom_row(self.ignite)
            self._publish()
        return dimensions

    def set_ignite(self, ignite: bool) -> None:
        """Re-seed the bottom row when the ignite flag changes."""
        if ignite == self.ignite:
            return
        self.ignite = ignite
        if self.simulation.is_allocated:
            self.simulation.seed_bottom_row(ignite)
            self._publish()

    def tick(self) -> Optional[FireFrame]:
        """Advance the fire one step and publish the result."""
        if not self.simulation.is_allocated:
            return None
        self.simulation.step(self.config.wind)
        self._publish()
        if self.simulation.steps % 100 == 0:
            logger.debug(f"Fire step {self.simulation.steps}")
        return self.frame

    def _publish(self) -> None:
        self.frame = self.simulation.read()
