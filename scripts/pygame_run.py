#!/usr/bin/env python3
"""Pygame window hosting the fire effect.

The window is black, with the fire drawn as a strip along its bottom edge.
Every few seconds the fire is extinguished or re-ignited.

Usage:
    python scripts/pygame_run.py [config.json]
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import pygame

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from fire_effect import FireConfig, FireEffect, IgniteToggle, load_config

from visualization import (
    FireRenderer,
    BLACK,
    WINDOW_TITLE,
)

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1


class FireRunner:
    """Main loop of the fire window.

    Handles window events, the step timer and the ignite toggle, and draws
    the latest published fire frame every frame.

    Attributes:
        config: Effect configuration.
        screen: Pygame display surface.
        clock: Pygame clock for FPS control.
        effect: The fire effect driven by this window.
        toggle: Flips the ignite flag on a fixed period.
        renderer: Draws fire frames.
    """

    def __init__(self, config: FireConfig) -> None:
        """Initialize the window and the fire effect.

        Args:
            config: Effect configuration.
        """
        self.config = config

        pygame.init()
        self.screen = pygame.display.set_mode(
            (config.window_width, config.window_height), pygame.RESIZABLE
        )
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()

        self.effect = FireEffect(config)
        self.toggle = IgniteToggle(config.toggle_interval_ms, ignite=True)
        self.renderer = FireRenderer()

        pygame.time.set_timer(TICK_EVENT, config.tick_interval_ms)

    def _fire_area(self) -> tuple[int, int, int]:
        """Return (width, height, top) of the fire strip in window pixels."""
        window_width, window_height = self.screen.get_size()
        height = min(self.config.fire_height_px, window_height)
        return window_width, height, window_height - height

    def _render(self) -> None:
        """Render the background and the latest fire frame."""
        self.screen.fill(BLACK)

        frame = self.effect.frame
        if frame is not None:
            _, _, top = self._fire_area()
            self.renderer.draw(self.screen, frame, (0, top))

        pygame.display.flip()

    def run(self) -> None:
        """Run the main loop until the window is closed."""
        running = True

        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

                elif event.type == TICK_EVENT:
                    self.effect.tick()

            # Surface size is re-read every frame so resizes take effect at once
            width, height, _ = self._fire_area()
            self.effect.update_surface(width, height)

            elapsed_ms = self.clock.tick(self.config.fps)
            self.effect.set_ignite(self.toggle.advance(elapsed_ms))

            self._render()

        logger.info("Window closed, shutting down")
        pygame.quit()


def main(config_path: Optional[str] = None) -> None:
    """Main entry point for the fire window."""
    config = load_config(config_path) if config_path else FireConfig()
    logger.info(f"Starting fire window with {config}")
    FireRunner(config).run()


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
    main(sys.argv[1] if len(sys.argv) > 1 else None)
