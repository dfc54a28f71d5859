#!/usr/bin/env python3
"""Console runner for the fire effect.

Prints the fire as text for a number of steps, hottest cells as the densest
characters. The source row at the bottom is not printed.
"""

import logging
import sys
import time
from pathlib import Path

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from fire_effect import FireConfig, FireEffect, FireFrame, N_COLORS

SHADES = " .:-=+*#%@"


def render_text(frame: FireFrame) -> str:
    """
    Build a text picture of a frame.

    Args:
        frame: The fire frame to render

    Returns:
        One line per visible row
    """
    lines = []
    for row in frame.as_rows()[:-1]:
        lines.append("".join(SHADES[int(v) * len(SHADES) // N_COLORS] for v in row))
    return "\n".join(lines)


def main():
    """Run the fire in the console."""
    # Simulation parameters
    WIDTH_PX = 320
    HEIGHT_PX = 80
    STEPS = 60

    config = FireConfig(density=20, seed=7)
    effect = FireEffect(config)
    effect.update_surface(WIDTH_PX, HEIGHT_PX)

    for i in range(STEPS):
        # Let it burn for the first half, then put it out
        effect.set_ignite(i < STEPS // 2)
        frame = effect.tick()
        print(f"\n--- STEP {i + 1} ---")
        print(render_text(frame))
        time.sleep(config.tick_interval_ms / 1000)


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
    main()
