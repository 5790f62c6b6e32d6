"""Entry point for ``python -m powderbox``.

Loads the default YAML config, builds a simulation engine and opens a
Pygame window to play in the sandbox.
"""

from __future__ import annotations

import argparse
import logging
import pathlib

from powderbox.simulation.config import SimulationConfig
from powderbox.simulation.engine import SimulationEngine
from powderbox.ui.pygame_client import PygameRenderer

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)

logger = logging.getLogger("powderbox")


def main() -> None:
    """Parse CLI args, create engine, launch renderer."""
    parser = argparse.ArgumentParser(
        prog="powderbox",
        description="Powderbox - falling-sand materials sandbox",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=_DEFAULT_CONFIG,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--cell-size",
        type=int,
        default=6,
        help="Pixel size per grid cell (default: 6)",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=60,
        help="Target frames per second (default: 60)",
    )
    parser.add_argument(
        "--speed",
        type=float,
        default=None,
        help="Simulation ticks per second (default: from config)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.config.exists():
        config = SimulationConfig.from_yaml(args.config)
    else:
        logger.warning("config %s not found, using defaults", args.config)
        config = SimulationConfig()
    engine = SimulationEngine(config=config)
    logger.info(
        "starting %dx%d sandbox (seed=%s)",
        config.grid_width,
        config.grid_height,
        config.seed,
    )

    speed = args.speed if args.speed is not None else config.ticks_per_second
    renderer = PygameRenderer(
        engine=engine,
        cell_size=args.cell_size,
        ticks_per_second=speed,
    )
    renderer.run(fps=args.fps)


if __name__ == "__main__":
    main()
