"""Entry point for ``python -m stupidmodel``.

Loads the default YAML config, builds the habitat, and grows food for a
fixed number of ticks, logging the total food available at the end.
"""

from __future__ import annotations

import argparse
import logging
import pathlib

from stupidmodel.simulation.config import SimulationConfig
from stupidmodel.simulation.engine import SimulationEngine

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI args, create engine, run it."""
    parser = argparse.ArgumentParser(
        prog="stupidmodel",
        description="StupidModel - habitat food growth",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=_DEFAULT_CONFIG,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--ticks",
        type=int,
        default=100,
        help="Number of ticks to run (default: 100)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    config = SimulationConfig.from_yaml(args.config)
    engine = SimulationEngine(config=config)
    engine.run(ticks=args.ticks)

    logger.info(
        "Finished %d ticks, total food %.4f",
        engine.tick,
        engine.total_food(),
    )


if __name__ == "__main__":
    main()
