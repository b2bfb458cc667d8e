"""Entry point for ``python -m ecogrid``.

Loads the default YAML config, builds a simulation engine, and either
opens a Pygame window to watch the ecosystem or runs headless, logging
the population after every tick.
"""

from __future__ import annotations

import argparse
import logging
import pathlib

from ecogrid.simulation.config import SimulationConfig
from ecogrid.simulation.engine import SimulationEngine

log = logging.getLogger(__name__)

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)


def build_parser() -> argparse.ArgumentParser:
    """Return the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="ecogrid",
        description="ecogrid - predator/prey/plant grid ecosystem",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=_DEFAULT_CONFIG,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--map",
        type=pathlib.Path,
        default=None,
        help="Terrain map file (overrides the config's map_path)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="RNG seed (overrides the config's seed)",
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run without a window and log population each tick",
    )
    parser.add_argument(
        "--ticks",
        type=int,
        default=100,
        help="Ticks to run in headless mode (default: 100)",
    )
    parser.add_argument(
        "--cell-size",
        type=int,
        default=10,
        help="Pixel size per grid cell (default: 10)",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=30,
        help="Target frames per second (default: 30)",
    )
    parser.add_argument(
        "--speed",
        type=float,
        default=5.0,
        help="Simulation ticks per second (default: 5)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def load_config(args: argparse.Namespace) -> SimulationConfig:
    """Load the YAML config and apply command-line overrides."""
    config = SimulationConfig.from_yaml(args.config)
    if args.map is not None:
        config.map_path = args.map
    if args.seed is not None:
        config.seed = args.seed
    return config


def run_headless(engine: SimulationEngine, ticks: int) -> None:
    """Step ``engine`` up to ``ticks`` times, stopping once unviable."""
    for _ in range(ticks):
        if not engine.is_viable():
            log.info("World no longer viable at step %d", engine.tick)
            break
        engine.step()
        log.info("Step %d: %s", engine.tick, engine.population().details())


def main(argv: list[str] | None = None) -> None:
    """Parse CLI args, create engine, run headless or launch renderer."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    engine = SimulationEngine(config=load_config(args))

    if args.headless:
        run_headless(engine, args.ticks)
        return

    from ecogrid.ui.pygame_client import PygameRenderer

    renderer = PygameRenderer(
        engine=engine,
        cell_size=args.cell_size,
        ticks_per_second=args.speed,
    )
    renderer.run(fps=args.fps)


if __name__ == "__main__":
    main()
