"""Config — load simulation parameters from YAML files.

World size, map file, seeding probabilities and per-species constants
live in YAML and are parsed into a typed dataclass here.  Bad grid
dimensions (non-positive or not integers) are not fatal: they fall back
to the defaults with a warning.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

log = logging.getLogger(__name__)

DEFAULT_DEPTH = 50
DEFAULT_WIDTH = 50


@dataclass
class SimulationConfig:
    """Top-level simulation configuration.

    Attributes:
        seed: RNG seed for deterministic replay; None draws fresh entropy.
        depth: Number of grid rows.
        width: Number of grid columns.
        map_path: Terrain map file; None means an all-grass world.
        fox_creation_probability: Chance a cell is seeded with a fox.
        rabbit_creation_probability: Chance a cell without a fox is
            seeded with a rabbit.
        flower_creation_probability: Chance an empty cell gets a flower.
        water_lily_creation_probability: Chance an empty cell gets a
            water lily.
        shuffle_actor_order: Re-shuffle the actor registry every tick
            instead of keeping insertion order.
        species: Per-species constant overrides, e.g.
            ``{"fox": {"max_age": 100}}``.
    """

    seed: int | None = 42
    depth: int = DEFAULT_DEPTH
    width: int = DEFAULT_WIDTH
    map_path: Path | None = None

    # World seeding
    fox_creation_probability: float = 0.02
    rabbit_creation_probability: float = 0.08
    flower_creation_probability: float = 0.15
    water_lily_creation_probability: float = 0.10

    shuffle_actor_order: bool = False

    species: dict[str, dict[str, Any]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Fall back to default dimensions unless both are positive ints."""
        if not (_is_dimension(self.depth) and _is_dimension(self.width)):
            log.warning(
                "Grid dimensions must be positive integers (got %rx%r); using %dx%d",
                self.depth,
                self.width,
                DEFAULT_DEPTH,
                DEFAULT_WIDTH,
            )
            self.depth = DEFAULT_DEPTH
            self.width = DEFAULT_WIDTH
        if self.map_path is not None:
            self.map_path = Path(self.map_path)

    @classmethod
    def from_yaml(cls, path: str | Path) -> SimulationConfig:
        """Load configuration from a YAML file.

        A relative ``map_path`` is resolved against the config file's
        directory.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated SimulationConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        map_path = data.get("map_path")
        if map_path is not None:
            map_path = Path(map_path)
            if not map_path.is_absolute():
                map_path = path.parent / map_path

        return cls(
            seed=data.get("seed", cls.seed),
            depth=data.get("depth", cls.depth),
            width=data.get("width", cls.width),
            map_path=map_path,
            fox_creation_probability=data.get(
                "fox_creation_probability",
                cls.fox_creation_probability,
            ),
            rabbit_creation_probability=data.get(
                "rabbit_creation_probability",
                cls.rabbit_creation_probability,
            ),
            flower_creation_probability=data.get(
                "flower_creation_probability",
                cls.flower_creation_probability,
            ),
            water_lily_creation_probability=data.get(
                "water_lily_creation_probability",
                cls.water_lily_creation_probability,
            ),
            shuffle_actor_order=data.get(
                "shuffle_actor_order",
                cls.shuffle_actor_order,
            ),
            species=data.get("species") or {},
        )


def _is_dimension(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
