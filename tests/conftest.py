"""Shared fixtures for the ecogrid test suite."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from dataclasses import replace
from typing import Any

import numpy as np
import pytest
from numpy.random import Generator

from ecogrid.life.profiles import DEFAULT_PROFILES, SpeciesProfile
from ecogrid.life.species import Species
from ecogrid.simulation.config import SimulationConfig
from ecogrid.simulation.engine import SimulationEngine
from ecogrid.world.field import Field
from ecogrid.world.location import Location
from ecogrid.world.terrain import Terrain, TerrainGrid, uniform_terrain


class ScriptedRng:
    """Stand-in for ``numpy.random.Generator`` with forced outcomes.

    Args:
        draw: Value returned by every ``random()`` call.
        first: Location moved to the front by every ``shuffle``; other
            elements keep their original order.
        ints: Queue of values returned by ``integers``; once empty,
            ``integers`` returns its lower bound.
    """

    def __init__(
        self,
        draw: float = 0.0,
        first: Location | None = None,
        ints: list[int] | None = None,
    ) -> None:
        self.draw = draw
        self.first = first
        self.ints = list(ints or [])

    def random(self) -> float:
        return self.draw

    def integers(self, low: int, high: int | None = None) -> int:
        if self.ints:
            return self.ints.pop(0)
        return 0 if high is None else low

    def shuffle(self, seq: MutableSequence[Any]) -> None:
        if self.first is not None:
            seq[:] = sorted(seq, key=lambda x: x != self.first)


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def scripted_rng() -> type[ScriptedRng]:
    """The scripted generator class, for tests that force draws."""
    return ScriptedRng


@pytest.fixture
def make_field() -> Callable[..., Field]:
    """Factory for a field over a uniform terrain (default all grass)."""

    def _make(depth: int, width: int, terrain: Terrain = Terrain.GRASS) -> Field:
        return Field(
            depth=depth,
            width=width,
            terrain=uniform_terrain(depth, width, terrain),
        )

    return _make


@pytest.fixture
def small_field(make_field: Callable[..., Field]) -> Field:
    """A small 5x5 all-grass field."""
    return make_field(5, 5)


@pytest.fixture
def default_config() -> SimulationConfig:
    """Default 50x50 all-grass config (no YAML file needed)."""
    return SimulationConfig()


@pytest.fixture
def make_engine() -> Callable[..., SimulationEngine]:
    """Factory for an unpopulated engine over a hand-made terrain matrix."""

    def _make(terrain: TerrainGrid, seed: int = 7) -> SimulationEngine:
        return SimulationEngine(
            config=SimulationConfig(seed=seed),
            terrain=terrain,
            populate=False,
        )

    return _make


@pytest.fixture
def profile_for() -> Callable[..., SpeciesProfile]:
    """Factory for a default species profile with some constants replaced."""

    def _make(species: Species, **changes: Any) -> SpeciesProfile:
        return replace(DEFAULT_PROFILES[species], **changes)

    return _make
