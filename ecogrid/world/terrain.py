"""Terrain — static per-cell classification and habitability rules.

The terrain matrix is loaded once per run and shared by both field
buffers.  It never knows about occupancy: the only question it answers
is whether a species may live on a cell at all.
"""

from __future__ import annotations

from enum import Enum

from ecogrid.life.species import Category, Species


class Terrain(Enum):
    """Cell terrain, valued by its map-file id."""

    GRASS = 0
    WATER = 1
    STONE = 2

    @property
    def colour(self) -> tuple[int, int, int]:
        """Display colour for the renderer."""
        return _COLOURS[self]

    def is_habitable(self, species: Species) -> bool:
        """Return True if ``species`` may occupy a cell of this terrain.

        Args:
            species: The species asking to move, be born, or spread here.
        """
        if self is Terrain.GRASS:
            return species.category is Category.ANIMAL or species is Species.FLOWER
        if self is Terrain.WATER:
            return species is Species.WATER_LILY
        return False


TerrainGrid = list[list[Terrain]]

_COLOURS: dict[Terrain, tuple[int, int, int]] = {
    Terrain.GRASS: (34, 139, 34),
    Terrain.WATER: (65, 105, 225),
    Terrain.STONE: (128, 128, 128),
}


def uniform_terrain(
    depth: int,
    width: int,
    terrain: Terrain = Terrain.GRASS,
) -> TerrainGrid:
    """Build a ``depth`` x ``width`` matrix filled with one terrain type."""
    return [[terrain for _ in range(width)] for _ in range(depth)]
