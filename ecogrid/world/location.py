"""Location — an immutable ``(row, col)`` coordinate on the grid."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """A cell coordinate.

    Attributes:
        row: Row index (0 = top).
        col: Column index (0 = left).
    """

    row: int
    col: int

    def __hash__(self) -> int:
        # Row in the upper 16 bits, column in the lower.
        return (self.row << 16) + self.col

    def __str__(self) -> str:
        return f"{self.row},{self.col}"
