"""
Position value type for grid cells.
"""

from typing import NamedTuple

from .constants import Direction


class Position(NamedTuple):
    """An integer (x, y) grid coordinate."""

    x: int
    y: int

    def moved(self, direction: Direction) -> "Position":
        """Return the neighbouring cell one step in the given direction."""
        dx, dy = direction.offset
        return Position(self.x + dx, self.y + dy)
