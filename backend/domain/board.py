"""
Board entity - static dimensions and wall layout.
"""

from typing import FrozenSet, Iterable, Iterator, Tuple

from .position import Position


class Board:
    """
    The playing field.

    Attributes:
        width, height: board dimensions in cells
        walls: frozenset of wall positions (may be empty)
    """

    def __init__(self, width: int, height: int, walls: Iterable[Tuple[int, int]] = ()):
        if width <= 0 or height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}.")

        self.width = width
        self.height = height
        self.walls: FrozenSet[Position] = frozenset(Position(x, y) for x, y in walls)

        for wall in self.walls:
            if not self.in_bounds(wall):
                raise ValueError(f"Wall out of bounds at {tuple(wall)}.")

    def contains(self, position: Tuple[int, int]) -> bool:
        """Return True if the position is a wall cell."""
        return position in self.walls

    def in_bounds(self, position: Tuple[int, int]) -> bool:
        x, y = position
        return 0 <= x < self.width and 0 <= y < self.height

    def cells(self) -> Iterator[Position]:
        for x in range(self.width):
            for y in range(self.height):
                yield Position(x, y)

    def __repr__(self):
        return f"<Board {self.width}x{self.height}, walls={len(self.walls)}>"
