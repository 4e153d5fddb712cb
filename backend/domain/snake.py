"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, Optional, Tuple

from .board import Board
from .position import Position


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of Position from head at index 0 to tail at the end

    Segments are not structurally kept distinct; overlapping segments are
    reported by has_self_collision().
    """

    def __init__(self, positions: Iterable[Tuple[int, int]]):
        self.positions = deque(Position(x, y) for x, y in positions)
        if not self.positions:
            raise ValueError("A snake needs at least one segment.")

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        return self.positions[0]

    def __len__(self) -> int:
        return len(self.positions)

    def advance(self, new_head: Position) -> None:
        """
        Push a new head to the front. The tail is kept; the game decides
        whether to drop it (move) or not (grow).
        """
        self.positions.appendleft(new_head)

    def drop_tail(self) -> Position:
        return self.positions.pop()

    def has_self_collision(self) -> bool:
        """True if any two segments occupy the same cell."""
        for i, first in enumerate(self.positions):
            for j, second in enumerate(self.positions):
                if i != j and first == second:
                    return True
        return False

    def has_wall_collision(self, board: Board) -> bool:
        """True if any segment sits on any wall cell."""
        for segment in self.positions:
            for wall in board.walls:
                if segment == wall:
                    return True
        return False

    def is_out_of_bounds(self, board: Board) -> bool:
        return not board.in_bounds(self.head)

    def collision_reason(self, board: Board) -> Optional[str]:
        """
        Describe why the snake is dead: 'self', 'wall', 'bounds', or None
        when there is no collision.
        """
        if self.has_self_collision():
            return "self"
        if self.has_wall_collision(board):
            return "wall"
        if self.is_out_of_bounds(board):
            return "bounds"
        return None
