"""
Game constants for GridSnake.
"""

from enum import Enum
from typing import Tuple


class Direction(Enum):
    """Movement directions. The board uses screen coordinates: DOWN is +y."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def offset(self) -> Tuple[int, int]:
        return DIRECTION_OFFSETS[self]

    @classmethod
    def parse(cls, value: str) -> "Direction":
        """Convert a case-insensitive name like 'up' into a Direction."""
        try:
            return cls[value.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown direction '{value}'") from None


UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Inverted y axis: up is -, down is +
DIRECTION_OFFSETS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

# Game settings
DEFAULT_WIDTH = 16
DEFAULT_HEIGHT = 16
DEFAULT_TICK_MS = 250
START_POSITION = (0, 0)
