"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import Any, Dict, List, Optional, Tuple

from .constants import Direction


class GameState:
    """
    A snapshot of the game at a specific tick.

    Attributes:
        tick: which tick of the current game we are in (0-based)
        width, height: board dimensions
        walls: list of (x, y) wall positions
        snake: list of (x, y) from head to tail
        reward: (x, y) of the reward, or None when the board is full
        score: rewards eaten so far
        direction: direction the snake is heading
        over: whether the game has reached a terminal state
        won: whether the terminal state is a full board
        death_reason: 'self', 'wall', 'bounds', 'board_full' or None
    """

    def __init__(
        self,
        tick: int,
        width: int,
        height: int,
        walls: List[Tuple[int, int]],
        snake: List[Tuple[int, int]],
        reward: Optional[Tuple[int, int]],
        score: int,
        direction: Direction,
        over: bool = False,
        won: bool = False,
        death_reason: Optional[str] = None
    ):
        self.tick = tick
        self.width = width
        self.height = height
        self.walls = walls
        self.snake = snake
        self.reward = reward
        self.score = score
        self.direction = direction
        self.over = over
        self.won = won
        self.death_reason = death_reason

    @property
    def head(self) -> Tuple[int, int]:
        return self.snake[0]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        # = wall
        A = reward
        H = snake head
        o = snake body
        Row y=0 is printed first (top), matching screen coordinates.
        Segments outside the board are not drawn.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        for wx, wy in self.walls:
            board[wy][wx] = '#'

        if self.reward is not None:
            rx, ry = self.reward
            board[ry][rx] = 'A'

        # Draw tail first so the head wins on overlapping cells
        for pos_idx in range(len(self.snake) - 1, -1, -1):
            x, y = self.snake[pos_idx]
            if not (0 <= x < self.width and 0 <= y < self.height):
                continue
            board[y][x] = 'H' if pos_idx == 0 else 'o'

        result = [f"{y:2d} {' '.join(board[y])}" for y in range(self.height)]

        # Add x-axis labels at the bottom
        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))

        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dict (tuples become lists)."""
        return {
            "tick": self.tick,
            "width": self.width,
            "height": self.height,
            "walls": [list(w) for w in self.walls],
            "snake": [list(s) for s in self.snake],
            "reward": list(self.reward) if self.reward is not None else None,
            "score": self.score,
            "direction": self.direction.value,
            "over": self.over,
            "won": self.won,
            "death_reason": self.death_reason,
        }

    def __repr__(self):
        return (
            f"<GameState tick={self.tick}, reward={self.reward}, "
            f"length={len(self.snake)}, score={self.score}>"
        )
