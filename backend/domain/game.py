"""
Game entity - composes board, snake, reward, direction and score.
"""

import logging
import random
from typing import Iterable, Optional, Tuple

from .board import Board
from .constants import Direction, RIGHT, START_POSITION
from .game_state import GameState
from .position import Position
from .rewards import BoardFullError, random_free_cell
from .snake import Snake

logger = logging.getLogger(__name__)


class Game:
    """
    One round of Snake, from the first tick to the terminal collision.

    The driver calls update_direction() for input, step() once per tick and
    is_over() after every step. There is no reset: build a new Game instead.

    Attributes:
        board: the Board (width, height, walls)
        snake: the Snake body
        reward: position of the collectible tile, None once the board is full
        direction: last accepted direction
        score: number of rewards eaten
    """

    def __init__(
        self,
        width: int,
        height: int,
        walls: Iterable[Tuple[int, int]] = (),
        rng: Optional[random.Random] = None,
        snake: Optional[Iterable[Tuple[int, int]]] = None,
        reward: Optional[Tuple[int, int]] = None,
        direction: Direction = RIGHT
    ):
        self.board = Board(width, height, walls)
        self.snake = Snake(snake if snake is not None else [START_POSITION])
        self.direction = direction
        self.score = 0
        self.rng = rng if rng is not None else random.Random()
        self._won = False

        self.reward: Optional[Position] = None
        if reward is None:
            self.position_new_reward()
        else:
            reward = Position(*reward)
            if not self.board.in_bounds(reward):
                raise ValueError(f"Reward out of bounds at {tuple(reward)}.")
            self.reward = reward

    @property
    def width(self) -> int:
        return self.board.width

    @property
    def height(self) -> int:
        return self.board.height

    @property
    def walls(self) -> frozenset:
        return self.board.walls

    @property
    def segments(self) -> Tuple[Position, ...]:
        """Snake segments in order, head first."""
        return tuple(self.snake.positions)

    @property
    def won(self) -> bool:
        """True once the snake left no free cell for a new reward."""
        return self._won

    def update_direction(self, direction: Direction) -> None:
        """
        Overwrite the pending direction. Reversing into the neck is allowed;
        it shows up as a self-collision after the next step.
        """
        self.direction = direction

    def step(self) -> None:
        """
        Advance the snake one cell in the current direction.

        Collisions are not checked here; call is_over() afterwards.
        """
        if self._won:
            logger.warning("step() called on a finished game; ignoring")
            return

        new_head = self.snake.head.moved(self.direction)
        if new_head == self.reward:
            # snake ate the reward: grow by keeping the tail
            self.score += 1
            self.snake.advance(new_head)
            self.position_new_reward()
        else:
            self.snake.advance(new_head)
            self.snake.drop_tail()

    def position_new_reward(self) -> None:
        """Move the reward to a random free cell, or mark the game won."""
        try:
            self.reward = random_free_cell(self.board, set(self.snake.positions), self.rng)
        except BoardFullError:
            logger.info("Board is full after %d rewards; game won", self.score)
            self.reward = None
            self._won = True

    def is_over(self) -> bool:
        if self._won:
            return True
        return (
            self.snake.has_self_collision()
            or self.snake.has_wall_collision(self.board)
            or self.snake.is_out_of_bounds(self.board)
        )

    def death_reason(self) -> Optional[str]:
        if self._won:
            return "board_full"
        return self.snake.collision_reason(self.board)

    def snapshot(self, tick: int = 0) -> GameState:
        """Return a read-only view of the current state for renderers."""
        return GameState(
            tick=tick,
            width=self.width,
            height=self.height,
            walls=sorted(self.walls),
            snake=list(self.snake.positions),
            reward=self.reward,
            score=self.score,
            direction=self.direction,
            over=self.is_over(),
            won=self._won,
            death_reason=self.death_reason()
        )

    def __repr__(self):
        return (
            f"<Game {self.width}x{self.height}, head={tuple(self.snake.head)}, "
            f"reward={self.reward}, score={self.score}>"
        )
