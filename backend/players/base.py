"""
Base player interface for the game driver.
"""

import random
from typing import Optional

from domain.constants import Direction
from domain.game_state import GameState


class Player:
    """
    Base class/interface for input sources.

    The driver samples each player once per iteration, the same way a
    keyboard is polled once per frame.
    """

    name = "player"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def get_direction(self, game_state: GameState) -> Optional[Direction]:
        """
        Return a direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            A Direction, or None to keep the current heading
        """
        raise NotImplementedError


class IdlePlayer(Player):
    """A player that never presses anything; the snake keeps its heading."""

    name = "idle"

    def get_direction(self, game_state: GameState) -> Optional[Direction]:
        return None
