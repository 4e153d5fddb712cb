"""
Random player implementation - picks random safe moves.
"""

from typing import Dict, List, Optional

from domain.constants import Direction, VALID_MOVES
from domain.game_state import GameState
from domain.position import Position
from .base import Player


def safe_moves(game_state: GameState) -> Dict[Direction, Position]:
    """
    Map every direction that does not immediately hit the bounds, a wall or
    the body to the cell it leads to. The tail is not counted as body since
    it moves away this tick.
    """
    head = Position(*game_state.head)
    walls = set(game_state.walls)
    body = set(game_state.snake[:-1])

    moves: Dict[Direction, Position] = {}
    for move in Direction:
        new_x, new_y = head.moved(move)

        # Check bounds
        if (new_x < 0 or new_x >= game_state.width or
                new_y < 0 or new_y >= game_state.height):
            continue

        if (new_x, new_y) in walls or (new_x, new_y) in body:
            continue

        moves[move] = Position(new_x, new_y)
    return moves


class RandomPlayer(Player):
    """
    A random AI that picks a valid direction that avoids walls and self-collisions.
    """

    name = "random"

    def get_direction(self, game_state: GameState) -> Optional[Direction]:
        valid_moves: List[Direction] = list(safe_moves(game_state))

        # If no valid moves, just return a random move (we'll die anyway)
        if not valid_moves:
            return self.rng.choice(sorted(VALID_MOVES, key=lambda d: d.value))

        return self.rng.choice(valid_moves)
