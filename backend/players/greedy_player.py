"""
Greedy player implementation - heads straight for the reward.
"""

from typing import Optional, Tuple

from domain.constants import Direction
from domain.game_state import GameState
from .random_player import RandomPlayer, safe_moves


def manhattan(a: Tuple[int, int], b: Tuple[int, int]) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


class GreedyPlayer(RandomPlayer):
    """
    Picks the safe move that brings the head closest to the reward
    (Manhattan distance). Ties keep the current heading when possible.
    Falls back to the random strategy when there is no reward or no safe move.
    """

    name = "greedy"

    def get_direction(self, game_state: GameState) -> Optional[Direction]:
        moves = safe_moves(game_state)
        if game_state.reward is None or not moves:
            return super().get_direction(game_state)

        def score(item):
            move, cell = item
            return (manhattan(cell, game_state.reward), move != game_state.direction)

        best_move, _ = min(moves.items(), key=score)
        return best_move
