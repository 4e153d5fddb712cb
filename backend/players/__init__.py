"""
Player implementations for GridSnake.

Players are the input sources the driver polls for a direction every
iteration, standing in for keyboard polling.
"""

from .base import Player, IdlePlayer
from .random_player import RandomPlayer
from .greedy_player import GreedyPlayer
from .registry import get_player_class, list_players, AVAILABLE_PLAYERS

__all__ = [
    'Player',
    'IdlePlayer',
    'RandomPlayer',
    'GreedyPlayer',
    'get_player_class',
    'list_players',
    'AVAILABLE_PLAYERS',
]
