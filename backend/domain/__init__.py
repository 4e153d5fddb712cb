"""
Domain entities for the GridSnake game engine.

This module contains the core game entities. They are independent of
rendering, input and timing, which live in the driver and services.
"""

from .constants import (
    Direction, UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    DEFAULT_WIDTH, DEFAULT_HEIGHT, DEFAULT_TICK_MS,
)
from .position import Position
from .board import Board
from .snake import Snake
from .rewards import BoardFullError, free_cells, random_free_cell
from .game_state import GameState
from .game import Game

__all__ = [
    'Direction', 'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'DEFAULT_WIDTH', 'DEFAULT_HEIGHT', 'DEFAULT_TICK_MS',
    'Position',
    'Board',
    'Snake',
    'BoardFullError', 'free_cells', 'random_free_cell',
    'GameState',
    'Game',
]
