"""
Reward placement.

Every placement enumerates the whole board (O(width * height)). Boards are a
few dozen cells wide, so no free-cell index is maintained between calls.
"""

import logging
import random
from typing import Collection, List

from .board import Board
from .position import Position

logger = logging.getLogger(__name__)


class BoardFullError(Exception):
    """Raised when there is no free cell left to place a reward on."""


def free_cells(board: Board, occupied: Collection[Position]) -> List[Position]:
    """Return every board cell that is neither a wall nor occupied."""
    return [
        cell for cell in board.cells()
        if not board.contains(cell) and cell not in occupied
    ]


def random_free_cell(board: Board, occupied: Collection[Position], rng: random.Random) -> Position:
    """
    Pick a free cell uniformly at random.

    Args:
        board: the board to place on
        occupied: cells taken by the snake
        rng: random source, injected so games can be seeded

    Raises:
        BoardFullError: if walls and snake cover the whole board
    """
    candidates = free_cells(board, occupied)
    if not candidates:
        logger.debug("No free cell left on %r", board)
        raise BoardFullError(f"No free cell left on a {board.width}x{board.height} board.")
    return rng.choice(candidates)
