"""
Registry of player implementations.

Maps player keys (e.g., 'random', 'greedy') to player classes so the CLI
can pick an input source by name.
"""

from typing import Dict, List, Optional, Type

from .base import Player, IdlePlayer
from .greedy_player import GreedyPlayer
from .random_player import RandomPlayer


PLAYER_CLASSES: Dict[str, Type[Player]] = {
    "idle": IdlePlayer,
    "random": RandomPlayer,
    "greedy": GreedyPlayer,
}

AVAILABLE_PLAYERS = list(PLAYER_CLASSES.keys())


def get_player_class(player_key: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given key.

    Args:
        player_key: One of 'idle', 'random', 'greedy'. If None or empty, returns 'greedy'.

    Raises:
        ValueError: If player_key is not recognized.
    """
    if not player_key or player_key.strip() == "":
        player_key = "greedy"

    player_key = player_key.strip().lower()

    if player_key not in PLAYER_CLASSES:
        available = ", ".join(AVAILABLE_PLAYERS)
        raise ValueError(
            f"Unknown player '{player_key}'. Available players: {available}"
        )

    return PLAYER_CLASSES[player_key]


def list_players() -> List[dict]:
    return [
        {"key": "idle", "description": "Never steers; the snake runs straight ahead"},
        {"key": "random", "description": "Random move that avoids immediate collisions"},
        {"key": "greedy", "description": "Shortest Manhattan step toward the reward"},
    ]
