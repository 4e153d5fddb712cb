"""
Tests for player implementations and the player registry.
"""

import random
import pytest
import sys
import os

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import GameState, VALID_MOVES, UP, DOWN, LEFT, RIGHT
from players import (
    AVAILABLE_PLAYERS,
    GreedyPlayer,
    IdlePlayer,
    Player,
    RandomPlayer,
    get_player_class,
    list_players,
)
from players.random_player import safe_moves


def make_state(snake, reward=(3, 3), walls=(), width=4, height=4, direction=RIGHT):
    return GameState(
        tick=0,
        width=width,
        height=height,
        walls=list(walls),
        snake=list(snake),
        reward=reward,
        score=0,
        direction=direction,
    )


class TestSafeMoves:
    """Tests for the safe_moves() helper."""

    def test_corner_has_two_safe_moves(self):
        """From the top-left corner only RIGHT and DOWN stay on the board."""
        assert set(safe_moves(make_state([(0, 0)]))) == {RIGHT, DOWN}

    def test_walls_and_body_are_unsafe(self):
        """Walls and body cells are excluded."""
        state = make_state([(1, 1), (1, 2), (2, 2)], walls=[(2, 1)])
        assert set(safe_moves(state)) == {UP, LEFT}

    def test_tail_is_safe(self):
        """The tail moves away this tick, so it is a safe target."""
        state = make_state([(1, 1), (2, 1), (2, 2), (1, 2)])
        assert DOWN in safe_moves(state)


class TestBasePlayer:
    """Tests for the Player interface."""

    def test_get_direction_not_implemented(self):
        """The base class must be subclassed."""
        with pytest.raises(NotImplementedError):
            Player().get_direction(make_state([(0, 0)]))

    def test_idle_player_never_steers(self):
        """IdlePlayer always returns None."""
        assert IdlePlayer().get_direction(make_state([(0, 0)])) is None


class TestRandomPlayer:
    """Tests for the RandomPlayer class."""

    def test_random_player_returns_valid_move(self):
        """RandomPlayer.get_direction() returns a valid direction."""
        player = RandomPlayer(rng=random.Random(0))
        assert player.get_direction(make_state([(2, 2)])) in VALID_MOVES

    def test_random_player_avoids_walls_when_possible(self):
        """RandomPlayer avoids board edges when there are safe moves available."""
        for seed in range(50):
            player = RandomPlayer(rng=random.Random(seed))
            assert player.get_direction(make_state([(0, 0)])) in {RIGHT, DOWN}

    def test_random_player_trapped_still_moves(self):
        """With no safe move a direction is still returned."""
        state = make_state([(0, 0)], walls=[(1, 0), (0, 1)])
        player = RandomPlayer(rng=random.Random(1))
        assert player.get_direction(state) in VALID_MOVES


class TestGreedyPlayer:
    """Tests for the GreedyPlayer class."""

    def test_moves_toward_reward(self):
        """The step that shortens the distance is chosen."""
        player = GreedyPlayer(rng=random.Random(0))
        assert player.get_direction(make_state([(0, 0)], reward=(3, 0))) is RIGHT
        assert player.get_direction(make_state([(0, 0)], reward=(0, 3))) is DOWN
        assert player.get_direction(make_state([(3, 3)], reward=(0, 3))) is LEFT
        assert player.get_direction(make_state([(3, 3)], reward=(3, 0))) is UP

    def test_tie_keeps_heading(self):
        """Equal distances prefer the current direction."""
        player = GreedyPlayer(rng=random.Random(0))
        state = make_state([(0, 0)], reward=(3, 3), direction=RIGHT)
        assert player.get_direction(state) is RIGHT

        state = make_state([(0, 0)], reward=(3, 3), direction=DOWN)
        assert player.get_direction(state) is DOWN

    def test_routes_around_wall(self):
        """A wall in the way forces the other safe move."""
        player = GreedyPlayer(rng=random.Random(0))
        state = make_state([(0, 0)], reward=(3, 0), walls=[(1, 0)])
        assert player.get_direction(state) is DOWN

    def test_no_reward_falls_back_to_random(self):
        """Without a reward the greedy player still picks a safe move."""
        player = GreedyPlayer(rng=random.Random(0))
        assert player.get_direction(make_state([(0, 0)], reward=None)) in {RIGHT, DOWN}


class TestRegistry:
    """Tests for the player registry."""

    def test_get_player_class(self):
        """Known keys map to their classes."""
        assert get_player_class("idle") is IdlePlayer
        assert get_player_class("random") is RandomPlayer
        assert get_player_class(" Greedy ") is GreedyPlayer

    def test_default_player(self):
        """An empty key gives the greedy player."""
        assert get_player_class(None) is GreedyPlayer
        assert get_player_class("") is GreedyPlayer

    def test_unknown_player_raises(self):
        """Unknown keys raise ValueError."""
        with pytest.raises(ValueError):
            get_player_class("keyboard")

    def test_list_players_matches_registry(self):
        """Every registered key is described."""
        assert [p["key"] for p in list_players()] == AVAILABLE_PLAYERS
