import argparse
import json
import logging
import os
import random
import threading
import time
from typing import Iterable, List, Optional, Tuple

from dotenv import load_dotenv

from domain import DEFAULT_HEIGHT, DEFAULT_TICK_MS, DEFAULT_WIDTH, RIGHT, Direction, Game, GameState
from players import AVAILABLE_PLAYERS, Player, get_player_class, list_players

logger = logging.getLogger(__name__)


def parse_walls(layout: Optional[str]) -> List[Tuple[int, int]]:
    """
    Parse a wall layout like "3,4;5,6" into [(3, 4), (5, 6)].
    Empty or None gives no walls.
    """
    if not layout or not layout.strip():
        return []

    walls = []
    for chunk in layout.split(";"):
        chunk = chunk.strip()
        if not chunk:
            continue
        try:
            x, y = (int(part) for part in chunk.split(","))
        except ValueError:
            raise ValueError(f"Invalid wall '{chunk}', expected 'x,y'.") from None
        walls.append((x, y))
    return walls


class GameDriver:
    """
    Runs games back to back:
      - Polls the player for at most one direction per iteration
      - Steps the game once per tick
      - Checks is_over() after the step and restarts with a fresh Game
      - Keeps the snapshot history for rendering

    All Game calls go through one lock so directions may be submitted from
    another thread (e.g. a keyboard listener) while run() is ticking.
    """

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        walls: Iterable[Tuple[int, int]] = (),
        player: Optional[Player] = None,
        tick_interval: float = DEFAULT_TICK_MS / 1000,
        seed: Optional[int] = None,
        max_restarts: Optional[int] = None,
        direction: Direction = RIGHT
    ):
        if tick_interval < 0:
            raise ValueError("tick_interval must be >= 0")

        self.width = width
        self.height = height
        self.walls = list(walls)
        self.player = player
        self.tick_interval = tick_interval
        self.max_restarts = max_restarts
        self.direction = direction
        self.rng = random.Random(seed)

        self.games_played = 0
        self.best_score = 0
        self.finished = False
        self.tick_number = 0
        self.history: List[GameState] = []
        self.results: List[dict] = []

        self._lock = threading.Lock()
        self.game = self.new_game()

    def new_game(self) -> Game:
        """Build a fresh Game sharing the driver's random source."""
        return Game(self.width, self.height, walls=self.walls, rng=self.rng, direction=self.direction)

    def submit_direction(self, direction: Direction) -> None:
        """Forward one input sample to the current game (last call wins)."""
        with self._lock:
            self.game.update_direction(direction)

    def current_state(self) -> GameState:
        with self._lock:
            return self.game.snapshot(self.tick_number)

    def poll_player(self) -> Optional[Direction]:
        if self.player is None:
            return None
        direction = self.player.get_direction(self.current_state())
        if direction is not None:
            self.submit_direction(direction)
        return direction

    def tick(self) -> GameState:
        """
        Execute one tick:
          1) Step the game
          2) Check for game over
          3) On game over, record the result and start a fresh game

        Returns the snapshot taken right after the step. Once the session is
        finished the last game is left alone and its current state returned.
        """
        with self._lock:
            if self.finished:
                return self.game.snapshot(self.tick_number)

            self.game.step()
            self.tick_number += 1
            state = self.game.snapshot(self.tick_number)

            if state.over:
                self._finish_game(state)

        self.history.append(state)
        return state

    def _finish_game(self, state: GameState) -> None:
        self.games_played += 1
        self.best_score = max(self.best_score, state.score)
        self.results.append({
            "game": self.games_played,
            "score": state.score,
            "ticks": state.tick,
            "reason": state.death_reason,
        })

        if state.won:
            logger.info(f"Game {self.games_played}: board cleared with score {state.score}")
        else:
            logger.info(
                f"Game {self.games_played} over after {state.tick} ticks "
                f"({state.death_reason}), score {state.score}"
            )

        if self.max_restarts is not None and self.games_played > self.max_restarts:
            self.finished = True
            return

        self.game = self.new_game()
        self.tick_number = 0
        logger.debug("Started a new game")

    def run(self, max_ticks: int, realtime: bool = True) -> List[GameState]:
        """
        Fixed-rate loop: poll input, tick, optionally sleep.

        Args:
            max_ticks: number of ticks to run
            realtime: sleep tick_interval between ticks

        Returns:
            Snapshots recorded during this run
        """
        start = len(self.history)
        for _ in range(max_ticks):
            if self.finished:
                break
            self.poll_player()
            self.tick()
            if realtime and self.tick_interval > 0:
                time.sleep(self.tick_interval)

        return self.history[start:]

    def summary(self) -> dict:
        with self._lock:
            return {
                "games_played": self.games_played,
                "best_score": self.best_score,
                "current_score": self.game.score,
                "results": list(self.results),
            }


# -------------------------------
# Main Entry Point
# -------------------------------
def main(argv: Optional[List[str]] = None):
    load_dotenv()

    players_help = "\n".join(f"  {p['key']:<8} {p['description']}" for p in list_players())
    parser = argparse.ArgumentParser(
        description="Run Snake games on a grid with an automated player.",
        epilog=f"players:\n{players_help}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--width", type=int, default=int(os.getenv("SNAKE_WIDTH", DEFAULT_WIDTH)),
                        help="Board width in cells")
    parser.add_argument("--height", type=int, default=int(os.getenv("SNAKE_HEIGHT", DEFAULT_HEIGHT)),
                        help="Board height in cells")
    parser.add_argument("--walls", type=str, default=os.getenv("SNAKE_WALLS", ""),
                        help="Wall cells as 'x,y;x,y'")
    parser.add_argument("--player", type=str, choices=AVAILABLE_PLAYERS,
                        default=os.getenv("SNAKE_PLAYER", "greedy"),
                        help="Input source that steers the snake")
    parser.add_argument("--heading", type=Direction.parse, default=os.getenv("SNAKE_HEADING", "RIGHT"),
                        help="Initial direction of every game (up, down, left, right)")
    parser.add_argument("--ticks", type=int, default=200,
                        help="Number of ticks to run")
    parser.add_argument("--tick-ms", type=int, default=int(os.getenv("SNAKE_TICK_MS", DEFAULT_TICK_MS)),
                        help="Milliseconds between ticks")
    parser.add_argument("--seed", type=int,
                        default=int(os.environ["SNAKE_SEED"]) if os.getenv("SNAKE_SEED") else None,
                        help="Random seed for reward placement and the player")
    parser.add_argument("--games", type=int, default=None,
                        help="Stop after this many games")
    parser.add_argument("--no-realtime", action="store_true",
                        help="Do not sleep between ticks")
    parser.add_argument("--show-board", action="store_true",
                        help="Log the ASCII board after every tick")
    parser.add_argument("--frames-dir", type=str, default=None,
                        help="Write a PNG per tick into this directory")
    parser.add_argument("--video", type=str, default=None,
                        help="Write an MP4 replay of the first game to this path")
    parser.add_argument("--log-level", type=str, default=os.getenv("LOG_LEVEL", "INFO"),
                        help="Logging level")

    args = parser.parse_args(argv)

    if args.games is not None and args.games < 1:
        parser.error("--games must be at least 1")

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    player = get_player_class(args.player)(rng=random.Random(args.seed))

    driver = GameDriver(
        width=args.width,
        height=args.height,
        walls=parse_walls(args.walls),
        player=player,
        tick_interval=args.tick_ms / 1000,
        seed=args.seed,
        max_restarts=args.games - 1 if args.games is not None else None,
        direction=args.heading,
    )

    logger.info(
        f"Starting {args.width}x{args.height} board with {len(driver.walls)} walls, "
        f"player={args.player}, heading={args.heading.value}, tick={args.tick_ms}ms"
    )

    for _ in range(args.ticks):
        if driver.finished:
            break
        states = driver.run(1, realtime=not args.no_realtime)
        if args.show_board and states:
            logger.info("\n" + states[-1].print_board())

    if args.frames_dir or args.video:
        from services.renderer import BoardRenderer

        renderer = BoardRenderer()
        if args.frames_dir:
            renderer.save_frames(driver.history, args.frames_dir)
        if args.video:
            first_game = []
            for state in driver.history:
                first_game.append(state)
                if state.over:
                    break
            renderer.generate_video(first_game, args.video, fps=max(1, round(1000 / max(args.tick_ms, 1))))

    print("\nSummary:")
    print(json.dumps(driver.summary(), indent=2))


if __name__ == "__main__":
    main()
