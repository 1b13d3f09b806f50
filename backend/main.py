import os
import json
import logging
import argparse
import random
import threading
from typing import Callable, Iterable, List, Optional, Tuple

from dotenv import load_dotenv

from domain.constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, DIRECTION_VECTORS, OPPOSITE_MOVES,
    TILE_COUNT, INITIAL_SNAKE, INITIAL_DIRECTION,
    BASE_SPEED_MS, MIN_SPEED_MS, SPEED_STEP_MS,
    END_WALL, END_SELF, END_BOARD_FULL, END_MESSAGES,
    MSG_NEW_HIGH_SCORE, MSG_PAUSED,
)
from domain.snake import Snake
from domain.game_state import GameState
from domain.food import place_food
from data_access import HighScoreStore
from services.ticker import Ticker

load_dotenv()

logger = logging.getLogger(__name__)

Listener = Callable[[GameState], None]


class SnakeGame:
    """
    Manages:
      - Board (tile_count x tile_count)
      - Snake, active and pending direction
      - Food
      - Score and high score
      - Pause and game-over flags
      - The ticker driving tick()
      - Listeners (renderers, stat displays) fed a snapshot after each change
      - History of snapshots for replay

    tick(), update_direction(), toggle_pause() and reset() share one lock,
    so input may arrive on a different thread than the ticker.
    """

    def __init__(
        self,
        tile_count: int = TILE_COUNT,
        initial_snake: Optional[Iterable[Tuple[int, int]]] = None,
        initial_direction: str = INITIAL_DIRECTION,
        speed_up: bool = True,
        high_score_store: Optional[HighScoreStore] = None,
        rng: Optional[random.Random] = None,
        ticker_factory: Callable[[Callable[[], None]], Ticker] = Ticker,
        record_history: bool = True,
        start: bool = True
    ):
        if tile_count < 1:
            raise ValueError(f"tile_count must be at least 1, got {tile_count}")
        if initial_direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction {initial_direction!r}")

        self.tile_count = tile_count
        self.initial_snake: List[Tuple[int, int]] = list(initial_snake or INITIAL_SNAKE)
        self.initial_direction = initial_direction
        self._validate_snake(self.initial_snake)

        self.speed_up = speed_up
        self.high_score_store = high_score_store
        self.rng = rng or random.Random()
        self.record_history = record_history

        self._lock = threading.RLock()
        self._listeners: List[Listener] = []
        self.ticker = ticker_factory(self.tick)

        # Read once; written back only when beaten
        self.high_score = high_score_store.load() if high_score_store else 0

        self.snake = Snake(self.initial_snake)
        self.direction = initial_direction
        self.pending_direction = initial_direction
        self.food: Optional[Tuple[int, int]] = None
        self.score = 0
        self.tick_number = 0
        self.step_speed_ms = BASE_SPEED_MS
        self.game_over = False
        self.paused = False
        self.end_reason: Optional[str] = None
        self.message = ""
        self.history: List[GameState] = []

        if start:
            self.reset()

    def _validate_snake(self, positions: List[Tuple[int, int]]):
        if not positions:
            raise ValueError("Initial snake needs at least one cell.")
        for cell in positions:
            if not self._in_bounds(cell):
                raise ValueError(f"Initial snake cell out of bounds at {cell}.")
        if len(set(positions)) != len(positions):
            raise ValueError("Initial snake overlaps itself.")

    def _in_bounds(self, cell: Tuple[int, int]) -> bool:
        x, y = cell
        return 0 <= x < self.tile_count and 0 <= y < self.tile_count

    def add_listener(self, listener: Listener) -> None:
        """Register a render / stat-display collaborator."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def reset(self) -> None:
        """
        Start a fresh game: the fixed initial snake moving in the initial
        direction, score 0, new food, base speed, and a restarted ticker.
        """
        # Stop outside the lock so a tick waiting on it can finish
        self.ticker.stop()

        with self._lock:
            self.snake = Snake(self.initial_snake)
            self.direction = self.initial_direction
            self.pending_direction = self.initial_direction
            self.score = 0
            self.tick_number = 0
            self.step_speed_ms = BASE_SPEED_MS
            self.game_over = False
            self.paused = False
            self.end_reason = None
            self.message = ""
            self.history = []

            self.food = place_food(self.snake.positions, self.tile_count, self.rng)
            if self.food is None:
                self.end_game(END_BOARD_FULL)
                return

            self.ticker.start(self.step_speed_ms)
            logger.info("New game on a %sx%s board, high score %s", self.tile_count, self.tile_count, self.high_score)
            self._publish()

    def stop(self) -> None:
        """Stop ticking without ending the game (shutdown)."""
        self.ticker.stop()

    def update_direction(self, direction: Optional[str]) -> bool:
        """
        Direction-intent gate.

        Rejects missing or unknown directions, any intent while the game is
        over or paused, and the exact reverse of the active direction.
        Accepted intents overwrite the pending direction.

        Returns:
            True if the intent was accepted.
        """
        if not isinstance(direction, str):
            return False
        direction = direction.upper()
        if direction not in VALID_MOVES:
            return False

        with self._lock:
            if self.game_over or self.paused:
                return False
            if direction == OPPOSITE_MOVES[self.direction]:
                return False
            self.pending_direction = direction
            return True

    def toggle_pause(self) -> bool:
        """
        Pause or resume. Ignored once the game is over.

        Returns:
            The paused flag after the call.
        """
        with self._lock:
            if self.game_over:
                return self.paused

            self.paused = not self.paused
            self.message = MSG_PAUSED if self.paused else ""
            logger.debug("Game %s", "paused" if self.paused else "resumed")
            self._publish()
            return self.paused

    def tick(self) -> None:
        """
        Execute one step:
          1) If the game is over or paused, do nothing
          2) Adopt the pending direction
          3) Wall collision ends the game
          4) Self collision ends the game (tail excluded unless eating)
          5) Move: grow on food, otherwise drop the tail
          6) On food: score, speed up, place new food (none left = board full)
        """
        with self._lock:
            if self.game_over or self.paused:
                return

            self.direction = self.pending_direction
            dx, dy = DIRECTION_VECTORS[self.direction]
            hx, hy = self.snake.head
            new_head = (hx + dx, hy + dy)

            if not self._in_bounds(new_head):
                self.end_game(END_WALL)
                return

            will_eat = new_head == self.food
            if self.snake.occupies(new_head, include_tail=will_eat):
                self.end_game(END_SELF)
                return

            self.snake.advance(new_head, grow=will_eat)
            self.tick_number += 1

            if will_eat:
                self.score += 1
                self._increase_difficulty()
                self.food = place_food(self.snake.positions, self.tile_count, self.rng)
                if self.food is None:
                    self.end_game(END_BOARD_FULL)
                    return

            self._publish()

    def _increase_difficulty(self) -> None:
        if not self.speed_up:
            return

        next_speed = max(MIN_SPEED_MS, BASE_SPEED_MS - self.score * SPEED_STEP_MS)
        if next_speed != self.step_speed_ms:
            self.step_speed_ms = next_speed
            self.ticker.start(self.step_speed_ms)

    def end_game(self, reason: str) -> None:
        """
        Finalize a game exactly once: stop ticking, pick the end message and
        persist the high score if it was beaten.
        """
        if reason not in END_MESSAGES:
            raise ValueError(f"Unknown end reason {reason!r}")

        with self._lock:
            if self.game_over:
                return

            self.game_over = True
            self.end_reason = reason
            self.ticker.stop(wait=False)
            self.message = END_MESSAGES[reason]

            if self.score > self.high_score:
                self.high_score = self.score
                self._persist_high_score()
                self.message = MSG_NEW_HIGH_SCORE.format(score=self.high_score)

            logger.info(f"Game Over ({reason}): score {self.score}, high score {self.high_score}")
            self._publish()

    def _persist_high_score(self) -> None:
        if self.high_score_store is None:
            return
        try:
            self.high_score_store.save(self.high_score)
        except Exception:
            # Don't raise - the game still has to finish
            logger.exception("Could not persist high score %s", self.high_score)

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        with self._lock:
            return GameState(
                tick_number=self.tick_number,
                snake_positions=list(self.snake.positions),
                direction=self.direction,
                pending_direction=self.pending_direction,
                food=self.food,
                score=self.score,
                high_score=self.high_score,
                tile_count=self.tile_count,
                game_over=self.game_over,
                paused=self.paused,
                end_reason=self.end_reason,
                message=self.message,
                step_speed_ms=self.step_speed_ms
            )

    def _publish(self) -> None:
        state = self.get_current_state()
        if self.record_history:
            self.history.append(state)
        for listener in list(self._listeners):
            listener(state)

    def print_board(self):
        """
        Prints a visual representation of the current board state.
        """
        print("\n" + self.get_current_state().print_board() + "\n")


# -------------------------------
# Autopilot run
# -------------------------------

def run_autopilot(game: SnakeGame, player, max_ticks: Optional[int] = None, timeout: Optional[float] = None) -> GameState:
    """
    Let a player drive the game through the real ticker until it ends.

    Args:
        game: A started SnakeGame
        player: Anything with get_move(GameState) -> direction
        max_ticks: Stop (without ending the game) after this many ticks
        timeout: Give up waiting after this many seconds

    Returns:
        The final snapshot.
    """
    done = threading.Event()

    def steer(state: GameState):
        if state.game_over:
            done.set()
            return
        if max_ticks is not None and state.tick_number >= max_ticks:
            done.set()
            return
        if not state.paused:
            game.update_direction(player.get_move(state))

    game.add_listener(steer)
    try:
        # The opening snapshot was published before the listener existed
        steer(game.get_current_state())
        if not done.wait(timeout):
            logger.warning("Autopilot timed out after %ss", timeout)
    finally:
        game.stop()
        game.remove_listener(steer)

    return game.get_current_state()


def main():
    parser = argparse.ArgumentParser(
        description="Run a Snake game driven by the random autopilot."
    )
    parser.add_argument("--tile-count", type=int, default=TILE_COUNT,
                        help="Board width and height in cells")
    parser.add_argument("--fixed-speed", action="store_true",
                        help="Keep the base tick period instead of speeding up with score")
    parser.add_argument("--max-ticks", type=int, default=None,
                        help="Stop after this many ticks")
    parser.add_argument("--timeout", type=float, default=None,
                        help="Stop after this many seconds")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement and the autopilot")
    parser.add_argument("--db-path", type=str, default=None,
                        help="SQLite file for the high score (default: SNAKE_DB_PATH or backend/snake.db)")
    parser.add_argument("--frame", type=str, default=None,
                        help="Save a PNG of the final board here")
    parser.add_argument("--video", type=str, default=None,
                        help="Save an MP4 replay here")
    parser.add_argument("--show-board", action="store_true",
                        help="Print the final board as text")
    parser.add_argument("--json", action="store_true",
                        help="Print the final game state as JSON")

    args = parser.parse_args()

    logging.basicConfig(
        level=os.getenv("SNAKE_LOG_LEVEL", "INFO"),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    # Imported here so the engine itself doesn't need Pillow or moviepy
    from players import RandomPlayer

    rng = random.Random(args.seed)
    game = SnakeGame(
        tile_count=args.tile_count,
        speed_up=not args.fixed_speed,
        high_score_store=HighScoreStore(args.db_path),
        rng=rng,
        record_history=args.video is not None
    )

    final = run_autopilot(game, RandomPlayer(rng), max_ticks=args.max_ticks, timeout=args.timeout)

    if args.show_board:
        game.print_board()

    logger.info("%s", final.message or "Stopped.")
    logger.info("Score %s, length %s, high score %s", final.score, final.length, final.high_score)

    if args.json:
        print(json.dumps(final.to_dict(), indent=2))

    if args.frame:
        from services.board_renderer import BoardRenderer
        BoardRenderer().render(final).save(args.frame)
        logger.info("Saved final board to %s", args.frame)

    if args.video:
        from services.video_generator import ReplayVideoGenerator
        ReplayVideoGenerator().generate_video(game.history, args.video)


if __name__ == "__main__":
    main()
