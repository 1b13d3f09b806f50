"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import List, Tuple, Optional, Dict, Any


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        tick_number: how many successful ticks have run since the last reset
        snake_positions: list of (x, y), head first
        direction: the active direction
        pending_direction: the direction the next tick will adopt
        food: (x, y) of the food cell, or None once the board is full
        score: food eaten this game
        high_score: best score known to the controller
        tile_count: board width and height in cells
        game_over: whether the game has ended
        paused: whether ticks are currently ignored
        end_reason: 'wall', 'self', 'board_full' or None while running
        message: user-visible status line
        step_speed_ms: current tick period
    """

    def __init__(
        self,
        tick_number: int,
        snake_positions: List[Tuple[int, int]],
        direction: str,
        pending_direction: str,
        food: Optional[Tuple[int, int]],
        score: int,
        high_score: int,
        tile_count: int,
        game_over: bool = False,
        paused: bool = False,
        end_reason: Optional[str] = None,
        message: str = "",
        step_speed_ms: Optional[int] = None
    ):
        self.tick_number = tick_number
        self.snake_positions = snake_positions
        self.direction = direction
        self.pending_direction = pending_direction
        self.food = food
        self.score = score
        self.high_score = high_score
        self.tile_count = tile_count
        self.game_over = game_over
        self.paused = paused
        self.end_reason = end_reason
        self.message = message
        self.step_speed_ms = step_speed_ms

    @property
    def length(self) -> int:
        return len(self.snake_positions)

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = snake head
        o = snake body
        Rows run top to bottom (y = 0 first), x-axis labels at the bottom.
        """
        board = [['.' for _ in range(self.tile_count)] for _ in range(self.tile_count)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'F'

        for pos_idx, (x, y) in enumerate(self.snake_positions):
            if not (0 <= x < self.tile_count and 0 <= y < self.tile_count):
                continue
            board[y][x] = 'H' if pos_idx == 0 else 'o'

        result = []
        for y in range(self.tile_count):
            result.append(f"{y:2d} {' '.join(board[y])}")

        # Single-digit labels keep the columns aligned
        result.append("   " + " ".join(str(i % 10) for i in range(self.tile_count)))

        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly view printed by the command line runner's --json option."""
        return {
            "tick_number": self.tick_number,
            "snake_positions": [list(p) for p in self.snake_positions],
            "direction": self.direction,
            "pending_direction": self.pending_direction,
            "food": list(self.food) if self.food is not None else None,
            "score": self.score,
            "high_score": self.high_score,
            "length": self.length,
            "tile_count": self.tile_count,
            "game_over": self.game_over,
            "paused": self.paused,
            "end_reason": self.end_reason,
            "message": self.message,
            "step_speed_ms": self.step_speed_ms,
        }

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_number}, food={self.food}, "
            f"length={self.length}, score={self.score}, game_over={self.game_over}>"
        )
