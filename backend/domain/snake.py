"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, Tuple


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
    """

    def __init__(self, positions: Iterable[Tuple[int, int]]):
        self.positions = deque(positions)

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Tuple[int, int]:
        """Return the tail position (last element)."""
        return self.positions[-1]

    def __len__(self) -> int:
        return len(self.positions)

    def __contains__(self, cell) -> bool:
        return cell in self.positions

    def occupies(self, cell: Tuple[int, int], include_tail: bool = True) -> bool:
        """
        Whether the snake covers the given cell.

        With include_tail=False the last segment is ignored, since it
        vacates its cell on a move without growth.
        """
        if include_tail:
            return cell in self.positions
        return cell in list(self.positions)[:-1]

    def advance(self, new_head: Tuple[int, int], grow: bool) -> None:
        """Prepend a new head and drop the tail unless growing."""
        self.positions.appendleft(new_head)
        if not grow:
            self.positions.pop()
