"""
Maps raw input (key names, on-screen buttons, swipe gestures) onto the
game's direction gate and pause toggle.
"""

from typing import Optional

from domain.constants import UP, DOWN, LEFT, RIGHT

# Minimum swipe length in pixels along the dominant axis
SWIPE_MIN_DISTANCE = 20

PAUSE_KEY = " "

KEY_MAP = {
    "ArrowUp": UP,
    "ArrowDown": DOWN,
    "ArrowLeft": LEFT,
    "ArrowRight": RIGHT,
    "w": UP,
    "W": UP,
    "s": DOWN,
    "S": DOWN,
    "a": LEFT,
    "A": LEFT,
    "d": RIGHT,
    "D": RIGHT,
}

BUTTON_MAP = {
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
}


def direction_for_key(key: str) -> Optional[str]:
    return KEY_MAP.get(key)


def direction_for_button(button: str) -> Optional[str]:
    return BUTTON_MAP.get(button)


def direction_for_swipe(dx: float, dy: float, min_distance: float = SWIPE_MIN_DISTANCE) -> Optional[str]:
    """
    Turn a swipe vector into a direction.

    The dominant axis and its sign pick the direction; ties go to the
    vertical axis. Gestures shorter than min_distance are ignored.
    Screen coordinates: positive dy is a swipe downward.
    """
    abs_x, abs_y = abs(dx), abs(dy)

    if max(abs_x, abs_y) < min_distance:
        return None

    if abs_x > abs_y:
        return RIGHT if dx > 0 else LEFT
    return DOWN if dy > 0 else UP


def handle_key(game, key: str) -> bool:
    """
    Dispatch a key press to the game.

    Returns True if the key was recognised (whether or not the game
    accepted the resulting intent).
    """
    if key == PAUSE_KEY:
        game.toggle_pause()
        return True

    direction = direction_for_key(key)
    if direction is None:
        return False

    game.update_direction(direction)
    return True


def handle_button(game, button: str) -> bool:
    """Dispatch an on-screen direction button press; unknown buttons are ignored."""
    direction = direction_for_button(button)
    if direction is None:
        return False
    return game.update_direction(direction)


def handle_swipe(game, dx: float, dy: float) -> bool:
    """Dispatch a completed swipe gesture; returns whether the intent was accepted."""
    direction = direction_for_swipe(dx, dy)
    if direction is None:
        return False
    return game.update_direction(direction)
