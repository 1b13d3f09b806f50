"""
Game constants for Snake.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Unit vectors in screen coordinates (y grows downward)
DIRECTION_VECTORS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITE_MOVES = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Board settings
GRID_SIZE = 18  # pixels per cell
TILE_COUNT = 20
INITIAL_SNAKE = [(5, 9), (4, 9), (3, 9)]
INITIAL_DIRECTION = RIGHT

# Tick period in milliseconds
BASE_SPEED_MS = 150
MIN_SPEED_MS = 75
SPEED_STEP_MS = 4

# Persisted high score
STORAGE_KEY = "snake-high-score"

# End reasons
END_WALL = "wall"
END_SELF = "self"
END_BOARD_FULL = "board_full"

# User-visible messages
MSG_WALL = "Game over! You hit the wall. Tap restart."
MSG_SELF = "Game over! You ran into yourself. Tap restart."
MSG_BOARD_FULL = "Perfect run! You filled the board. Restart to play again."
MSG_NEW_HIGH_SCORE = "New high score: {score}! Tap restart."
MSG_PAUSED = "Game paused."

END_MESSAGES = {
    END_WALL: MSG_WALL,
    END_SELF: MSG_SELF,
    END_BOARD_FULL: MSG_BOARD_FULL,
}
