"""Errors raised by the checkerboard model."""
from checkerboard.constants import GRID_COLS, GRID_ROWS


class OutOfBounds(IndexError):
    """Raised when a coordinate falls outside the board.

    Signals a caller programming error; the board is never modified when this
    is raised.
    """

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y
        super().__init__(
            f"coordinate ({x}, {y}) is outside the {GRID_COLS}x{GRID_ROWS} board"
        )
