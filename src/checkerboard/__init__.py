from checkerboard.components.board import Board, default_layout
from checkerboard.components.cell_state import CellState
from checkerboard.components.coordinate import Coordinate
from checkerboard.errors import OutOfBounds

__all__ = [
    "Board",
    "CellState",
    "Coordinate",
    "OutOfBounds",
    "default_layout",
]
