from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Tuple

from checkerboard.components.cell_state import CellState
from checkerboard.components.coordinate import Coordinate, CoordinateLike
from checkerboard.constants import (
    CELL_COUNT,
    GRID_COLS,
    GRID_ROWS,
    OCCUPIER_A_ROWS,
    OCCUPIER_B_ROWS,
)
from checkerboard.errors import OutOfBounds


def default_layout() -> List[CellState]:
    """Starting position: occupiers on the dark squares of the top and bottom three rows."""
    cells: List[CellState] = []
    for y in range(GRID_ROWS):
        for x in range(GRID_COLS):
            if (x + y) % 2 == 0:
                cells.append(CellState.EMPTY)
            elif y in OCCUPIER_A_ROWS:
                cells.append(CellState.OCCUPIER_A)
            elif y in OCCUPIER_B_ROWS:
                cells.append(CellState.OCCUPIER_B)
            else:
                cells.append(CellState.EMPTY)
    return cells


def _check_state(value) -> CellState:
    if not isinstance(value, CellState):
        raise TypeError(f"board cells hold CellState values, got {value!r}")
    return value


@dataclass(slots=True)
class Board:
    """Fixed 8x8 grid of cell states stored row-major in a flat list.

    Cells are addressed by (x, y) where x is the column and y the row, both
    zero-based. Reads and writes outside the grid raise OutOfBounds; negative
    indices are rejected rather than wrapped.
    """
    cells: List[CellState] = field(default_factory=default_layout)

    def __post_init__(self) -> None:
        cells = list(self.cells)
        if len(cells) != CELL_COUNT:
            raise ValueError(f"board needs exactly {CELL_COUNT} cells, got {len(cells)}")
        for value in cells:
            _check_state(value)
        self.cells = cells

    @classmethod
    def from_rows(cls, lines: Iterable[str]) -> Board:
        """Build a board from rendered rows (row 0 first, one symbol per cell)."""
        rows = list(lines)
        if len(rows) != GRID_ROWS:
            raise ValueError(f"expected {GRID_ROWS} rows, got {len(rows)}")
        cells: List[CellState] = []
        for y, line in enumerate(rows):
            if len(line) != GRID_COLS:
                raise ValueError(f"row {y} has {len(line)} cells, expected {GRID_COLS}")
            cells.extend(CellState.from_symbol(symbol) for symbol in line)
        return cls(cells=cells)

    @staticmethod
    def _offset(coordinate: CoordinateLike) -> int:
        try:
            x, y = coordinate
        except (TypeError, ValueError):
            raise TypeError(f"expected an (x, y) coordinate, got {coordinate!r}") from None
        if type(x) is bool or type(y) is bool or not isinstance(x, int) or not isinstance(y, int):
            raise TypeError(f"coordinate components must be integers, got ({x!r}, {y!r})")
        if not (0 <= x < GRID_COLS and 0 <= y < GRID_ROWS):
            raise OutOfBounds(x, y)
        return y * GRID_COLS + x

    def get(self, coordinate: CoordinateLike) -> CellState:
        return self.cells[self._offset(coordinate)]

    def set(self, coordinate: CoordinateLike, value: CellState) -> None:
        offset = self._offset(coordinate)
        self.cells[offset] = _check_state(value)

    # board[coord] and board[x, y] both arrive here as a 2-tuple.
    def __getitem__(self, coordinate: CoordinateLike) -> CellState:
        return self.get(coordinate)

    def __setitem__(self, coordinate: CoordinateLike, value: CellState) -> None:
        self.set(coordinate, value)

    def row(self, y: int) -> List[CellState]:
        start = self._offset((0, y))
        return self.cells[start:start + GRID_COLS]

    def set_row(self, y: int, values: Iterable[CellState]) -> None:
        """Overwrite row y. Nothing is written unless all values are valid."""
        start = self._offset((0, y))
        new_values = [_check_state(value) for value in values]
        if len(new_values) != GRID_COLS:
            raise ValueError(f"a row holds {GRID_COLS} cells, got {len(new_values)}")
        self.cells[start:start + GRID_COLS] = new_values

    def items(self) -> Iterator[Tuple[Coordinate, CellState]]:
        for offset, value in enumerate(self.cells):
            y, x = divmod(offset, GRID_COLS)
            yield Coordinate(x, y), value

    def counts(self) -> Dict[CellState, int]:
        totals = {state: 0 for state in CellState}
        for value in self.cells:
            totals[value] += 1
        return totals

    def copy(self) -> Board:
        return Board(cells=list(self.cells))

    def render(self) -> str:
        lines = []
        for y in range(GRID_ROWS):
            lines.append("".join(value.symbol for value in self.row(y)))
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()
