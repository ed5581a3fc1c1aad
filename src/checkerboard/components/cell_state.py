from enum import Enum

from checkerboard.constants import SYMBOL_EMPTY, SYMBOL_OCCUPIER_A, SYMBOL_OCCUPIER_B


class CellState(Enum):
    """What occupies a single board cell. The value is its display symbol."""
    EMPTY = SYMBOL_EMPTY
    OCCUPIER_A = SYMBOL_OCCUPIER_A
    OCCUPIER_B = SYMBOL_OCCUPIER_B

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_symbol(cls, symbol: str) -> "CellState":
        try:
            return cls(symbol)
        except ValueError:
            raise ValueError(f"unknown cell symbol {symbol!r}") from None
