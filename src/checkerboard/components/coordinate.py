from typing import NamedTuple, Tuple, Union


class Coordinate(NamedTuple):
    """Zero-based (x, y) address of a board cell: x is the column, y the row."""
    x: int
    y: int


# Plain (x, y) tuples are accepted wherever a Coordinate is.
CoordinateLike = Union[Coordinate, Tuple[int, int]]
