from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from esper import World

from checkerboard.components.board import Board
from checkerboard.components.cell_state import CellState
from checkerboard.components.coordinate import Coordinate, CoordinateLike

logger = logging.getLogger(__name__)


def get_board_entity(world: World) -> int:
    for entity, _ in world.get_component(Board):
        return entity
    raise RuntimeError("Board component not found")


def get_board(world: World, entity: Optional[int] = None) -> Board:
    """Board on ``entity``, or on the first board entity when none is given."""
    if entity is None:
        entity = get_board_entity(world)
    return world.component_for_entity(entity, Board)


def write_cell(
    world: World,
    coordinate: CoordinateLike,
    value: CellState,
    *,
    entity: Optional[int] = None,
) -> CellState:
    """Write value at coordinate and return the state it replaced."""
    board = get_board(world, entity)
    previous = board.get(coordinate)
    board.set(coordinate, value)
    logger.debug("cell %s: %s -> %s", tuple(coordinate), previous.name, value.name)
    return previous


def write_row(
    world: World,
    y: int,
    values: Iterable[CellState],
    *,
    entity: Optional[int] = None,
) -> List[CellState]:
    """Overwrite row y and return its previous contents."""
    board = get_board(world, entity)
    previous = board.row(y)
    board.set_row(y, values)
    logger.debug("row %d rewritten", y)
    return previous


def occupied_coordinates(world: World, state: CellState) -> List[Coordinate]:
    return [coordinate for coordinate, value in get_board(world).items() if value is state]
