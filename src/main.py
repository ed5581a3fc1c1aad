"""Text demo of the checkerboard model.

Sets up the ECS world, event bus and board system, then prints the board
before and after a couple of writes made through the bus.
"""
import logging
import os

from checkerboard.components.cell_state import CellState
from checkerboard.components.coordinate import Coordinate
from checkerboard.constants import LOG_LEVEL_ENV
from checkerboard.events.bus import EventBus, EVENT_CELL_CHANGED, EVENT_CELL_WRITE_REQUEST
from checkerboard.systems.board import BoardSystem
from checkerboard.world import create_world


def log_level() -> int:
    """Level named by the environment; unknown names fall back to WARNING."""
    level = logging.getLevelName(os.environ.get(LOG_LEVEL_ENV, "WARNING").upper())
    return level if isinstance(level, int) else logging.WARNING


def main():
    logging.basicConfig(
        level=log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    event_bus = EventBus()
    world = create_world(event_bus)
    board_system = BoardSystem(world, event_bus)

    def on_cell_changed(sender, **kwargs):
        print(f"{tuple(kwargs['coordinate'])}: {kwargs['previous'].symbol} -> {kwargs['value'].symbol}")

    event_bus.subscribe(EVENT_CELL_CHANGED, on_cell_changed)

    board = board_system.board
    print(board)

    coordinate = Coordinate(x=3, y=2)
    print(board[coordinate].symbol)
    event_bus.emit(EVENT_CELL_WRITE_REQUEST, coordinate=coordinate, value=CellState.OCCUPIER_B)
    print(board)

    print(board[1, 2].symbol)
    event_bus.emit(EVENT_CELL_WRITE_REQUEST, coordinate=(1, 2), value=CellState.OCCUPIER_B)
    print(board)


if __name__ == "__main__":
    main()
