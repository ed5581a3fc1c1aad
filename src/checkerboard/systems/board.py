import logging
from typing import Optional

from esper import World

from checkerboard.components.board import Board
from checkerboard.components.coordinate import Coordinate
from checkerboard.events.bus import (
    EventBus,
    EVENT_BOARD_RESET,
    EVENT_BOARD_RESET_REQUEST,
    EVENT_CELL_CHANGED,
    EVENT_CELL_WRITE_REQUEST,
)
from checkerboard.systems.board_ops import write_cell

logger = logging.getLogger(__name__)


class BoardSystem:
    def __init__(self, world: World, event_bus: EventBus, layout: Optional[Board] = None):
        self.world = world
        self.event_bus = event_bus
        # Single board entity; the layout is copied so callers keep their own instance.
        board = layout.copy() if layout is not None else Board()
        self.board_entity = self.world.create_entity(board)
        self.event_bus.subscribe(EVENT_CELL_WRITE_REQUEST, self.on_cell_write_request)
        self.event_bus.subscribe(EVENT_BOARD_RESET_REQUEST, self.on_board_reset_request)

    @property
    def board(self) -> Board:
        return self.world.component_for_entity(self.board_entity, Board)

    def on_cell_write_request(self, sender, **kwargs):
        coordinate = kwargs.get('coordinate')
        value = kwargs.get('value')
        if coordinate is None or value is None:
            return
        # OutOfBounds propagates back to the emitter; nothing is announced.
        previous = write_cell(self.world, coordinate, value, entity=self.board_entity)
        x, y = coordinate
        self.event_bus.emit(
            EVENT_CELL_CHANGED,
            coordinate=Coordinate(x, y),
            previous=previous,
            value=value,
        )

    def on_board_reset_request(self, sender, **kwargs):
        board = self.board
        board.cells = Board().cells
        logger.info("board reset to default layout")
        self.event_bus.emit(EVENT_BOARD_RESET, board=board)
