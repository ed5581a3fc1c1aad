from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so handlers on systems nobody else holds stay connected.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# BOARD
# ============================================================================
EVENT_CELL_WRITE_REQUEST = "cell_write_request"    # payload: coordinate=(x,y), value=CellState
EVENT_CELL_CHANGED = "cell_changed"                # payload: coordinate=Coordinate, previous=CellState, value=CellState
EVENT_BOARD_RESET_REQUEST = "board_reset_request"  # payload: none
EVENT_BOARD_RESET = "board_reset"                  # payload: board=Board
