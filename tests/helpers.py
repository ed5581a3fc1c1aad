from __future__ import annotations

from typing import Any, Dict, List

from checkerboard.components.coordinate import Coordinate
from checkerboard.constants import GRID_COLS, GRID_ROWS
from checkerboard.events.bus import EventBus


def all_coordinates() -> list[Coordinate]:
    return [Coordinate(x, y) for y in range(GRID_ROWS) for x in range(GRID_COLS)]


def record_events(bus: EventBus, name: str) -> List[Dict[str, Any]]:
    """Subscribe to ``name`` and collect each payload in the returned list."""

    received: List[Dict[str, Any]] = []

    def handler(sender, **kwargs):
        received.append(kwargs)

    bus.subscribe(name, handler)
    return received
