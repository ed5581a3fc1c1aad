from esper import World

from checkerboard.events.bus import EventBus


def create_world(event_bus: EventBus) -> World:
    """Create the ECS world that board systems attach their entities to.

    Systems take the bus separately; it is accepted here so the world and its
    systems are always built from the same call site.
    """
    return World()
