import logging

import esper

from chainreaction.events.bus import EventBus, EVENT_TURN_ADVANCED
from chainreaction.utils.world_access import get_player, get_turn_order

logger = logging.getLogger(__name__)


class TurnSystem:
    """Rotates the current seat, skipping eliminated players."""
    def __init__(self, world: str, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus

    def advance_turn(self) -> int | None:
        esper.switch_world(self.world)
        order = get_turn_order()
        previous = order.current()
        order.advance(lambda seat: get_player(seat).active)
        new = order.current()
        logger.debug("turn %s -> %s", previous, new)
        self.event_bus.emit(EVENT_TURN_ADVANCED, previous_player=previous, new_player=new)
        return new
