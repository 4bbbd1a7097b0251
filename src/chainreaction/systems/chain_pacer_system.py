import esper

from chainreaction.constants import EXPLOSION_STEP_DELAY
from chainreaction.events.bus import EVENT_TICK, EventBus
from chainreaction.systems.chain_reaction_system import ChainReactionSystem
from chainreaction.utils.world_access import get_turn_state


class ChainPacerSystem:
    """Feeds one detonation step to the chain system every ``step_delay`` seconds of ticks."""
    def __init__(self, world: str, event_bus: EventBus, chain_system: ChainReactionSystem, step_delay: float = EXPLOSION_STEP_DELAY):
        self.world = world
        self.event_bus = event_bus
        self.chain_system = chain_system
        self.step_delay = step_delay
        self._elapsed = 0.0
        event_bus.subscribe(EVENT_TICK, self.on_tick)

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 0.0)
        esper.switch_world(self.world)
        if not get_turn_state().resolving_chain:
            self._elapsed = 0.0
            return
        self._elapsed += dt
        while self._elapsed >= self.step_delay:
            self._elapsed -= self.step_delay
            if not self.chain_system.step():
                self._elapsed = 0.0
                break

    def reset(self):
        self._elapsed = 0.0

    def detach(self):
        self.event_bus.unsubscribe(EVENT_TICK, self.on_tick)
