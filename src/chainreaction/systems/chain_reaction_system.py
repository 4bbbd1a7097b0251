from __future__ import annotations

import logging

import esper

from chainreaction.components.explosion_queue import ExplosionEvent
from chainreaction.components.turn_state import TurnState
from chainreaction.events.bus import (
    EventBus,
    EVENT_EXPLOSION_SEQUENCE_COMPLETED,
    EVENT_EXPLOSION_STARTED,
    EVENT_STATE_CHANGED,
)
from chainreaction.systems.board_ops import detonate
from chainreaction.systems.elimination_system import EliminationSystem
from chainreaction.systems.turn_system import TurnSystem
from chainreaction.utils.world_access import get_board, get_turn_state

logger = logging.getLogger(__name__)


class ChainReactionSystem:
    """Breadth-first detonation of overloaded cells.

    Flow:
      - start() seeds the queue with the overloaded cell and locks move intake.
      - step() detonates exactly one queued cell; cells it overloads join the back of the queue.
      - When the queue drains, eliminations are settled, the turn passes (unless the game
        ended) and EVENT_EXPLOSION_SEQUENCE_COMPLETED fires.
    Callers may run step() on their own schedule or call resolve_all() to finish at once.
    """
    def __init__(
        self,
        world: str,
        event_bus: EventBus,
        turn_system: TurnSystem,
        elimination_system: EliminationSystem,
    ):
        self.world = world
        self.event_bus = event_bus
        self.turn_system = turn_system
        self.elimination_system = elimination_system

    def start(self, row: int, col: int) -> None:
        esper.switch_world(self.world)
        state = get_turn_state()
        owner = get_board().cell_at(row, col).owner_id
        state.resolving_chain = True
        state.chain_steps = 0
        state.queue.clear()
        state.queue.push(ExplosionEvent(row=row, col=col, owner_id=owner))
        logger.debug("chain reaction started at %s for player %s", (row, col), owner)

    def step(self) -> bool:
        """Detonate the next queued cell. Returns True while more steps remain."""
        esper.switch_world(self.world)
        # Listeners may switch the esper context, so hold this session's components across emits.
        state = get_turn_state()
        board = get_board()
        if not state.resolving_chain:
            return False
        if not state.queue:
            self._finish(state)
            return False
        event = state.queue.pop()
        self.event_bus.emit(EVENT_EXPLOSION_STARTED, row=event.row, col=event.col, owner_id=event.owner_id)
        for follow_up in detonate(board, event):
            state.queue.push(follow_up)
        state.chain_steps += 1
        logger.debug("detonated %s, %d queued", (event.row, event.col), len(state.queue))
        self.event_bus.emit(EVENT_STATE_CHANGED, reason="explosion")
        if not state.queue:
            self._finish(state)
            return False
        return True

    def resolve_all(self) -> int:
        """Run the current chain to completion and return how many cells detonated."""
        esper.switch_world(self.world)
        state = get_turn_state()
        while self.step():
            pass
        return state.chain_steps

    def _finish(self, state: TurnState) -> None:
        state.resolving_chain = False
        steps = state.chain_steps
        logger.debug("chain reaction finished after %d detonations (peak queue %d)", steps, state.queue.peak_length)
        if not self.elimination_system.evaluate():
            self.turn_system.advance_turn()
            self.event_bus.emit(EVENT_STATE_CHANGED, reason="turn")
        self.event_bus.emit(EVENT_EXPLOSION_SEQUENCE_COMPLETED, steps=steps)
