from __future__ import annotations

import logging

import esper

from chainreaction.events.bus import EventBus, EVENT_GAME_OVER, EVENT_PLAYER_ELIMINATED
from chainreaction.utils.world_access import get_board, get_game_state, get_players

logger = logging.getLogger(__name__)


class EliminationSystem:
    """Settles piece totals after a chain reaction and decides eliminations and the winner.

    Only ever run once the explosion queue has drained, so totals are final.
    A player holding no pieces is eliminated exactly once; the game ends when
    at most one player still holds pieces.
    """

    def __init__(self, world: str, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus

    def evaluate(self) -> bool:
        """Recompute totals, emit eliminations, and return whether the game is over."""
        esper.switch_world(self.world)
        state = get_game_state()
        if state.game_over:
            return True
        totals = get_board().pieces_by_owner()
        holders: list[int] = []
        for player in get_players():
            player.total_pieces = totals.get(player.id, 0)
            if player.total_pieces > 0:
                holders.append(player.id)
            elif player.active:
                player.active = False
                logger.info("player %s (%s) eliminated", player.id, player.name)
                self.event_bus.emit(EVENT_PLAYER_ELIMINATED, player_id=player.id)
        if len(holders) > 1:
            return False
        state.game_over = True
        state.winner_id = holders[0] if holders else None
        logger.info("game over, winner=%s", state.winner_id)
        self.event_bus.emit(EVENT_GAME_OVER, winner_id=state.winner_id)
        return True
