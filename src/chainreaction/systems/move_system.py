from __future__ import annotations

import logging
from enum import Enum

import esper

from chainreaction.events.bus import (
    EventBus,
    EVENT_MOVE_ACCEPTED,
    EVENT_MOVE_REJECTED,
    EVENT_MOVE_REQUEST,
    EVENT_STATE_CHANGED,
)
from chainreaction.systems.board_ops import place_pieces
from chainreaction.systems.chain_reaction_system import ChainReactionSystem
from chainreaction.systems.turn_system import TurnSystem
from chainreaction.utils.world_access import (
    get_board,
    get_game_state,
    get_player,
    get_turn_order,
    get_turn_state,
)

logger = logging.getLogger(__name__)


class MoveRejection(Enum):
    """Why a placement was refused; checked in declaration order."""
    GAME_OVER = "game_over"
    OUT_OF_BOUNDS = "out_of_bounds"
    CHAIN_RESOLVING = "chain_resolving"
    NOT_CURRENT_PLAYER = "not_current_player"
    CELL_OWNED_BY_OPPONENT = "cell_owned_by_opponent"


class MoveSystem:
    """Validates and applies piece placements.

    Rejections never raise: submit() returns False and EVENT_MOVE_REJECTED carries the reason.
    An accepted placement that overloads its cell hands over to the ChainReactionSystem
    instead of passing the turn.
    """

    def __init__(
        self,
        world: str,
        event_bus: EventBus,
        chain_system: ChainReactionSystem,
        turn_system: TurnSystem,
        *,
        auto_resolve: bool = True,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.chain_system = chain_system
        self.turn_system = turn_system
        self.auto_resolve = auto_resolve
        self.event_bus.subscribe(EVENT_MOVE_REQUEST, self.on_move_request)

    def detach(self) -> None:
        self.event_bus.unsubscribe(EVENT_MOVE_REQUEST, self.on_move_request)

    def on_move_request(self, sender, **payload) -> None:
        row = payload.get("row")
        col = payload.get("col")
        player_id = payload.get("player_id")
        if row is None or col is None or player_id is None:
            return
        self.submit(row, col, player_id)

    def validate(self, row: int, col: int, player_id: int) -> MoveRejection | None:
        esper.switch_world(self.world)
        if get_game_state().game_over:
            return MoveRejection.GAME_OVER
        board = get_board()
        if not board.in_bounds(row, col):
            return MoveRejection.OUT_OF_BOUNDS
        if get_turn_state().resolving_chain:
            return MoveRejection.CHAIN_RESOLVING
        if get_turn_order().current() != player_id:
            return MoveRejection.NOT_CURRENT_PLAYER
        owner = board.cell_at(row, col).owner_id
        if owner is not None and owner != player_id:
            return MoveRejection.CELL_OWNED_BY_OPPONENT
        return None

    def submit(self, row: int, col: int, player_id: int) -> bool:
        rejection = self.validate(row, col, player_id)
        if rejection is not None:
            logger.debug("move %s by player %s rejected: %s", (row, col), player_id, rejection.value)
            self.event_bus.emit(EVENT_MOVE_REJECTED, row=row, col=col, player_id=player_id, reason=rejection)
            return False

        cell = get_board().cell_at(row, col)
        added = place_pieces(cell, player_id)
        get_player(player_id).total_pieces += added
        logger.debug("player %s placed %d at %s (now %d/%d)", player_id, added, (row, col), cell.piece_count, cell.capacity)
        self.event_bus.emit(EVENT_MOVE_ACCEPTED, row=row, col=col, player_id=player_id, pieces_added=added)
        self.event_bus.emit(EVENT_STATE_CHANGED, reason="placement")

        if cell.is_overloaded():
            self.chain_system.start(row, col)
            if self.auto_resolve:
                self.chain_system.resolve_all()
        else:
            self.turn_system.advance_turn()
            self.event_bus.emit(EVENT_STATE_CHANGED, reason="turn")
        return True
