"""Game session facade.

Owns one esper world context (board, players, turn and game state) and the
systems that mutate it. UI collaborators talk to the engine only through the
query methods, ``submit_move`` and the event bus / listener.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import esper

from chainreaction.constants import GRID_COLS, GRID_ROWS
from chainreaction.events.bus import EVENT_TICK, EventBus
from chainreaction.events.listener import GameListener, ListenerBinding
from chainreaction.systems.chain_pacer_system import ChainPacerSystem
from chainreaction.systems.chain_reaction_system import ChainReactionSystem
from chainreaction.systems.elimination_system import EliminationSystem
from chainreaction.systems.move_system import MoveSystem
from chainreaction.systems.turn_system import TurnSystem
from chainreaction.utils.world_access import (
    current_player,
    get_board,
    get_game_state,
    get_players,
    get_turn_order,
    get_turn_state,
)
from chainreaction.world import create_world, dispose_world


@dataclass(frozen=True, slots=True)
class CellSnapshot:
    row: int
    col: int
    owner_id: Optional[int]
    piece_count: int
    capacity: int


@dataclass(frozen=True, slots=True)
class PlayerSnapshot:
    id: int
    name: str
    color: tuple[int, int, int]
    active: bool
    total_pieces: int


class Engine:
    """One chain reaction game session.

    With ``auto_resolve`` (the default) a move that overloads a cell is resolved
    to completion before ``submit_move`` returns. Otherwise the chain stays open
    and the caller drains it through ``resolve_next_explosion_step``,
    ``resolve_chain`` or, when ``step_delay`` is given, by emitting ticks.
    """

    def __init__(
        self,
        rows: int = GRID_ROWS,
        cols: int = GRID_COLS,
        player_names: Sequence[str] | None = None,
        *,
        num_players: int | None = None,
        colors: Sequence[tuple[int, int, int]] | None = None,
        event_bus: EventBus | None = None,
        auto_resolve: bool = True,
        step_delay: float | None = None,
    ) -> None:
        self._config = dict(
            rows=rows,
            cols=cols,
            player_names=list(player_names) if player_names else None,
            num_players=num_players,
            colors=list(colors) if colors else None,
        )
        self.event_bus = event_bus or EventBus()
        self.world = create_world(**self._config)
        self.turn_system = TurnSystem(self.world, self.event_bus)
        self.elimination_system = EliminationSystem(self.world, self.event_bus)
        self.chain_system = ChainReactionSystem(self.world, self.event_bus, self.turn_system, self.elimination_system)
        self.move_system = MoveSystem(
            self.world,
            self.event_bus,
            self.chain_system,
            self.turn_system,
            auto_resolve=auto_resolve,
        )
        self.pacer: ChainPacerSystem | None = None
        if step_delay is not None:
            self.pacer = ChainPacerSystem(self.world, self.event_bus, self.chain_system, step_delay=step_delay)
        self._listener: ListenerBinding | None = None

    def _activate(self) -> None:
        esper.switch_world(self.world)

    def _systems(self):
        systems = [self.turn_system, self.elimination_system, self.chain_system, self.move_system]
        if self.pacer is not None:
            systems.append(self.pacer)
        return systems

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def submit_move(self, row: int, col: int, player_id: int) -> bool:
        return self.move_system.submit(row, col, player_id)

    def resolve_next_explosion_step(self) -> bool:
        """Detonate one queued cell; True while the chain still has steps left."""
        return self.chain_system.step()

    def resolve_chain(self) -> int:
        return self.chain_system.resolve_all()

    def tick(self, dt: float) -> None:
        self.event_bus.emit(EVENT_TICK, dt=dt)

    def set_listener(self, listener: GameListener | None) -> None:
        """Register the single listener, replacing any previous one."""
        if self._listener is not None:
            self._listener.detach()
            self._listener = None
        if listener is not None:
            self._listener = ListenerBinding(self.event_bus, listener)

    def restart(self) -> None:
        """Discard the session and start a fresh one with the same configuration."""
        old = self.world
        self.world = create_world(**self._config)
        for system in self._systems():
            system.world = self.world
        dispose_world(old)
        if self.pacer is not None:
            self.pacer.reset()

    def close(self) -> None:
        """Stop handling bus events and drop the session world."""
        if self._listener is not None:
            self._listener.detach()
            self._listener = None
        self.move_system.detach()
        if self.pacer is not None:
            self.pacer.detach()
        dispose_world(self.world)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def rows(self) -> int:
        self._activate()
        return get_board().rows

    @property
    def cols(self) -> int:
        self._activate()
        return get_board().cols

    def capacity_of(self, row: int, col: int) -> int:
        self._activate()
        return get_board().cell_at(row, col).capacity

    def neighbors_of(self, row: int, col: int) -> list[tuple[int, int]]:
        self._activate()
        return get_board().neighbors_of(row, col)

    def cell(self, row: int, col: int) -> CellSnapshot:
        self._activate()
        return self._snapshot_cell(get_board().cell_at(row, col))

    def board_snapshot(self) -> list[list[CellSnapshot]]:
        self._activate()
        board = get_board()
        return [
            [self._snapshot_cell(board.cell_at(r, c)) for c in range(board.cols)]
            for r in range(board.rows)
        ]

    def players(self) -> list[PlayerSnapshot]:
        self._activate()
        return [
            PlayerSnapshot(
                id=p.id,
                name=p.name,
                color=p.color,
                active=p.active,
                total_pieces=p.total_pieces,
            )
            for p in get_players()
        ]

    @property
    def current_player_index(self) -> int:
        self._activate()
        return get_turn_order().index

    @property
    def current_player_id(self) -> int | None:
        self._activate()
        return get_turn_order().current()

    @property
    def is_game_over(self) -> bool:
        self._activate()
        return get_game_state().game_over

    @property
    def winner_id(self) -> int | None:
        self._activate()
        return get_game_state().winner_id

    @property
    def is_resolving_chain(self) -> bool:
        self._activate()
        return get_turn_state().resolving_chain

    def turn_banner(self) -> str:
        self._activate()
        player = current_player()
        return f"{player.name}'s Turn" if player else ""

    def winner_message(self) -> str:
        self._activate()
        state = get_game_state()
        if state.winner_id is None:
            return "No winner"
        return f"{get_players()[state.winner_id].name} wins!"

    @staticmethod
    def _snapshot_cell(cell) -> CellSnapshot:
        return CellSnapshot(
            row=cell.row,
            col=cell.col,
            owner_id=cell.owner_id,
            piece_count=cell.piece_count,
            capacity=cell.capacity,
        )
