from __future__ import annotations

from typing import Iterable, Sequence

import esper

from chainreaction.engine import Engine
from chainreaction.events.bus import EventBus
from chainreaction.utils.world_access import get_board


def capture_events(bus: EventBus, names: Iterable[str]) -> list[tuple[str, dict]]:
    """Subscribe to each event name and record (name, payload) in emission order."""
    log: list[tuple[str, dict]] = []
    for name in names:
        bus.subscribe(name, lambda sender, _name=name, **payload: log.append((_name, payload)))
    return log


def play(engine: Engine, moves: Sequence[tuple[int, int]]) -> list[bool]:
    """Submit each (row, col) as whoever currently holds the turn."""
    results = []
    for row, col in moves:
        results.append(engine.submit_move(row, col, engine.current_player_id))
    return results


def set_cell(engine: Engine, row: int, col: int, owner: int | None, pieces: int) -> None:
    esper.switch_world(engine.world)
    cell = get_board().cell_at(row, col)
    cell.owner_id = owner
    cell.piece_count = pieces
