"""Pure cell mutation helpers shared by move intake and chain resolution."""
from __future__ import annotations

from chainreaction.components.board import Board
from chainreaction.components.cell import Cell
from chainreaction.components.explosion_queue import ExplosionEvent


def place_pieces(cell: Cell, player_id: int) -> int:
    """Apply one placement by ``player_id`` and return how many pieces it added.

    Repeated placements by the owning player add one more piece each time; an
    empty cell, or one whose owner changed, starts again at one.
    """
    if cell.owner_id != player_id:
        cell.repeat_placement_count = 0
    cell.repeat_placement_count += 1
    pieces = cell.repeat_placement_count
    # All pieces land before the single overload check made by the caller.
    for _ in range(pieces):
        cell.add_piece(player_id)
    return pieces


def detonate(board: Board, event: ExplosionEvent) -> list[ExplosionEvent]:
    """Empty the event's cell and hand one piece to each neighbour.

    Every neighbour is emptied first and then captured by ``event.owner_id``.
    Returns follow-up events for neighbours that are now overloaded, in
    neighbour order.
    """
    board.cell_at(event.row, event.col).reset()
    follow_ups: list[ExplosionEvent] = []
    for row, col in board.neighbors_of(event.row, event.col):
        neighbor = board.cell_at(row, col)
        neighbor.reset()
        neighbor.add_piece(event.owner_id)
        if neighbor.is_overloaded():
            follow_ups.append(ExplosionEvent(row=row, col=col, owner_id=event.owner_id))
    return follow_ups
