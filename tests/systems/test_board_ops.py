from chainreaction.components.board import Board
from chainreaction.components.cell import Cell
from chainreaction.components.explosion_queue import ExplosionEvent
from chainreaction.systems.board_ops import detonate, place_pieces


def test_first_placement_adds_one_piece():
    cell = Cell(row=0, col=0, capacity=2)
    assert place_pieces(cell, 0) == 1
    assert cell.piece_count == 1
    assert cell.owner_id == 0


def test_repeat_placement_by_owner_adds_growing_batches():
    cell = Cell(row=1, col=1, capacity=4)
    place_pieces(cell, 0)
    assert place_pieces(cell, 0) == 2
    assert cell.piece_count == 3
    assert cell.repeat_placement_count == 2


def test_batch_lands_before_any_overload_check():
    cell = Cell(row=0, col=0, capacity=2)
    place_pieces(cell, 0)
    place_pieces(cell, 0)
    # Capacity 2 is passed by the whole batch, nothing is discarded.
    assert cell.piece_count == 3


def test_owner_change_restarts_repeat_count():
    cell = Cell(row=0, col=0, capacity=4, piece_count=1, owner_id=1, repeat_placement_count=3)
    cell.reset()
    assert place_pieces(cell, 0) == 1


def test_detonate_captures_neighbors_with_one_piece_each():
    board = Board.create(3, 3)
    board.cell_at(1, 1).piece_count = 4
    board.cell_at(1, 1).owner_id = 0
    neighbor = board.cell_at(0, 1)
    neighbor.piece_count = 2
    neighbor.owner_id = 1
    neighbor.repeat_placement_count = 2

    follow_ups = detonate(board, ExplosionEvent(row=1, col=1, owner_id=0))

    assert follow_ups == []
    assert board.cell_at(1, 1).is_empty()
    assert board.cell_at(1, 1).owner_id is None
    for row, col in board.neighbors_of(1, 1):
        cell = board.cell_at(row, col)
        assert cell.piece_count == 1
        assert cell.owner_id == 0
    assert neighbor.repeat_placement_count == 0


def test_detonate_queues_overloaded_neighbors_in_neighbor_order():
    board = Board.create(1, 3)
    board.cell_at(0, 1).piece_count = 2
    board.cell_at(0, 1).owner_id = 2

    follow_ups = detonate(board, ExplosionEvent(row=0, col=1, owner_id=2))

    assert follow_ups == [
        ExplosionEvent(row=0, col=0, owner_id=2),
        ExplosionEvent(row=0, col=2, owner_id=2),
    ]
