from dataclasses import dataclass
from typing import Optional

@dataclass(slots=True)
class Cell:
    """One grid square.

    capacity: number of in-bounds orthogonal neighbours, fixed at creation.
    owner_id: seat id of the player owning the pieces, None while empty.
    repeat_placement_count: consecutive placements by the current owner; decides how
    many pieces the next placement adds.
    """
    row: int
    col: int
    capacity: int
    piece_count: int = 0
    owner_id: Optional[int] = None
    repeat_placement_count: int = 0

    def add_piece(self, player_id: int) -> None:
        if self.piece_count == 0:
            self.owner_id = player_id
        self.piece_count += 1

    def reset(self) -> None:
        self.piece_count = 0
        self.owner_id = None
        self.repeat_placement_count = 0

    def is_empty(self) -> bool:
        return self.piece_count == 0

    def is_overloaded(self) -> bool:
        return self.piece_count >= self.capacity
