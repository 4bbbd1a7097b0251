from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple

from chainreaction.components.cell import Cell

@dataclass(slots=True)
class Board:
    """Fixed rows x cols grid; cells live in one row-major list indexed by (row, col)."""
    rows: int
    cols: int
    cells: List[Cell] = field(default_factory=list)

    @classmethod
    def create(cls, rows: int, cols: int) -> "Board":
        board = cls(rows=rows, cols=cols)
        board.cells = [
            Cell(row=r, col=c, capacity=board.capacity_of(r, c))
            for r in range(rows)
            for c in range(cols)
        ]
        return board

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def capacity_of(self, row: int, col: int) -> int:
        return (row > 0) + (row < self.rows - 1) + (col > 0) + (col < self.cols - 1)

    def neighbors_of(self, row: int, col: int) -> List[Tuple[int, int]]:
        # Up, down, left, right; detonation order depends on it.
        candidates = ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1))
        return [(r, c) for r, c in candidates if self.in_bounds(r, c)]

    def cell_at(self, row: int, col: int) -> Cell:
        if not self.in_bounds(row, col):
            raise IndexError(f"cell {(row, col)} outside {self.rows}x{self.cols} board")
        return self.cells[row * self.cols + col]

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def pieces_by_owner(self) -> Dict[int, int]:
        totals: Dict[int, int] = {}
        for cell in self:
            if cell.owner_id is None:
                continue
            totals[cell.owner_id] = totals.get(cell.owner_id, 0) + cell.piece_count
        return totals
