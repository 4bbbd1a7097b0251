from dataclasses import dataclass
from typing import Tuple

@dataclass(slots=True)
class Player:
    """Seat in the game.

    id: 0-based seat index, stable for the session.
    color: display-only (r, g, b) tuple.
    total_pieces: cached tally of pieces on cells this player owns.
    """
    id: int
    name: str
    color: Tuple[int, int, int]
    active: bool = True
    total_pieces: int = 0
