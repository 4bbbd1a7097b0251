"""Session-wide outcome state."""
from dataclasses import dataclass
from typing import Optional


@dataclass
class GameState:
    """Singleton component; game_over only ever flips from False to True."""
    game_over: bool = False
    winner_id: Optional[int] = None
