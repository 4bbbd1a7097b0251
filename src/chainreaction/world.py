import itertools
from typing import Sequence

import esper

from chainreaction.components.board import Board
from chainreaction.components.game_state import GameState
from chainreaction.components.player import Player
from chainreaction.components.turn_order import TurnOrder
from chainreaction.components.turn_state import TurnState
from chainreaction.constants import (
    CYCLING_BOARD_SHAPES,
    DEFAULT_PLAYER_NAME,
    GRID_COLS,
    GRID_ROWS,
    MAX_PLAYERS,
    MIN_BOARD_SIDE,
    MIN_PLAYERS,
    PLAYER_COLORS,
)

_world_ids = itertools.count(1)


def player_names_for(num_players: int, player_names: Sequence[str] | None) -> list[str]:
    """Seat names, filling any missing or blank entry with the default."""
    names = list(player_names or [])
    return [
        names[i] if i < len(names) and names[i] else DEFAULT_PLAYER_NAME.format(n=i + 1)
        for i in range(num_players)
    ]


def create_world(
    rows: int = GRID_ROWS,
    cols: int = GRID_COLS,
    player_names: Sequence[str] | None = None,
    *,
    num_players: int | None = None,
    colors: Sequence[tuple[int, int, int]] | None = None,
) -> str:
    """Build a fresh esper world context for one game session and make it current.

    Returns the context name; systems switch to it before touching components.
    """
    if num_players is None:
        num_players = len(player_names) if player_names else MIN_PLAYERS
    if not MIN_PLAYERS <= num_players <= MAX_PLAYERS:
        raise ValueError(f"num_players must be between {MIN_PLAYERS} and {MAX_PLAYERS}, got {num_players}")
    if rows < MIN_BOARD_SIDE or cols < MIN_BOARD_SIDE:
        raise ValueError(f"board sides must be at least {MIN_BOARD_SIDE}, got {rows}x{cols}")
    if (rows, cols) in CYCLING_BOARD_SHAPES:
        raise ValueError(f"a {rows}x{cols} board never settles a chain reaction")
    palette = list(colors) if colors else list(PLAYER_COLORS)
    if len(palette) < num_players:
        raise ValueError(f"need {num_players} colors, got {len(palette)}")

    name = f"chainreaction-{next(_world_ids)}"
    esper.switch_world(name)

    esper.create_entity(Board.create(rows, cols))
    seats = []
    for seat, player_name in enumerate(player_names_for(num_players, player_names)):
        esper.create_entity(Player(id=seat, name=player_name, color=tuple(palette[seat])))
        seats.append(seat)
    esper.create_entity(TurnOrder(seats=seats, index=0))
    esper.create_entity(TurnState(), GameState())
    return name


def dispose_world(name: str) -> None:
    """Drop a session context; a current context is switched away from first."""
    if esper.current_world == name:
        esper.switch_world("default")
    esper.delete_world(name)
