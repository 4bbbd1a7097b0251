"""Lookups for the singleton components of the active world context."""
import esper

from chainreaction.components.board import Board
from chainreaction.components.game_state import GameState
from chainreaction.components.player import Player
from chainreaction.components.turn_order import TurnOrder
from chainreaction.components.turn_state import TurnState


def _single(component_type):
    found = esper.get_component(component_type)
    if not found:
        raise LookupError(f"no {component_type.__name__} in world {esper.current_world!r}")
    return found[0][1]


def get_board() -> Board:
    return _single(Board)


def get_turn_order() -> TurnOrder:
    return _single(TurnOrder)


def get_turn_state() -> TurnState:
    return _single(TurnState)


def get_game_state() -> GameState:
    return _single(GameState)


def get_players() -> list[Player]:
    """Players in seat order."""
    return sorted((player for _, player in esper.get_component(Player)), key=lambda p: p.id)


def get_player(player_id: int) -> Player:
    for _, player in esper.get_component(Player):
        if player.id == player_id:
            return player
    raise KeyError(player_id)


def current_player() -> Player | None:
    seat = get_turn_order().current()
    if seat is None:
        return None
    return get_player(seat)
