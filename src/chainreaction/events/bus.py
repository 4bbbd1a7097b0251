from blinker import Signal
from typing import Dict

class EventBus:
    """Named game events, one blinker Signal per event name.

    Handlers are called synchronously as ``fn(bus, **payload)``, so every
    notification lands before the emitting engine call returns.
    """
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong refs: listener bindings and lambdas are often not held anywhere else.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                    # payload: dt=float


# ============================================================================
# MOVE INTAKE
# ============================================================================
EVENT_MOVE_REQUEST = "move_request"                    # payload: row, col, player_id
EVENT_MOVE_ACCEPTED = "move_accepted"                  # payload: row, col, player_id, pieces_added=int
EVENT_MOVE_REJECTED = "move_rejected"                  # payload: row, col, player_id, reason=MoveRejection


# ============================================================================
# BOARD & CHAIN REACTION
# ============================================================================
EVENT_STATE_CHANGED = "state_changed"                  # payload: reason=str
EVENT_EXPLOSION_STARTED = "explosion_started"          # payload: row, col, owner_id
EVENT_EXPLOSION_SEQUENCE_COMPLETED = "explosion_sequence_completed"  # payload: steps=int


# ============================================================================
# TURN SYSTEM
# ============================================================================
EVENT_TURN_ADVANCED = "turn_advanced"                  # payload: previous_player=int, new_player=int


# ============================================================================
# ELIMINATION & GAME OVER
# ============================================================================
EVENT_PLAYER_ELIMINATED = "player_eliminated"          # payload: player_id
EVENT_GAME_OVER = "game_over"                          # payload: winner_id=int|None
