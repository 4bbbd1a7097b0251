"""Single-listener contract consumed by rendering and UI collaborators."""
from __future__ import annotations

from typing import Optional, Protocol

from chainreaction.events.bus import (
    EventBus,
    EVENT_EXPLOSION_SEQUENCE_COMPLETED,
    EVENT_EXPLOSION_STARTED,
    EVENT_GAME_OVER,
    EVENT_PLAYER_ELIMINATED,
    EVENT_STATE_CHANGED,
)


class GameListener(Protocol):
    def on_state_changed(self) -> None: ...

    def on_explosion_started(self, row: int, col: int) -> None: ...

    def on_explosion_completed(self) -> None: ...

    def on_player_eliminated(self, player_id: int) -> None: ...

    def on_game_over(self, winner_id: Optional[int]) -> None: ...


class ListenerBinding:
    """Routes bus events to one listener object until detached."""

    def __init__(self, event_bus: EventBus, listener: GameListener) -> None:
        self.event_bus = event_bus
        self.listener = listener
        self._handlers = {
            EVENT_STATE_CHANGED: self._on_state_changed,
            EVENT_EXPLOSION_STARTED: self._on_explosion_started,
            EVENT_EXPLOSION_SEQUENCE_COMPLETED: self._on_explosion_completed,
            EVENT_PLAYER_ELIMINATED: self._on_player_eliminated,
            EVENT_GAME_OVER: self._on_game_over,
        }
        for name, handler in self._handlers.items():
            event_bus.subscribe(name, handler)

    def detach(self) -> None:
        for name, handler in self._handlers.items():
            self.event_bus.unsubscribe(name, handler)

    def _on_state_changed(self, sender, **payload) -> None:
        self.listener.on_state_changed()

    def _on_explosion_started(self, sender, **payload) -> None:
        self.listener.on_explosion_started(payload["row"], payload["col"])

    def _on_explosion_completed(self, sender, **payload) -> None:
        self.listener.on_explosion_completed()

    def _on_player_eliminated(self, sender, **payload) -> None:
        self.listener.on_player_eliminated(payload["player_id"])

    def _on_game_over(self, sender, **payload) -> None:
        self.listener.on_game_over(payload.get("winner_id"))
