from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Optional

@dataclass(frozen=True, slots=True)
class ExplosionEvent:
    """Cell to detonate and the player whose pieces it redistributes."""
    row: int
    col: int
    owner_id: Optional[int]


@dataclass(slots=True)
class ExplosionQueue:
    """FIFO of pending detonations for the running chain reaction."""
    events: Deque[ExplosionEvent] = field(default_factory=deque)
    peak_length: int = 0

    def push(self, event: ExplosionEvent) -> None:
        self.events.append(event)
        if len(self.events) > self.peak_length:
            self.peak_length = len(self.events)

    def pop(self) -> ExplosionEvent:
        return self.events.popleft()

    def clear(self) -> None:
        self.events.clear()
        self.peak_length = 0

    def __len__(self) -> int:
        return len(self.events)
