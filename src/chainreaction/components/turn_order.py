from dataclasses import dataclass, field
from typing import Callable, List

@dataclass(slots=True)
class TurnOrder:
    """Stores seat order of player ids and the current index."""
    seats: List[int] = field(default_factory=list)
    index: int = 0

    def current(self) -> int | None:
        if not self.seats:
            return None
        return self.seats[self.index % len(self.seats)]

    def advance(self, is_active: Callable[[int], bool]) -> None:
        """Move to the next active seat, giving up once the scan wraps to where it started."""
        if not self.seats:
            return
        original = self.index
        while True:
            self.index = (self.index + 1) % len(self.seats)
            if self.index == original:
                break
            if is_active(self.seats[self.index]):
                break
