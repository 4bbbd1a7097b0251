from dataclasses import dataclass, field

from chainreaction.components.explosion_queue import ExplosionQueue


@dataclass(slots=True)
class TurnState:
    """Tracks chain-reaction state shared across systems."""

    resolving_chain: bool = False
    chain_steps: int = 0
    queue: ExplosionQueue = field(default_factory=ExplosionQueue)
