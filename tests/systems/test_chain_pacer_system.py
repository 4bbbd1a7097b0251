from chainreaction.engine import Engine
from chainreaction.events.bus import EVENT_EXPLOSION_STARTED

from tests.helpers import capture_events, play


def test_ticks_pace_detonations():
    engine = Engine(3, 3, auto_resolve=False, step_delay=0.3)
    try:
        started = capture_events(engine.event_bus, [EVENT_EXPLOSION_STARTED])
        play(engine, [(0, 0), (2, 2), (0, 0)])
        assert engine.is_resolving_chain

        engine.tick(0.1)
        assert started == []
        assert engine.is_resolving_chain

        engine.tick(0.25)
        assert len(started) == 1
        assert not engine.is_resolving_chain
        assert engine.current_player_id == 1
    finally:
        engine.close()


def test_ticks_without_chain_do_nothing():
    engine = Engine(3, 3, auto_resolve=False, step_delay=0.3)
    try:
        engine.tick(5.0)
        play(engine, [(0, 0), (2, 2), (0, 0)])
        # Idle ticks do not bank time towards the next step.
        assert engine.is_resolving_chain
    finally:
        engine.close()
