from chainreaction.components.turn_order import TurnOrder


def test_advance_wraps_in_seat_order():
    order = TurnOrder(seats=[0, 1, 2])
    order.advance(lambda seat: True)
    assert order.current() == 1
    order.advance(lambda seat: True)
    order.advance(lambda seat: True)
    assert order.current() == 0


def test_advance_skips_inactive_seats():
    order = TurnOrder(seats=[0, 1, 2, 3])
    inactive = {1, 2}
    order.advance(lambda seat: seat not in inactive)
    assert order.current() == 3
    order.advance(lambda seat: seat not in inactive)
    assert order.current() == 0


def test_advance_stops_when_scan_returns_to_start():
    order = TurnOrder(seats=[0, 1, 2], index=1)
    order.advance(lambda seat: False)
    assert order.current() == 1


def test_empty_order_has_no_current():
    order = TurnOrder()
    order.advance(lambda seat: True)
    assert order.current() is None
