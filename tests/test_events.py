import pytest

from kenjikit.events import (
    Event,
    EventManager,
    EventType,
    MouseClickData,
    MouseMoveData,
)


def _click(x, y):
    return Event(EventType.MOUSE_CLICK, MouseClickData(0, 1, x, y))


def _move(x, y):
    return Event(EventType.MOUSE_MOVE, MouseMoveData(x, y))


def test_new_manager_is_empty():
    manager = EventManager()
    assert manager.has_event() is False
    assert len(manager) == 0


def test_events_come_out_in_order():
    manager = EventManager()
    first, second, third = _click(1, 2), _move(3, 4), _click(5, 6)
    for event in (first, second, third):
        manager.push_event(event)
    assert len(manager) == 3
    assert [manager.pull_event() for _ in range(3)] == [first, second, third]
    assert manager.has_event() is False


def test_pull_returns_event_data():
    manager = EventManager()
    manager.push_event(_move(10, 20))
    event = manager.pull_event()
    assert event.event_type is EventType.MOUSE_MOVE
    assert (event.data.x, event.data.y) == (10, 20)


def test_clear_events():
    manager = EventManager()
    manager.push_event(_click(0, 0))
    manager.push_event(_move(1, 1))
    manager.clear_events()
    assert len(manager) == 0
    assert manager.has_event() is False


def test_pull_from_empty_raises():
    with pytest.raises(IndexError):
        EventManager().pull_event()


def test_event_types_keep_declaration_order():
    assert EventType(0) is EventType.MOUSE_CLICK
    assert EventType(1) is EventType.MOUSE_MOVE
    assert list(EventType) == [EventType(0), EventType(1), EventType(2)]