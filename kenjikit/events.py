"""Mouse events and a first-in, first-out queue of them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum


class EventType(Enum):
    """Kinds of incoming events."""

    MOUSE_CLICK = 0
    MOUSE_MOVE = 1
    MOUSE_DRAG = 2


@dataclass(frozen=True)
class MouseClickData:
    """A mouse button changed state at (x, y), relative to the window's top left."""

    button: int
    state: int
    x: int
    y: int


@dataclass(frozen=True)
class MouseMoveData:
    """The cursor is at (x, y), relative to the window's top left."""

    x: int
    y: int


@dataclass(frozen=True)
class Event:
    """An event and its data."""

    event_type: EventType
    data: MouseClickData | MouseMoveData


class EventManager:
    """Holds incoming events until they are pulled, oldest first."""

    def __init__(self) -> None:
        self._queue: deque[Event] = deque()

    def has_event(self) -> bool:
        """Return whether at least one event is waiting."""
        return bool(self._queue)

    def push_event(self, event: Event) -> None:
        """Add an event to the back of the queue."""
        self._queue.append(event)

    def pull_event(self) -> Event:
        """Remove and return the oldest event; raise IndexError if there is none."""
        if not self._queue:
            raise IndexError("no event to pull")
        return self._queue.popleft()

    def clear_events(self) -> None:
        """Drop every waiting event."""
        self._queue.clear()

    def __len__(self) -> int:
        return len(self._queue)