"""Event-source models used by the table layout engine.

The layout engine never talks to a browser directly. It is driven through:

* ``EventTarget``: a per-event listener registry standing in for ``document``
  or ``window``;
* ``FrameScheduler``: "run this callback at the next paint frame";
* ``LatestValueMailbox``: a one-slot mailbox that keeps only the newest value
  posted since the last drain.
"""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Deque, Dict, Generic, List, Optional, Protocol, TypeVar

T = TypeVar("T")

EventListener = Callable[[Any], None]


class EventTarget:
    """Listener registry keyed by event name.

    Adding the same listener twice for an event is a no-op, matching DOM
    ``addEventListener`` semantics.
    """

    def __init__(self, name: str = "target") -> None:
        self.name = name
        self._listeners: Dict[str, List[EventListener]] = {}

    def add_listener(self, event: str, listener: EventListener) -> None:
        listeners = self._listeners.setdefault(event, [])
        if listener not in listeners:
            listeners.append(listener)

    def remove_listener(self, event: str, listener: EventListener) -> None:
        listeners = self._listeners.get(event)
        if listeners and listener in listeners:
            listeners.remove(listener)
            if not listeners:
                del self._listeners[event]

    def listener_count(self, event: Optional[str] = None) -> int:
        if event is not None:
            return len(self._listeners.get(event, []))
        return sum(len(v) for v in self._listeners.values())

    def dispatch(self, event: str, payload: Any = None) -> None:
        # copy: listeners may detach themselves while handling the event
        for listener in list(self._listeners.get(event, [])):
            listener(payload)


class FrameScheduler(Protocol):
    def request_frame(self, callback: Callable[[], None]) -> None:
        ...


class ManualFrameScheduler:
    """Frame scheduler driven explicitly by the host (or a test).

    Callbacks requested during a frame run on the following frame.
    """

    def __init__(self) -> None:
        self._queue: Deque[Callable[[], None]] = deque()

    def request_frame(self, callback: Callable[[], None]) -> None:
        self._queue.append(callback)

    @property
    def pending(self) -> int:
        return len(self._queue)

    def run_frame(self) -> int:
        """Run every callback queued before this frame; return how many ran."""
        batch = list(self._queue)
        self._queue.clear()
        for callback in batch:
            callback()
        return len(batch)


class ImmediateFrameScheduler:
    """Runs the callback synchronously. For hosts without a paint loop."""

    def request_frame(self, callback: Callable[[], None]) -> None:
        callback()


class LatestValueMailbox(Generic[T]):
    """One-slot mailbox: ``post`` overwrites, ``take`` empties."""

    _EMPTY = object()

    def __init__(self) -> None:
        self._value: Any = self._EMPTY
        self.overwritten = 0

    def post(self, value: T) -> None:
        if self._value is not self._EMPTY:
            self.overwritten += 1
        self._value = value

    def has_value(self) -> bool:
        return self._value is not self._EMPTY

    def take(self) -> Optional[T]:
        if self._value is self._EMPTY:
            return None
        value = self._value
        self._value = self._EMPTY
        return value

    def clear(self) -> None:
        self._value = self._EMPTY
