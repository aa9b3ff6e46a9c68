from __future__ import annotations

import logging
from typing import Callable, Generic, List, TypeVar

logger = logging.getLogger(__name__)

S = TypeVar("S")

Listener = Callable[[S], None]
Unsubscribe = Callable[[], None]


class StateNotifier(Generic[S]):
    """
    Explicit change subscription for the session manager and layout engine.

    Subclasses implement `get_state()` returning an immutable snapshot and call
    `_publish()` after every mutation; listeners only run when the snapshot differs
    from the last published one.
    """

    def __init__(self) -> None:
        self._listeners: List[Listener] = []
        self._last_published = None

    def get_state(self) -> S:
        raise NotImplementedError()

    def on_change(self, listener: Listener) -> Unsubscribe:
        """
        Subscribe to state changes.
        :param listener: called with the new state snapshot
        :return: a callable that removes the listener (safe to call twice)
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self) -> None:
        state = self.get_state()
        if state == self._last_published:
            return
        self._last_published = state

        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("State listener %r failed", listener)
