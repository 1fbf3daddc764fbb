from __future__ import annotations

import itertools
from typing import Any

from .interfaces import Disposer, StoreListener


class ListenerRegistry:
    """
    Insertion-ordered observer list for store events.

    Every add() gets its own handle, so the same callable may be registered
    more than once and each registration is disposed independently.
    """

    def __init__(self) -> None:
        self._handles = itertools.count()
        self._listeners: dict[int, StoreListener] = {}

    def __len__(self) -> int:
        return len(self._listeners)

    def add(self, listener: StoreListener) -> Disposer:
        handle = next(self._handles)
        self._listeners[handle] = listener

        def dispose() -> None:
            self._listeners.pop(handle, None)

        return dispose

    def notify(self, key: str, old_value: Any, new_value: Any) -> None:
        # Snapshot: (un)registrations made by a listener apply from the next event.
        for listener in list(self._listeners.values()):
            listener(key, old_value, new_value)
