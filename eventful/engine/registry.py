"""
Listener registry for the eventful engine.

Maps event names to ordered lists of listener entries. The registry does
not call listeners; it only stores them and hands out snapshots for the
emitter to iterate over.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any, Dict, List, Tuple

Listener = Callable[..., Any]


def same_callback(registered: Listener, candidate: Listener) -> bool:
    """
    Identity match between two callbacks.

    Bound methods are rebuilt on every attribute access, so two bound
    methods match when they wrap the same function on the same instance.
    """
    if registered is candidate:
        return True
    if inspect.ismethod(registered) and inspect.ismethod(candidate):
        return (
            registered.__self__ is candidate.__self__
            and registered.__func__ is candidate.__func__
        )
    return False


class ListenerEntry:
    """
    One registration of a callback under an event name.

    Subscribing the same callback twice creates two entries. target is
    the callback the subscriber knows about when callback wraps it (see
    Emitter.once), and is what unsubscribe matches against.
    """

    __slots__ = ("callback", "target", "__weakref__")

    def __init__(self, callback: Listener, target: Listener | None = None) -> None:
        self.callback = callback
        self.target = target if target is not None else callback

    def __repr__(self) -> str:
        return f"ListenerEntry({self.callback!r})"


class ListenerRegistry:
    """
    Ordered listener storage keyed by event name.

    Removing entries never reorders the survivors. Names whose list
    becomes empty are dropped.
    """

    def __init__(self) -> None:
        self._listeners: Dict[str, List[ListenerEntry]] = {}

    def add(self, name: str, callback: Listener, target: Listener | None = None) -> ListenerEntry:
        entry = ListenerEntry(callback, target)
        self._listeners.setdefault(name, []).append(entry)
        return entry

    def discard(self, name: str, entry: ListenerEntry) -> bool:
        """
        Remove exactly this entry. Returns False if it was not registered.
        """
        entries = self._listeners.get(name)
        if not entries:
            return False

        for index, candidate in enumerate(entries):
            if candidate is entry:
                del entries[index]
                if not entries:
                    del self._listeners[name]
                return True

        return False

    def remove_callback(self, name: str, callback: Listener) -> int:
        """
        Remove every entry under name whose callback is callback.

        Returns the number of entries removed.
        """
        entries = self._listeners.get(name)
        if not entries:
            return 0

        kept = [e for e in entries if not same_callback(e.target, callback)]
        removed = len(entries) - len(kept)

        if kept:
            # Mutate in place so the list object stays the one stored here
            entries[:] = kept
        else:
            del self._listeners[name]

        return removed

    def clear(self, name: str | None = None) -> int:
        """
        Drop the listeners for one name, or for every name if none given.

        Returns the number of entries removed.
        """
        if name is None:
            removed = sum(len(entries) for entries in self._listeners.values())
            self._listeners.clear()
            return removed

        return len(self._listeners.pop(name, []))

    def snapshot(self, name: str) -> Tuple[ListenerEntry, ...]:
        """
        Return the current entries for name as an immutable tuple.
        """
        return tuple(self._listeners.get(name, ()))

    def contains(self, name: str, entry: ListenerEntry) -> bool:
        return any(candidate is entry for candidate in self._listeners.get(name, ()))

    def names(self) -> List[str]:
        return list(self._listeners)

    def __contains__(self, name: object) -> bool:
        return name in self._listeners

    def __len__(self) -> int:
        return len(self._listeners)
