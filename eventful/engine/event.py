"""
Event objects handed to listeners by Emitter.emit().

An event is a small propagation-control value. It carries the name it
was emitted under, a weak back-reference to whatever emitted it, and two
flags that listeners may raise:

- stopped: no further listeners are called for this emit
- default-stopped: the emitting code should skip its default action

Both flags only ever go from False to True.
"""

from __future__ import annotations

import weakref
from typing import Any


class Event:
    """
    Base event type.

    Custom event types subclass this and add their own keyword fields:

        class OpenEvent(Event):
            def __init__(self, name, emitter=None, path=""):
                super().__init__(name, emitter)
                self.path = path

    Subclasses must leave name, emitter and the four flag methods alone.
    """

    def __init__(self, name: str, emitter: Any = None) -> None:
        self._name = name
        self._emitter_ref = weakref.ref(emitter) if emitter is not None else None
        self._stopped: bool = False
        self._default_stopped: bool = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def emitter(self) -> Any:
        """
        The object that emitted this event.

        Held weakly, so this is None once the emitter has been collected.
        """
        if self._emitter_ref is None:
            return None
        return self._emitter_ref()

    def stop(self) -> None:
        """
        Stop calling listeners for the current emit.

        Listeners that already ran are not affected.
        """
        self._stopped = True

    def stop_default(self) -> None:
        """
        Ask the emitting code to skip its default action.

        Does not affect which listeners are called.
        """
        self._default_stopped = True

    def is_stopped(self) -> bool:
        return self._stopped

    def is_default_stopped(self) -> bool:
        return self._default_stopped

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self._name!r}, "
            f"stopped={self._stopped}, default_stopped={self._default_stopped})"
        )
