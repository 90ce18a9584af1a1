"""
Emitter for the eventful engine.

A host object holds an Emitter and forwards its public operations:

    class Door:
        def __init__(self):
            self.events = Emitter(owner=self)

        def open(self):
            event = self.events.emit("open")
            if not event.is_default_stopped():
                self.is_open = True

Dispatch is synchronous and runs on the caller's thread. Every emit
iterates over a snapshot of the listeners taken when it starts, so
listeners subscribed or unsubscribed while it runs only affect the next
emit. If a listener raises, dispatch stops and the error reaches the
caller.
"""

from __future__ import annotations

import weakref
from typing import Any, Protocol, Tuple

from loguru import logger

from eventful.engine.event import Event
from eventful.engine.event_types import EventTypeRegistry
from eventful.engine.registry import Listener, ListenerRegistry
from eventful.engine.subscription import Subscription


class SupportsEvents(Protocol):
    """
    The surface a host exposes when it forwards to an Emitter.
    """

    def subscribe(self, name: str, callback: Listener) -> Subscription: ...

    def on(self, name: str, callback: Listener) -> Subscription: ...

    def unsubscribe(self, name: str, callback: Listener | None = None) -> None: ...

    def un(self, name: str, callback: Listener | None = None) -> None: ...

    def emit(self, name: str, event_type: Any = None, **fields: Any) -> Event: ...

    def emit_args(self, name: str, *args: Any) -> None: ...


class Emitter:
    """
    Named-event publish/subscribe with cooperative stop flags.

    Listeners are called in the order they subscribed. emit() hands them
    an Event they can stop(); emit_args() hands them raw arguments and
    always reaches every listener.

    owner is held through a weak reference, so it must support one. A
    host class that declares __slots__ has to include "__weakref__" in
    them; otherwise the constructor raises TypeError.
    """

    def __init__(self, owner: Any = None, event_types: EventTypeRegistry | None = None) -> None:
        self._registry = ListenerRegistry()
        self._event_types = event_types if event_types is not None else EventTypeRegistry()
        try:
            self._owner_ref = weakref.ref(owner) if owner is not None else None
        except TypeError as exc:
            raise TypeError(
                f"Emitter owner {type(owner).__qualname__} must support weak references; "
                "add '__weakref__' to its __slots__"
            ) from exc

    @property
    def owner(self) -> Any:
        """
        The object events report as their emitter. Defaults to self.
        """
        if self._owner_ref is None:
            return self
        return self._owner_ref()

    @property
    def event_types(self) -> EventTypeRegistry:
        return self._event_types

    def subscribe(self, name: str, callback: Listener) -> Subscription:
        """
        Add callback to the end of the listener list for name.

        Returns a Subscription that removes this registration when called.
        """
        return self._subscribe(name, callback)

    on = subscribe

    def once(self, name: str, callback: Listener) -> Subscription:
        """
        Subscribe callback for a single delivery.

        The listener removes itself through its handle before callback
        runs, so a reentrant emit from inside callback does not reach it.
        """
        handle: Subscription | None = None

        def listener(*args: Any) -> Any:
            if handle is not None:
                handle()
            return callback(*args)

        handle = self._subscribe(name, listener, target=callback)
        return handle

    def _subscribe(self, name: str, callback: Listener, target: Listener | None = None) -> Subscription:
        if not isinstance(name, str) or not name:
            raise ValueError("Event name must be a non-empty string")

        entry = self._registry.add(name, callback, target)
        logger.debug(f"Subscribed to {name}: {entry.target!r}")
        return Subscription(self._registry, name, entry)

    def unsubscribe(self, name: str, callback: Listener | None = None) -> None:
        """
        Remove callback from name, or every listener of name if no callback.

        Unknown names and callbacks are ignored.
        """
        if callback is None:
            removed = self._registry.clear(name)
        else:
            removed = self._registry.remove_callback(name, callback)

        if removed:
            logger.debug(f"Unsubscribed {removed} listener(s) from {name}")

    un = unsubscribe

    def emit(self, name: str, event_type: Any = None, **fields: Any) -> Event:
        """
        Build an event and deliver it to the listeners of name.

        Args:
            name: Event name
            event_type: None for the base Event, an Event subclass, or the
                        name of a type in this emitter's EventTypeRegistry
            **fields: Extra keyword arguments for the event constructor;
                      "emitter" is reserved, it is always the owner

        Returns:
            The event, so the caller can check is_stopped() and
            is_default_stopped() once dispatch is over.

        Raises:
            ConfigurationError: event_type cannot be resolved
            ValueError: fields contains the reserved "emitter" key
        """
        if "emitter" in fields:
            raise ValueError("'emitter' is reserved and cannot be passed as an event field")

        cls = self._event_types.resolve(event_type)
        event = cls(name, emitter=self.owner, **fields)

        for entry in self._registry.snapshot(name):
            entry.callback(event)
            if event.is_stopped():
                logger.debug(f"Propagation of {name} stopped by {entry.target!r}")
                break

        return event

    def emit_args(self, name: str, *args: Any) -> None:
        """
        Call every listener of name with args.

        No event is built and listeners cannot stop delivery.
        """
        for entry in self._registry.snapshot(name):
            entry.callback(*args)

    def listeners(self, name: str) -> Tuple[Listener, ...]:
        return tuple(entry.target for entry in self._registry.snapshot(name))

    def has_listeners(self, name: str) -> bool:
        return name in self._registry

    def clear(self) -> None:
        """
        Remove every listener of every event.
        """
        removed = self._registry.clear()
        if removed:
            logger.debug(f"Cleared {removed} listener(s)")

    def __repr__(self) -> str:
        return f"Emitter(events={sorted(self._registry.names())})"
