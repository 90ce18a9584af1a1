"""
Subscription handles returned by Emitter.subscribe().

A handle removes the one listener entry it was created for, once.
Calling it again is a no-op. The handle only refers weakly to the
registry and the entry, so a listener that reads its own handle (for
example to unsubscribe after its first call) does not keep itself or
the emitter alive through a reference cycle.
"""

from __future__ import annotations

import weakref

from loguru import logger

from eventful.engine.registry import Listener, ListenerEntry, ListenerRegistry


class Subscription:
    """
    Single-shot, idempotent removal token for one listener entry.

        handle = emitter.on("open", listener)
        handle()   # removes listener
        handle()   # does nothing
    """

    def __init__(self, registry: ListenerRegistry, name: str, entry: ListenerEntry) -> None:
        self._name = name
        self._registry_ref: weakref.ref[ListenerRegistry] | None = weakref.ref(registry)
        self._entry_ref: weakref.ref[ListenerEntry] | None = weakref.ref(entry)

    @property
    def name(self) -> str:
        return self._name

    @property
    def active(self) -> bool:
        """
        True while the bound entry is still registered.
        """
        registry, entry = self._resolve()
        if registry is None or entry is None:
            return False
        return registry.contains(self._name, entry)

    @property
    def callback(self) -> Listener | None:
        registry, entry = self._resolve()
        if registry is None or entry is None:
            return None
        if not registry.contains(self._name, entry):
            return None
        return entry.target

    def cancel(self) -> bool:
        """
        Remove the bound entry.

        Returns True if this call removed it, False if it was already gone.
        """
        registry, entry = self._resolve()

        # Whatever happens below, this handle is spent
        self._registry_ref = None
        self._entry_ref = None

        if registry is None or entry is None:
            return False

        removed = registry.discard(self._name, entry)
        if removed:
            logger.debug(f"Subscription cancelled for {self._name}: {entry.target!r}")
        return removed

    __call__ = cancel

    def _resolve(self) -> tuple[ListenerRegistry | None, ListenerEntry | None]:
        registry = self._registry_ref() if self._registry_ref is not None else None
        entry = self._entry_ref() if self._entry_ref is not None else None
        return registry, entry

    def __repr__(self) -> str:
        state = "active" if self.active else "inactive"
        return f"Subscription(name={self._name!r}, {state})"
