"""
Event dispatch engine: listener registry, subscription handles, events.
"""

from eventful.engine.emitter import Emitter, SupportsEvents
from eventful.engine.errors import ConfigurationError, EventfulError
from eventful.engine.event import Event
from eventful.engine.event_types import EventTypeRegistry
from eventful.engine.registry import ListenerEntry, ListenerRegistry
from eventful.engine.subscription import Subscription

__all__ = [
    "ConfigurationError",
    "Emitter",
    "Event",
    "EventTypeRegistry",
    "EventfulError",
    "ListenerEntry",
    "ListenerRegistry",
    "Subscription",
    "SupportsEvents",
]
