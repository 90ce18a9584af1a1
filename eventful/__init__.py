"""
eventful: in-process, synchronous named events for host objects.

A host holds an Emitter and forwards subscribe/on, unsubscribe/un, emit
and emit_args to it. The package provides:
- Emitter
- Event
- Subscription
- EventTypeRegistry

Log records are emitted through loguru and are disabled by default;
call logger.enable("eventful") to see them.
"""

from loguru import logger

from eventful.engine.emitter import Emitter, SupportsEvents
from eventful.engine.errors import ConfigurationError, EventfulError
from eventful.engine.event import Event
from eventful.engine.event_types import EventTypeRegistry
from eventful.engine.subscription import Subscription

logger.disable("eventful")

__all__ = [
    "ConfigurationError",
    "Emitter",
    "Event",
    "EventTypeRegistry",
    "EventfulError",
    "Subscription",
    "SupportsEvents",
]
