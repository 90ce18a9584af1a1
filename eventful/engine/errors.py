"""
Exceptions raised by the eventful engine.

Normal subscribe, unsubscribe and dispatch have no error path. The only
failures the engine reports itself are configuration problems: an event
type that cannot be resolved or a malformed event-type table.
"""


class EventfulError(Exception):
    """Base class for errors raised by eventful."""


class ConfigurationError(EventfulError):
    """
    An event type selector or event-type table could not be resolved.

    Raised synchronously to the caller, before any listener runs.
    """
