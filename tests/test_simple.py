"""Simple test to verify the package imports."""

from eventful import ConfigurationError, Emitter, Event, EventTypeRegistry, Subscription


def test_import_eventful():
    """Test that the package exports its public names."""
    assert Emitter is not None
    assert issubclass(Event, object)
    assert EventTypeRegistry is not None
    assert Subscription is not None
    assert issubclass(ConfigurationError, Exception)
