"""
Event type table for the eventful engine.

Emitter.emit() can build a custom Event subclass instead of the base
Event. Which classes are available is decided up front: classes are
registered by name here, checked when they are registered, and looked
up by name at emit time. Nothing is imported or reflected on during
dispatch.

The table can be loaded from a YAML document:

    event_types:
      open: "myapp.events:OpenEvent"
      close: "myapp.events:CloseEvent"
"""

from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any, Dict, List, Mapping

import yaml
from loguru import logger

from eventful.engine.errors import ConfigurationError
from eventful.engine.event import Event

EventType = type[Event]


def import_event_type(path: str) -> EventType:
    """
    Import "package.module:ClassName" and return the class.
    """
    module_name, sep, attr = path.partition(":")
    if not sep or not module_name or not attr:
        raise ConfigurationError(
            f"Event type path must look like 'package.module:ClassName', got {path!r}"
        )

    try:
        module = importlib.import_module(module_name)
    except Exception as exc:
        raise ConfigurationError(
            f"Could not import module {module_name!r} for event type {path!r}: {exc}"
        ) from exc

    target: Any = module
    for part in attr.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise ConfigurationError(
                f"Module {module_name!r} has no attribute {attr!r}"
            ) from exc

    return target


class EventTypeRegistry:
    """
    Name to Event subclass lookup used to resolve emit() type selectors.
    """

    def __init__(self) -> None:
        self._types: Dict[str, EventType] = {}

    def register(self, name: str, event_type: Any) -> None:
        """
        Register event_type under name.

        Raises ConfigurationError if event_type is not an Event subclass.
        """
        if not isinstance(name, str) or not name:
            raise ConfigurationError("Event type name must be a non-empty string")

        if not isinstance(event_type, type) or not issubclass(event_type, Event):
            raise ConfigurationError(
                f"Event type {name!r} must be a subclass of Event, got {event_type!r}"
            )

        self._types[name] = event_type
        logger.debug(f"Registered event type {name}: {event_type.__qualname__}")

    def register_path(self, name: str, path: str) -> None:
        """
        Import the class at "package.module:ClassName" and register it.
        """
        if not isinstance(path, str):
            raise ConfigurationError(
                f"Event type {name!r} must be given as an import path string, got {path!r}"
            )
        self.register(name, import_event_type(path))

    def resolve(self, selector: Any = None) -> EventType:
        """
        Turn an emit() type selector into a class.

        - None selects the base Event
        - an Event subclass selects itself
        - a string selects the class registered under that name
        """
        if selector is None:
            return Event

        if isinstance(selector, type):
            if issubclass(selector, Event):
                return selector
            raise ConfigurationError(
                f"Event type {selector.__qualname__} is not a subclass of Event"
            )

        if isinstance(selector, str):
            try:
                return self._types[selector]
            except KeyError:
                raise ConfigurationError(
                    f"Unknown event type {selector!r}; registered types: {sorted(self._types)}"
                ) from None

        raise ConfigurationError(f"Cannot resolve event type from {selector!r}")

    def names(self) -> List[str]:
        return list(self._types)

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __len__(self) -> int:
        return len(self._types)

    @classmethod
    def from_mapping(cls, config: Any) -> "EventTypeRegistry":
        """
        Build a registry from a parsed config document.
        """
        if not isinstance(config, Mapping):
            raise ConfigurationError("Event type config must be a mapping (dict)")

        if "event_types" not in config:
            raise ConfigurationError("Event type config is missing an 'event_types' section")

        section = config["event_types"]
        if section is None:
            section = {}
        if not isinstance(section, Mapping):
            raise ConfigurationError("'event_types' must be a mapping of name to import path")

        registry = cls()
        for name, path in section.items():
            registry.register_path(name, path)

        return registry

    @classmethod
    def from_yaml(cls, path: Path | str) -> "EventTypeRegistry":
        """
        Load the event type table from a YAML file.
        """
        path = Path(path)
        try:
            with path.open("r", encoding="utf-8") as fh:
                config = yaml.safe_load(fh)
        except OSError as exc:
            raise ConfigurationError(f"Could not read event type config {path}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Invalid YAML in event type config {path}: {exc}") from exc

        registry = cls.from_mapping(config)
        logger.debug(f"Loaded {len(registry)} event types from {path}")
        return registry
