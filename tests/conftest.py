"""Test configuration and fixtures."""

import sys
import textwrap
from pathlib import Path

import pytest
from loguru import logger

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from eventful.engine.emitter import Emitter  # noqa: E402


@pytest.fixture
def emitter() -> Emitter:
    """Fresh emitter with no owner."""
    return Emitter()


@pytest.fixture
def call_log() -> list:
    """Shared list listeners append to."""
    return []


@pytest.fixture
def log_records():
    """Enable eventful logging and capture messages for the test."""
    records: list[str] = []
    logger.enable("eventful")
    sink_id = logger.add(lambda message: records.append(message.record["message"]), level="DEBUG")

    yield records

    logger.remove(sink_id)
    logger.disable("eventful")


@pytest.fixture
def custom_events_module(tmp_path, monkeypatch) -> str:
    """Write an importable module of Event subclasses and return its name."""
    module_name = "eventful_sample_events"
    source = textwrap.dedent(
        """
        from eventful.engine.event import Event


        class OpenEvent(Event):
            def __init__(self, name, emitter=None, path=""):
                super().__init__(name, emitter)
                self.path = path


        class CloseEvent(Event):
            def __init__(self, name, emitter=None, force=False):
                super().__init__(name, emitter)
                self.force = force


        class NotAnEvent:
            pass
        """
    )
    (tmp_path / f"{module_name}.py").write_text(source, encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    return module_name
