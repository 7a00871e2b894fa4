import pytest

from relaylog import core
from relaylog.config import get_settings
from relaylog.formatters import ConsoleFormatter
from relaylog.loggers import StdlibLogging
from relaylog.sinks import BaseSink


class RecordingSink(BaseSink):
    """Sink keeping every processed event dict in memory."""

    def __init__(self):
        self.events = []
        self.closed = False

    def emit(self, event_dict):
        self.events.append(dict(event_dict))

    def close(self):
        self.closed = True


@pytest.fixture
def recording_sink():
    return RecordingSink()


@pytest.fixture(autouse=True)
def isolate_global_logging(monkeypatch):
    """
    Restore the process-wide factory, cached settings and console formatter
    columns after every test.
    """
    monkeypatch.setattr(core, "_logging", StdlibLogging())
    for attr in ("TIMESTAMP_FORMAT", "TIMESTAMP_WIDTH", "LEVEL_WIDTH", "LOGGER_WIDTH", "SEPARATOR"):
        monkeypatch.setattr(ConsoleFormatter, attr, getattr(ConsoleFormatter, attr))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
