import pytest

from mvc.model import BaggageHandler
from notifier.observer import IObserver
from sinks.capture import CaptureSink


class RecordingObserver(IObserver):
    """Observer that only remembers what it was sent."""
    def __init__(self):
        self.records = []
        self.completed = 0

    def on_record(self, record):
        self.records.append(record)

    def on_complete(self):
        self.completed += 1


@pytest.fixture
def handler():
    return BaggageHandler()


@pytest.fixture
def sink():
    return CaptureSink()


@pytest.fixture
def recorder():
    return RecordingObserver()
