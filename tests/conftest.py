# tests/conftest.py

import json

import pytest

from core.config import STORAGE_KEY
from core.controller import RosterController
from core.notifications import NotificationKind
from core.storage import MemoryStorage
from models.record_store import RecordStore
from models.student_record import StudentRecord


class RecordingNotifier:
    def __init__(self):
        self.messages: list[tuple[str, NotificationKind]] = []

    def notify(self, message, kind):
        self.messages.append((message, kind))

    def kinds(self):
        return [kind for _, kind in self.messages]


class RecordingRenderer:
    def __init__(self):
        self.renders: list[tuple] = []

    def render_all(self, records):
        self.renders.append(tuple(records))

    @property
    def last(self):
        return self.renders[-1] if self.renders else None


class CountingStorage(MemoryStorage):
    def __init__(self, initial=None):
        super().__init__(initial)
        self.writes = 0

    def set_item(self, key, value):
        self.writes += 1
        super().set_item(key, value)


class FailingStorage(MemoryStorage):
    def __init__(self, initial=None, fail_reads=False, fail_writes=True):
        super().__init__(initial)
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes

    def get_item(self, key):
        if self.fail_reads:
            raise OSError("storage unavailable")
        return super().get_item(key)

    def set_item(self, key, value):
        if self.fail_writes:
            raise OSError("quota exceeded")
        super().set_item(key, value)


def stored_payload(storage, key=STORAGE_KEY):
    return json.loads(storage.get_item(key))


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def storage():
    return CountingStorage()


@pytest.fixture
def store(storage, notifier):
    return RecordStore(storage, notifier)


@pytest.fixture
def controller(store, notifier, renderer):
    return RosterController(store, notifier, renderer)


@pytest.fixture
def sample_record():
    return StudentRecord("Ana", 7, 8, 9)


@pytest.fixture
def sample_failing_record():
    return StudentRecord("Bruno", 4, 5, 3)


@pytest.fixture
def populated_store(store, sample_record, sample_failing_record):
    store.append(sample_record)
    store.append(sample_failing_record)
    return store
