# Copyright (c) 2025 The Existential Crisis Companion Authors
# This file is part of the Existential Crisis Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


import copy
from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from companion.main import app
from companion.utils.rate_limit_utils import limiter


# ---------------------- FAKES ----------------------

class FakeStore:
    """In-memory stand-in for the Realtime Database: {collection: {key: record}}."""

    def __init__(self, data=None):
        self.data = data if data is not None else {}
        self.writes = []
        self.deletes = []
        self.fail_reads = False
        self.fail_writes = False
        self.fail_deletes = False

    def write(self, path, record):
        if self.fail_writes:
            raise ConnectionError("store unavailable")
        collection, key = path.split("/", 1)
        self.writes.append((path, record))
        self.data.setdefault(collection, {})[key] = copy.deepcopy(record)

    def read_all(self, path):
        if self.fail_reads:
            raise ConnectionError("store unavailable")
        value = self.data.get(path)
        return copy.deepcopy(value) if value else None

    def delete(self, path):
        if self.fail_deletes:
            raise ConnectionError("store unavailable")
        collection, key = path.split("/", 1)
        self.deletes.append(path)
        self.data.get(collection, {}).pop(key, None)


class FakeClock:
    def __init__(self, start=None, step=timedelta(seconds=1)):
        self.now = start or datetime(2025, 3, 14, 9, 30, 0)
        self.step = step

    def __call__(self):
        current = self.now
        self.now = self.now + self.step
        return current


class FakePlayer:
    def __init__(self, fail=False):
        self.volume = 1.0
        self.playing = False
        self.fail = fail

    def play(self):
        if self.fail:
            raise OSError("media unavailable")
        self.playing = True

    def pause(self):
        self.playing = False


# ---------------------- FIXTURES ----------------------

@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def api_client():
    limiter.reset()
    app.dependency_overrides.clear()
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def frozen_clock():
    return FakeClock(step=timedelta(0))


@pytest.fixture
def players():
    return {"forest": FakePlayer(), "wave": FakePlayer(), "rain": FakePlayer()}
