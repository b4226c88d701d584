from __future__ import annotations

from datetime import datetime

import pytest

from college_attendance import create_app
from college_attendance.common.ids import MillisecondIdSource
from college_attendance.container import build_container
from college_attendance.storage.store import InMemoryKeyValueStore


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 3, 10, 9, 15, 0)


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def ids() -> MillisecondIdSource:
    # frozen clock: ids come out as consecutive integers
    return MillisecondIdSource(clock=lambda: 1_700_000_000.0)


@pytest.fixture
def container(store, ids):
    return build_container(store=store, ids=ids)


@pytest.fixture
def app(container):
    return create_app("college_attendance.settings.testing", container=container)


@pytest.fixture
def client(app):
    return app.test_client()
