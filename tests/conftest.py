from __future__ import annotations

import os
from datetime import datetime

import pytest

os.environ["APP_ENV"] = "testing"

from attendance_tracker import create_app  # noqa: E402
from attendance_tracker.container import build_container  # noqa: E402


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 8, 30, 0)


@pytest.fixture
def clock(fixed_now) -> FakeClock:
    return FakeClock(fixed_now)


@pytest.fixture
def container(clock):
    return build_container(storage_backend="memory", seed_demo=True, clock=clock)


@pytest.fixture
def app(container):
    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()
