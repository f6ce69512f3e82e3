"""Shared fixtures for the Wins & Losses tests."""

import os
from datetime import datetime, timedelta

import pytest

from winsandlosses.storage import MemoryStore

# Wednesday; the calendar week runs Mon 2024-05-13 to Sun 2024-05-19
NOW = datetime(2024, 5, 15, 12, 0)


class FixedClock:
    """Callable clock that tests can move around."""

    def __init__(self, now: datetime = NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture(scope="session", autouse=True)
def isolated_config(tmp_path_factory):
    """Keep tests away from the real user config file."""
    path = tmp_path_factory.mktemp("config") / "config.toml"
    previous = os.environ.get("WINSANDLOSSES_CONFIG")
    os.environ["WINSANDLOSSES_CONFIG"] = str(path)
    yield path
    if previous is None:
        os.environ.pop("WINSANDLOSSES_CONFIG", None)
    else:
        os.environ["WINSANDLOSSES_CONFIG"] = previous
