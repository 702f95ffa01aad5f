"""Shared fixtures for agent hub tests."""

import itertools
import os

# keep the module-level app from touching the on-disk database
os.environ.setdefault("AGENT_STORE", "memory")

import pytest

from agenthub.adapters.stores import MemoryStore
from agenthub.dispatch import ExecutionDispatcher, RecordingBackend
from agenthub.registry import AgentRegistry
from server.agent_db import SqliteAgentStore


class TickingClock:
    """Deterministic clock returning strictly increasing ISO timestamps."""

    def __init__(self) -> None:
        self._ticks = itertools.count()

    def __call__(self) -> str:
        second = next(self._ticks)
        return f"2024-01-01T00:{second // 60:02d}:{second % 60:02d}+00:00"


@pytest.fixture(params=["memory", "sqlite"])
def store(request, tmp_path):
    """Each registry, dispatcher and API test runs against both stores."""
    if request.param == "memory":
        return MemoryStore()
    return SqliteAgentStore(tmp_path / "agents.db")


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def registry(store, clock) -> AgentRegistry:
    return AgentRegistry(store, clock=clock)


@pytest.fixture
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def dispatcher(registry, backend, clock) -> ExecutionDispatcher:
    return ExecutionDispatcher(registry, backend, clock=clock)
