"""Execution backends: the seam where real workloads would be started."""

from dataclasses import dataclass
from typing import Any, Callable, Protocol

from agenthub.models.agent import Agent
from agenthub.models.execution import ExecutionStatus
from agenthub.utils.identifiers import generate_execution_id


@dataclass
class ExecutionHandle:
    """What a backend returns after accepting a submission."""

    execution_id: str
    status: ExecutionStatus


class ExecutionBackend(Protocol):
    """Protocol for anything that can start an agent workload."""

    def submit(self, agent: Agent, input: Any) -> ExecutionHandle:
        """Accept a run of agent with input and return its handle."""
        ...


class AcknowledgingBackend:
    """Acknowledges every submission as running without starting anything.

    A container or job-orchestration backend replaces this class; the
    dispatcher's return contract does not change.
    """

    def __init__(self, id_factory: Callable[[], str] = generate_execution_id) -> None:
        self._id_factory = id_factory

    def submit(self, agent: Agent, input: Any) -> ExecutionHandle:
        return ExecutionHandle(
            execution_id=self._id_factory(),
            status=ExecutionStatus.running,
        )


class RecordingBackend(AcknowledgingBackend):
    """Acknowledging backend that also keeps every submission in a list."""

    def __init__(self, id_factory: Callable[[], str] = generate_execution_id) -> None:
        super().__init__(id_factory)
        self.submissions: list[tuple[Agent, Any]] = []

    def submit(self, agent: Agent, input: Any) -> ExecutionHandle:
        self.submissions.append((agent, input))
        return super().submit(agent, input)
