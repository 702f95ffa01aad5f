"""Execution dispatcher: turns run requests into execution records."""

import logging
from typing import Any, Callable

from agenthub.dispatch.backends import AcknowledgingBackend, ExecutionBackend
from agenthub.models.execution import Execution, RunAgentRequest
from agenthub.registry import AgentRegistry
from agenthub.utils.identifiers import utc_timestamp
from agenthub.utils.validation import parse_payload

logger = logging.getLogger("AGENT_HUB.DISPATCH")


class ExecutionDispatcher:
    """Accepts run requests against existing agents.

    Executions are acknowledged immediately and not persisted. The
    agent record is only read, never written back.
    """

    def __init__(
        self,
        registry: AgentRegistry,
        backend: ExecutionBackend | None = None,
        clock: Callable[[], str] = utc_timestamp,
    ) -> None:
        self.registry = registry
        self.backend = backend or AcknowledgingBackend()
        self._clock = clock

    def run_agent(
        self,
        agent_id: str,
        payload: RunAgentRequest | dict[str, Any] | None = None,
    ) -> Execution:
        """Submit a run of agent_id; raises NotFoundError for unknown agents."""
        request = parse_payload(RunAgentRequest, payload or {})
        agent = self.registry.get_agent(agent_id)
        start_time = self._clock()
        handle = self.backend.submit(agent, request.input)

        execution = Execution(
            execution_id=handle.execution_id,
            agent_id=agent.id,
            agent_name=agent.name,
            status=handle.status,
            start_time=start_time,
            input=request.input,
            message=f"Agent {agent.name} execution started successfully",
        )
        logger.info(f"Started execution {execution.execution_id} of agent {agent.id}")
        return execution
