"""Core data models for the agent hub."""

from agenthub.models.agent import (
    ALL_CATEGORIES,
    Agent,
    AgentCreate,
    AgentUpdate,
)
from agenthub.models.execution import (
    Execution,
    ExecutionStatus,
    RunAgentRequest,
)

__all__ = [
    # Agents
    "ALL_CATEGORIES",
    "Agent",
    "AgentCreate",
    "AgentUpdate",
    # Executions
    "Execution",
    "ExecutionStatus",
    "RunAgentRequest",
]
