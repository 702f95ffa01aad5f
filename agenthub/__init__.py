"""Agent Hub - catalog and invocation service for deployable agents."""

from agenthub.models import (
    ALL_CATEGORIES,
    Agent,
    AgentCreate,
    AgentUpdate,
    Execution,
    ExecutionStatus,
    RunAgentRequest,
)
from agenthub.adapters import MemoryStore, RecordStore
from agenthub.dispatch import (
    AcknowledgingBackend,
    ExecutionBackend,
    ExecutionDispatcher,
)
from agenthub.errors import (
    AgentHubError,
    BadRequestError,
    NotFoundError,
    StoreError,
)
from agenthub.registry import AgentListing, AgentRegistry
from agenthub.search import filter_agents

__all__ = [
    # Models
    "ALL_CATEGORIES",
    "Agent",
    "AgentCreate",
    "AgentUpdate",
    "Execution",
    "ExecutionStatus",
    "RunAgentRequest",
    # Storage
    "RecordStore",
    "MemoryStore",
    # Registry and dispatch
    "AgentRegistry",
    "AgentListing",
    "ExecutionDispatcher",
    "ExecutionBackend",
    "AcknowledgingBackend",
    # Search
    "filter_agents",
    # Errors
    "AgentHubError",
    "BadRequestError",
    "NotFoundError",
    "StoreError",
]
