"""API routes for the agent catalog and agent runs."""

from fastapi import APIRouter, Body, Depends, Request, status

from agenthub.dispatch import ExecutionDispatcher
from agenthub.models.agent import AgentCreate, AgentUpdate
from agenthub.models.execution import Execution, RunAgentRequest
from agenthub.registry import AgentRegistry
from agenthub.search import filter_agents
from server.errors import failure_context

router = APIRouter()


def get_registry(request: Request) -> AgentRegistry:
    return request.app.state.registry


def get_dispatcher(request: Request) -> ExecutionDispatcher:
    return request.app.state.dispatcher


@router.get("/agents")
def list_agents(
    category: str | None = None,
    search: str | None = None,
    registry: AgentRegistry = Depends(get_registry),
) -> dict:
    """list agents, optionally restricted to a category and a search term."""
    with failure_context("get agents"):
        listing = registry.list_agents(category)
        agents = listing.items
        if search:
            agents = filter_agents(agents, search_term=search)
        return {
            "agents": [agent.to_item() for agent in agents],
            "count": len(agents),
        }


@router.get("/agents/{agent_id}")
def get_agent(agent_id: str, registry: AgentRegistry = Depends(get_registry)) -> dict:
    """get a single agent."""
    with failure_context("get agent"):
        return registry.get_agent(agent_id).to_item()


@router.post("/agents", status_code=status.HTTP_201_CREATED)
def create_agent(
    request: AgentCreate,
    registry: AgentRegistry = Depends(get_registry),
) -> dict:
    """register a new agent; id and timestamps are assigned by the server."""
    with failure_context("create agent"):
        return registry.create_agent(request).to_item()


@router.put("/agents/{agent_id}")
def update_agent(
    agent_id: str,
    request: AgentUpdate,
    registry: AgentRegistry = Depends(get_registry),
) -> dict:
    """apply a partial update to an agent."""
    with failure_context("update agent"):
        return registry.update_agent(agent_id, request).to_item()


@router.delete("/agents/{agent_id}")
def delete_agent(agent_id: str, registry: AgentRegistry = Depends(get_registry)) -> dict:
    """remove an agent; unknown ids succeed as well."""
    with failure_context("delete agent"):
        registry.delete_agent(agent_id)
        return {"message": "Agent deleted successfully"}


@router.post("/agents/{agent_id}/run")
def run_agent(
    agent_id: str,
    request: RunAgentRequest | None = Body(default=None),
    dispatcher: ExecutionDispatcher = Depends(get_dispatcher),
) -> Execution:
    """start an execution of an agent and return its acknowledgment."""
    with failure_context("run agent"):
        return dispatcher.run_agent(agent_id, request)
