"""Agent registry: lifecycle of agent records on top of a record store."""

import logging
from dataclasses import dataclass
from typing import Callable

from agenthub.adapters.stores import RecordStore
from agenthub.errors import BadRequestError, NotFoundError
from agenthub.models.agent import ALL_CATEGORIES, Agent, AgentCreate, AgentUpdate
from agenthub.utils.identifiers import generate_agent_id, utc_timestamp
from agenthub.utils.validation import parse_payload

logger = logging.getLogger("AGENT_HUB.REGISTRY")


@dataclass
class AgentListing:
    items: list[Agent]
    count: int


class AgentRegistry:
    """Creates, reads, updates and deletes agent records.

    The registry is the only source of ``id``, ``createdAt`` and
    ``updatedAt``. It holds no per-request state; consistency comes from
    the store's per-key atomicity.
    """

    def __init__(
        self,
        store: RecordStore,
        id_factory: Callable[[], str] = generate_agent_id,
        clock: Callable[[], str] = utc_timestamp,
    ) -> None:
        self.store = store
        self._id_factory = id_factory
        self._clock = clock

    def list_agents(self, category: str | None = None) -> AgentListing:
        """List agents, using the category index unless no filter is given."""
        if not category or category == ALL_CATEGORIES:
            items = self.store.scan()
        else:
            items = self.store.query_by_category(category)
        agents = [Agent.model_validate(item) for item in items]
        return AgentListing(items=agents, count=len(agents))

    def get_agent(self, agent_id: str) -> Agent:
        item = self.store.get(agent_id)
        if item is None:
            raise NotFoundError("Agent", agent_id)
        return Agent.model_validate(item)

    def create_agent(self, payload: AgentCreate | dict) -> Agent:
        """Assign identity and timestamps, persist, and return the new agent."""
        request = parse_payload(AgentCreate, payload)
        now = self._clock()
        agent = Agent(
            **request.model_dump(by_alias=True),
            id=self._id_factory(),
            created_at=now,
            updated_at=now,
        )
        self.store.put(agent.id, agent.to_item())
        logger.info(f"Created agent {agent.id} ({agent.name})")
        return agent

    def update_agent(self, agent_id: str, payload: AgentUpdate | dict) -> Agent:
        """Apply a sparse update; ``updatedAt`` is refreshed even if nothing else changes.

        Recognized fields are the schema fields plus attributes already
        stored on the record. Anything else is rejected.
        """
        request = parse_payload(AgentUpdate, payload)
        existing = self.store.get(agent_id)
        if existing is None:
            raise NotFoundError("Agent", agent_id)

        unknown = sorted(request.extra_fields - set(existing))
        if unknown:
            raise BadRequestError(f"Unknown agent fields: {', '.join(unknown)}")

        changes = request.changes()
        # never earlier than the stored stamp
        changes["updatedAt"] = max(self._clock(), existing["updatedAt"])
        try:
            item = self.store.update_partial(agent_id, changes)
        except NotFoundError as exc:
            raise NotFoundError("Agent", agent_id) from exc
        logger.info(f"Updated agent {agent_id} fields={sorted(changes)}")
        return Agent.model_validate(item)

    def delete_agent(self, agent_id: str) -> None:
        """Remove an agent. Deleting an unknown id is not an error."""
        self.store.delete(agent_id)
        logger.info(f"Deleted agent {agent_id}")
