"""Free-text and category filtering over an already-fetched agent list.

Matching is case-insensitive substring containment on name and
description. The filter is stable: output order equals input order.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from agenthub.models.agent import ALL_CATEGORIES, Agent


def _field(agent: Agent | Mapping, name: str) -> Any:
    if isinstance(agent, Mapping):
        return agent.get(name)
    return getattr(agent, name, None)


def matches_agent(
    agent: Agent | Mapping,
    search_term: str | None = None,
    category: str | None = ALL_CATEGORIES,
) -> bool:
    """Return True if the agent passes both the category and search filters."""
    if category and category != ALL_CATEGORIES and _field(agent, "category") != category:
        return False
    if not search_term:
        return True
    needle = search_term.lower()
    name = _field(agent, "name") or ""
    description = _field(agent, "description") or ""
    return needle in name.lower() or needle in description.lower()


def filter_agents(
    agents: Iterable[Agent | Mapping],
    search_term: str | None = None,
    category: str | None = ALL_CATEGORIES,
) -> list:
    """Return the agents matching search_term and category, in input order."""
    return [a for a in agents if matches_agent(a, search_term, category)]
