"""Search and filter utilities for agent listings."""

from agenthub.search.filtering import filter_agents, matches_agent

__all__ = [
    "filter_agents",
    "matches_agent",
]
