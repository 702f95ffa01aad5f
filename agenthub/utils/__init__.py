"""Utility functions for the agent hub."""

from agenthub.utils.identifiers import (
    generate_agent_id,
    generate_execution_id,
    utc_timestamp,
)
from agenthub.utils.validation import describe_errors, parse_payload

__all__ = [
    "generate_agent_id",
    "generate_execution_id",
    "utc_timestamp",
    "describe_errors",
    "parse_payload",
]
