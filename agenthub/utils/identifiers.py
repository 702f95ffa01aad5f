"""ID generation and timestamp utilities."""

import uuid
from datetime import datetime, timezone


def generate_agent_id() -> str:
    """Generate a unique agent ID (UUID4)."""
    return str(uuid.uuid4())


def generate_execution_id() -> str:
    """Generate a unique execution ID (UUID4)."""
    return str(uuid.uuid4())


def utc_timestamp() -> str:
    """Generate an ISO8601 UTC timestamp."""
    return datetime.now(timezone.utc).isoformat()
