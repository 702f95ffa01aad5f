"""Execution records returned when an agent is run."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


class ExecutionStatus(str, Enum):
    """Lifecycle states of an execution."""

    pending = "pending"
    running = "running"
    succeeded = "succeeded"
    failed = "failed"


class Execution(BaseModel):
    """Acknowledgment of a single run request.

    ``agent_name`` is a snapshot taken at invocation time, so the record
    stays meaningful after the agent is renamed or deleted.
    """

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    execution_id: str
    agent_id: str
    agent_name: str
    status: ExecutionStatus
    start_time: str
    input: Any = {}
    message: str | None = None


class RunAgentRequest(BaseModel):
    """Optional request body for running an agent."""

    input: Any = Field(default=None, validate_default=True)

    @field_validator("input")
    @classmethod
    def default_input(cls, value: Any) -> Any:
        # null or missing input becomes an empty object
        return {} if value is None else value
