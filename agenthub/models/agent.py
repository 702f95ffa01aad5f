"""Agent catalog models.

An agent record is a flat document: the fixed schema fields below plus
any descriptive attributes the client supplied at creation. Wire names
are camelCase (``createdAt``); python attributes are snake_case.
"""

from typing import Any

from pydantic import BaseModel, field_validator, model_validator
from pydantic.alias_generators import to_camel

# reserved category value meaning "no filter"; never stored
ALL_CATEGORIES = "All"

# fields owned by the registry, never accepted from clients
REGISTRY_FIELDS = frozenset({"id", "createdAt", "created_at", "updatedAt", "updated_at"})


def _check_name(value: str | None) -> str:
    if value is None or not value.strip():
        raise ValueError("name must be a non-empty string")
    return value


def _check_category(value: str | None) -> str | None:
    if value is None:
        return value
    if not value.strip():
        raise ValueError("category must be a non-empty string")
    if value == ALL_CATEGORIES:
        raise ValueError(f"'{ALL_CATEGORIES}' is reserved and cannot be used as a category")
    return value


def _drop_fields(data: Any, fields: frozenset[str]) -> Any:
    if isinstance(data, dict):
        return {k: v for k, v in data.items() if k not in fields}
    return data


class Agent(BaseModel):
    """A cataloged agent as stored by the registry."""

    model_config = {
        "extra": "allow",
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    id: str
    name: str
    description: str = ""
    category: str | None = None
    created_at: str
    updated_at: str

    def to_item(self) -> dict[str, Any]:
        """Flat document form used by stores and the HTTP layer."""
        return self.model_dump(by_alias=True)

    @property
    def attributes(self) -> dict[str, Any]:
        """Passthrough attributes supplied by the client."""
        return dict(self.model_extra or {})


class AgentCreate(BaseModel):
    """Request model for creating an agent.

    Unknown fields are kept as passthrough attributes. Any client-supplied
    id or timestamps are discarded.
    """

    model_config = {
        "extra": "allow",
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    name: str
    description: str = ""
    category: str | None = None

    @model_validator(mode="before")
    @classmethod
    def drop_registry_fields(cls, data: Any) -> Any:
        return _drop_fields(data, REGISTRY_FIELDS)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return _check_name(value)

    @field_validator("category")
    @classmethod
    def validate_category(cls, value: str | None) -> str | None:
        return _check_category(value)


class AgentUpdate(BaseModel):
    """Request model for a sparse agent update.

    Only fields that were actually sent are applied. ``id`` and
    ``createdAt`` are silently dropped; ``updatedAt`` is always set by the
    registry. Extra fields are validated against the stored record.
    """

    model_config = {
        "extra": "allow",
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    name: str | None = None
    description: str | None = None
    category: str | None = None

    @model_validator(mode="before")
    @classmethod
    def drop_registry_fields(cls, data: Any) -> Any:
        return _drop_fields(data, REGISTRY_FIELDS)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str | None) -> str:
        return _check_name(value)

    @field_validator("description")
    @classmethod
    def validate_description(cls, value: str | None) -> str:
        return value or ""

    @field_validator("category")
    @classmethod
    def validate_category(cls, value: str | None) -> str | None:
        return _check_category(value)

    def changes(self) -> dict[str, Any]:
        """Field assignments that were sent, keyed by wire name."""
        return self.model_dump(by_alias=True, exclude_unset=True)

    @property
    def extra_fields(self) -> set[str]:
        return set(self.model_extra or {})
