"""Helpers for turning raw payloads into request models."""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from agenthub.errors import BadRequestError

M = TypeVar("M", bound=BaseModel)


def describe_errors(errors: list[dict[str, Any]]) -> str:
    """Flatten pydantic-style error dicts into one readable line."""
    parts = []
    for error in errors:
        loc = ".".join(str(p) for p in error.get("loc", ()))
        parts.append(f"{loc}: {error['msg']}" if loc else error["msg"])
    return "; ".join(parts)


def parse_payload(model: type[M], payload: Any) -> M:
    """Validate payload into model, raising BadRequestError on failure."""
    if isinstance(payload, model):
        return payload
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise BadRequestError(describe_errors(exc.errors())) from exc
