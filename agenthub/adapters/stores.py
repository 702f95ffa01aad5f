"""Record store contract and an in-memory implementation.

Records are flat JSON-compatible dicts keyed by an opaque string. Every
primitive is atomic per key; nothing spans more than one key.
"""

import copy
import threading
from typing import Any, Protocol

from agenthub.errors import NotFoundError


class RecordStore(Protocol):
    """Protocol for keyed storage of agent records."""

    def put(self, key: str, item: dict[str, Any]) -> None:
        """Insert or overwrite the record at key."""
        ...

    def get(self, key: str) -> dict[str, Any] | None:
        """Return the record at key, or None."""
        ...

    def scan(self) -> list[dict[str, Any]]:
        """Return every record. Order is unspecified."""
        ...

    def query_by_category(self, category: str) -> list[dict[str, Any]]:
        """Return records whose category equals the argument exactly."""
        ...

    def delete(self, key: str) -> None:
        """Remove the record at key; absent keys are ignored."""
        ...

    def update_partial(self, key: str, fields: dict[str, Any]) -> dict[str, Any]:
        """Assign fields on an existing record and return the result.

        Raises NotFoundError when key is absent; never creates a record.
        """
        ...


class MemoryStore:
    """Dict-backed record store for tests and single-process use."""

    def __init__(self) -> None:
        self._items: dict[str, dict[str, Any]] = {}
        self._lock = threading.Lock()

    def put(self, key: str, item: dict[str, Any]) -> None:
        with self._lock:
            self._items[key] = copy.deepcopy(item)

    def get(self, key: str) -> dict[str, Any] | None:
        with self._lock:
            item = self._items.get(key)
            return copy.deepcopy(item) if item is not None else None

    def scan(self) -> list[dict[str, Any]]:
        with self._lock:
            return [copy.deepcopy(item) for item in self._items.values()]

    def query_by_category(self, category: str) -> list[dict[str, Any]]:
        with self._lock:
            return [
                copy.deepcopy(item)
                for item in self._items.values()
                if item.get("category") == category
            ]

    def delete(self, key: str) -> None:
        with self._lock:
            self._items.pop(key, None)

    def update_partial(self, key: str, fields: dict[str, Any]) -> dict[str, Any]:
        with self._lock:
            if key not in self._items:
                raise NotFoundError("Record", key)
            self._items[key].update(copy.deepcopy(fields))
            return copy.deepcopy(self._items[key])
