"""Storage adapters behind the agent registry."""

from agenthub.adapters.stores import MemoryStore, RecordStore

__all__ = [
    "RecordStore",
    "MemoryStore",
]
