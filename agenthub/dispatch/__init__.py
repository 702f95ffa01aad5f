"""Execution dispatch and pluggable execution backends."""

from agenthub.dispatch.backends import (
    AcknowledgingBackend,
    ExecutionBackend,
    ExecutionHandle,
    RecordingBackend,
)
from agenthub.dispatch.dispatcher import ExecutionDispatcher

__all__ = [
    "ExecutionDispatcher",
    "ExecutionBackend",
    "ExecutionHandle",
    "AcknowledgingBackend",
    "RecordingBackend",
]
