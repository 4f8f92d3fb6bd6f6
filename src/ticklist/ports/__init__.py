"""Ports - interfaces/protocols for external dependencies."""

from .output_sink import OutputSink
from .task_store import TaskStore

__all__ = [
    "OutputSink",
    "TaskStore",
]
