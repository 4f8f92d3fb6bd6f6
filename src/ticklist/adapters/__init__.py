"""Adapters - I/O implementations of ports."""

from .console import BufferedOutput, ConsoleOutput
from .file_store import FileTaskStore, StoreError

__all__ = [
    "BufferedOutput",
    "ConsoleOutput",
    "FileTaskStore",
    "StoreError",
]
