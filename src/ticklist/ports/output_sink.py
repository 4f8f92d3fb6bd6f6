"""Output sink interface."""

from typing import Protocol


class OutputSink(Protocol):
    """Interface for emitting user-facing lines of text."""

    def print(self, line: str) -> None:
        """Emit one line."""
        ...
