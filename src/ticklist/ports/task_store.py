"""Task storage interface."""

from typing import Protocol

from ticklist.core.tasks import TaskList


class TaskStore(Protocol):
    """Interface for loading and saving the task list."""

    def load(self) -> TaskList:
        """Load the saved task list. Returns an empty list if nothing is saved,
        raises if saved data cannot be read."""
        ...

    def save(self, tasks: TaskList) -> None:
        """Persist the task list, replacing what was saved before."""
        ...
