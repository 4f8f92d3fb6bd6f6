"""File-based task storage adapter."""

import json
import logging
from pathlib import Path

from ticklist.core.tasks import TaskList, task_from_dict

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Raised when the task file exists but cannot be read as a task list."""

    pass


class FileTaskStore:
    """
    JSON file task storage.

    Implements TaskStore protocol. The whole list is one JSON array of
    task records, rewritten on every save.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def load(self) -> TaskList:
        """
        Load tasks from file. A missing file gives an empty list.

        Raises:
            StoreError: the file is not a valid task list. It is left untouched.
        """
        if not self.path.exists():
            logger.debug("No task file at %s, starting empty", self.path)
            return TaskList()
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            if not isinstance(data, list) or not all(isinstance(i, dict) for i in data):
                raise ValueError("expected a JSON array of task records")
            tasks = TaskList([task_from_dict(item) for item in data])
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Failed to read tasks from {self.path}: {e}")
            raise StoreError(f"Cannot read tasks from {self.path}: {e}") from e
        logger.debug("Loaded %d tasks from %s", len(tasks), self.path)
        return tasks

    def save(self, tasks: TaskList) -> None:
        """Write/overwrite the task file."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps([task.to_dict() for task in tasks], indent=2),
            encoding="utf-8",
        )
        logger.debug("Saved %d tasks to %s", len(tasks), self.path)
