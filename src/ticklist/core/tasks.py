"""Pure task domain logic - no I/O dependencies."""

from dataclasses import dataclass, field
from typing import ClassVar, Iterator

from .errors import BoundsError


@dataclass
class Task:
    """A tracked unit of work. Subclasses add their own fields."""

    description: str
    is_done: bool = field(default=False, kw_only=True)

    type_marker: ClassVar[str] = " "

    def __post_init__(self) -> None:
        if not self.description:
            raise ValueError("description must not be empty")

    def mark(self) -> None:
        self.is_done = True

    def unmark(self) -> None:
        self.is_done = False

    @property
    def status_icon(self) -> str:
        return "X" if self.is_done else " "

    def __str__(self) -> str:
        return f"[{self.type_marker}][{self.status_icon}] {self.description}"

    def to_dict(self) -> dict:
        """Serialize to a plain dict for storage."""
        return {
            "type": self.type_marker,
            "description": self.description,
            "done": self.is_done,
        }


@dataclass
class Todo(Task):
    """A task with no date attached."""

    type_marker: ClassVar[str] = "T"


@dataclass
class Deadline(Task):
    """A task that must be done by a (free-text) deadline."""

    by: str = ""

    type_marker: ClassVar[str] = "D"

    def __str__(self) -> str:
        return f"{super().__str__()} (by: {self.by})"

    def to_dict(self) -> dict:
        return {**super().to_dict(), "by": self.by}


@dataclass
class Event(Task):
    """A task spanning a (free-text) interval."""

    from_: str = ""
    to: str = ""

    type_marker: ClassVar[str] = "E"

    def __str__(self) -> str:
        return f"{super().__str__()} (from: {self.from_} to: {self.to})"

    def to_dict(self) -> dict:
        return {**super().to_dict(), "from": self.from_, "to": self.to}


def task_from_dict(data: dict) -> Task:
    """Create a Task from its stored dict form."""
    done = bool(data.get("done", False))
    match data.get("type"):
        case "T":
            return Todo(data["description"], is_done=done)
        case "D":
            return Deadline(data["description"], data.get("by", ""), is_done=done)
        case "E":
            return Event(
                data["description"],
                data.get("from", ""),
                data.get("to", ""),
                is_done=done,
            )
        case other:
            raise ValueError(f"Unknown task type: {other!r}")


class TaskList:
    """
    Ordered, gap-free sequence of tasks.

    Positions are 0-based here; callers translate from the 1-based numbers
    users see. Out-of-range positions raise BoundsError (negative positions
    included, so Python's wrap-around indexing never applies).
    """

    def __init__(self, tasks: list[Task] | None = None):
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            raise BoundsError(index, len(self._tasks))

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def get(self, index: int) -> Task:
        self._check(index)
        return self._tasks[index]

    def mark(self, index: int) -> Task:
        task = self.get(index)
        task.mark()
        return task

    def unmark(self, index: int) -> Task:
        task = self.get(index)
        task.unmark()
        return task

    def delete(self, index: int) -> Task:
        self._check(index)
        return self._tasks.pop(index)

    def find(self, keyword: str) -> list[Task]:
        """Tasks whose description contains keyword (case-sensitive), in order."""
        return [t for t in self._tasks if keyword in t.description]
