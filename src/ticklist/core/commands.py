"""Command values produced by the parser and consumed by the executor."""

from dataclasses import dataclass

from .tasks import Deadline, Event, Todo


@dataclass(frozen=True)
class Bye:
    """End the session."""


@dataclass(frozen=True)
class ListTasks:
    """Show every task."""


@dataclass(frozen=True)
class Find:
    keyword: str


@dataclass(frozen=True)
class Mark:
    index: int  # 1-based


@dataclass(frozen=True)
class Unmark:
    index: int  # 1-based


@dataclass(frozen=True)
class Delete:
    index: int  # 1-based


@dataclass(frozen=True)
class AddTodo:
    task: Todo


@dataclass(frozen=True)
class AddDeadline:
    task: Deadline


@dataclass(frozen=True)
class AddEvent:
    task: Event


Command = Bye | ListTasks | Find | Mark | Unmark | Delete | AddTodo | AddDeadline | AddEvent
