"""Functional core - task model, command parsing and execution."""

from .tasks import Task, Todo, Deadline, Event, TaskList, task_from_dict
from .errors import ParseError, UnrecognizedCommandError, InvalidInputError, BoundsError
from .commands import (
    Command,
    Bye,
    ListTasks,
    Find,
    Mark,
    Unmark,
    Delete,
    AddTodo,
    AddDeadline,
    AddEvent,
)
from .parser import parse
from .executor import Outcome, execute

__all__ = [
    # Tasks
    "Task",
    "Todo",
    "Deadline",
    "Event",
    "TaskList",
    "task_from_dict",
    # Errors
    "ParseError",
    "UnrecognizedCommandError",
    "InvalidInputError",
    "BoundsError",
    # Commands
    "Command",
    "Bye",
    "ListTasks",
    "Find",
    "Mark",
    "Unmark",
    "Delete",
    "AddTodo",
    "AddDeadline",
    "AddEvent",
    # Parsing / execution
    "parse",
    "Outcome",
    "execute",
]
