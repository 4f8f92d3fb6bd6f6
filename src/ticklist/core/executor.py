"""Command executor - applies parsed commands to a TaskList."""

import logging
from dataclasses import dataclass

from ..ports.output_sink import OutputSink
from .commands import (
    AddDeadline,
    AddEvent,
    AddTodo,
    Bye,
    Command,
    Delete,
    Find,
    ListTasks,
    Mark,
    Unmark,
)
from .errors import BoundsError
from .tasks import Task, TaskList

logger = logging.getLogger(__name__)

DIVIDER = "_" * 60
FAREWELL = "Bye. Hope to see you again soon!"
BOUNDS_MESSAGE = "index out of bounds"


@dataclass(frozen=True)
class Outcome:
    """Result of executing one command."""

    terminate: bool = False
    error: BoundsError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _framed(out: OutputSink, *lines: str) -> None:
    out.print(DIVIDER)
    for line in lines:
        out.print(line)
    out.print(DIVIDER)


def _count_line(tasks: TaskList) -> str:
    return f"Now you have {len(tasks)} tasks in the list."


def _numbered(tasks: list[Task]) -> list[str]:
    return [f"{i}.{task}" for i, task in enumerate(tasks, start=1)]


def execute(command: Command, tasks: TaskList, out: OutputSink) -> Outcome:
    """
    Apply a command to the task list, reporting through `out`.

    Out-of-range positions for mark/unmark/delete are reported and returned
    in the Outcome; the task list is left unchanged.
    """
    try:
        return _dispatch(command, tasks, out)
    except BoundsError as e:
        logger.info("Bounds error for %r: %s", command, e)
        out.print(BOUNDS_MESSAGE)
        return Outcome(error=e)


def _dispatch(command: Command, tasks: TaskList, out: OutputSink) -> Outcome:
    match command:
        case Bye():
            _framed(out, FAREWELL)
            return Outcome(terminate=True)
        case ListTasks():
            _framed(out, "Here are the tasks in your list:", *_numbered(list(tasks)))
        case Find(keyword=keyword):
            matches = tasks.find(keyword)
            _framed(out, "Here are the matching tasks in your list:", *_numbered(matches))
        case Mark(index=index):
            task = tasks.mark(index - 1)
            _framed(out, "Nice! I've marked this task as done:", str(task))
        case Unmark(index=index):
            task = tasks.unmark(index - 1)
            _framed(out, "OK, I've marked this task as not done yet:", str(task))
        case Delete(index=index):
            task = tasks.delete(index - 1)
            _framed(out, "Noted. I've removed this task:", str(task), _count_line(tasks))
        case AddTodo(task=task) | AddDeadline(task=task) | AddEvent(task=task):
            tasks.add(task)
            _framed(out, "Got it. I've added this task:", str(task), _count_line(tasks))
        case _:
            raise TypeError(f"Unhandled command: {command!r}")
    return Outcome()
