"""
Command parser - turns one line of user input into a Command.

Classification is order-sensitive: the first shape that matches wins, so a
malformed "mark" line (e.g. "mark 0") is not a Mark and, having no other
shape, ends up unrecognized.

Pure functions - no I/O.
"""

import logging
import re

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
from .errors import InvalidInputError, UnrecognizedCommandError
from .tasks import Deadline, Event, Todo

logger = logging.getLogger(__name__)

# 1-100, no leading zero
_INDEX = r"(100|[1-9]|[1-9][0-9])"
MARK_PATTERN = re.compile(rf"mark {_INDEX}")
UNMARK_PATTERN = re.compile(rf"unmark {_INDEX}")
DELETE_PATTERN = re.compile(rf"delete {_INDEX}")

TODO_PREFIX = "todo "


def parse(raw: str) -> Command:
    """
    Parse a line of input.

    Raises:
        UnrecognizedCommandError: the line matches no command shape.
        InvalidInputError: a command keyword with bad arguments.
    """
    first = _tokens(raw)[0]

    if raw == "bye":
        command: Command = Bye()
    elif MARK_PATTERN.fullmatch(raw):
        command = Mark(_parse_index(raw, "mark"))
    elif raw == "list":
        command = ListTasks()
    elif DELETE_PATTERN.fullmatch(raw):
        command = Delete(_parse_index(raw, "delete"))
    elif first == "find":
        command = _parse_find(raw)
    elif UNMARK_PATTERN.fullmatch(raw):
        command = Unmark(_parse_index(raw, "unmark"))
    elif first == "todo":
        command = _parse_todo(raw)
    elif first == "deadline":
        command = _parse_deadline(raw)
    elif first == "event":
        command = _parse_event(raw)
    else:
        raise UnrecognizedCommandError(raw)

    logger.debug("Parsed %r as %r", raw, command)
    return command


def _tokens(raw: str) -> list[str]:
    """Split on single spaces, dropping trailing empty tokens (but keeping one)."""
    parts = raw.split(" ")
    while len(parts) > 1 and parts[-1] == "":
        parts.pop()
    return parts


def _substring(text: str, start: int, end: int | None = None) -> str:
    """Slice text, raising IndexError instead of clamping out-of-range bounds."""
    if end is None:
        end = len(text)
    if start < 0 or end > len(text) or start > end:
        raise IndexError(f"range [{start}, {end}) outside text of length {len(text)}")
    return text[start:end]


def extract_between(text: str, prefix: str, marker: str) -> str:
    """
    Text after the first `prefix` and before the first `marker`.

    Exactly one character (normally the space) is skipped after the prefix,
    and a single space directly before the marker is dropped. A missing
    marker gives an out-of-range slice, raised as IndexError.
    """
    start = text.find(prefix) + len(prefix) + 1
    end = text.find(marker)
    return _substring(text, start, end).removesuffix(" ")


def extract_to_end(text: str, prefix: str) -> str:
    """Text after the first `prefix` (skipping one character) to the end."""
    start = text.find(prefix) + len(prefix) + 1
    return _substring(text, start)


def _parse_index(raw: str, kind: str) -> int:
    try:
        return int(_tokens(raw)[1])
    except (IndexError, ValueError) as e:
        raise InvalidInputError(kind) from e


def _parse_find(raw: str) -> Find:
    parts = _tokens(raw)
    if len(parts) < 2:
        raise InvalidInputError("find")
    return Find(parts[1])


def _parse_todo(raw: str) -> AddTodo:
    try:
        return AddTodo(Todo(_substring(raw, len(TODO_PREFIX))))
    except (IndexError, ValueError) as e:
        raise InvalidInputError("todo") from e


def _parse_deadline(raw: str) -> AddDeadline:
    try:
        description = extract_between(raw, "deadline", "/by")
        by = extract_to_end(raw, "/by")
        return AddDeadline(Deadline(description, by))
    except (IndexError, ValueError) as e:
        raise InvalidInputError("deadline") from e


def _parse_event(raw: str) -> AddEvent:
    try:
        description = extract_between(raw, "event", "/from")
        from_ = extract_between(raw, "/from", "/to")
        to = extract_to_end(raw, "/to")
        return AddEvent(Event(description, from_, to))
    except (IndexError, ValueError) as e:
        raise InvalidInputError("event") from e
