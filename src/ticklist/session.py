"""Session layer between the CLI and the core.

Reads lines, parses them, executes the resulting commands and reports
parse failures. Knows nothing about where lines come from or where output
goes.
"""

import logging
from typing import Iterable

from .core.errors import ParseError
from .core.executor import DIVIDER, Outcome, execute
from .core.parser import parse
from .core.tasks import TaskList
from .ports.output_sink import OutputSink

logger = logging.getLogger(__name__)


def greet(out: OutputSink, name: str = "Ticklist") -> None:
    out.print(DIVIDER)
    out.print(f"Hello! I'm {name}")
    out.print("What can I do for you?")
    out.print(DIVIDER)


def handle_line(line: str, tasks: TaskList, out: OutputSink) -> Outcome | None:
    """
    Parse and execute one line.

    Returns the execution Outcome, or None if the line failed to parse
    (the failure is reported through `out` and nothing is executed).
    """
    try:
        command = parse(line)
    except ParseError as e:
        logger.debug("Rejected %r: %s", line, e)
        out.print(str(e))
        return None
    return execute(command, tasks, out)


def run_session(
    lines: Iterable[str],
    tasks: TaskList,
    out: OutputSink,
    name: str = "Ticklist",
) -> TaskList:
    """
    Run commands until "bye" or the input runs out.

    Blank lines are skipped. Returns the (mutated) task list so the caller
    can save it.
    """
    greet(out, name)
    handled = 0
    for raw in lines:
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        handled += 1
        outcome = handle_line(line, tasks, out)
        if outcome is not None and outcome.terminate:
            break
    logger.debug("Session ended after %d commands, %d tasks", handled, len(tasks))
    return tasks
