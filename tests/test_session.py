"""Tests for the session loop."""

from ticklist.adapters.console import BufferedOutput
from ticklist.core.executor import BOUNDS_MESSAGE
from ticklist.core.tasks import TaskList, Todo
from ticklist.session import handle_line, run_session


class TestHandleLine:
    def test_parse_error_reported_and_not_executed(self):
        tasks = TaskList([Todo("x")])
        out = BufferedOutput()

        assert handle_line("mark abc", tasks, out) is None
        assert out.lines == ["mark abc doesn't exist as a command"]
        assert tasks.get(0).is_done is False

    def test_invalid_input_message(self):
        out = BufferedOutput()
        assert handle_line("todo", TaskList(), out) is None
        assert out.lines == ["Invalid input for todo!"]

    def test_executes_valid_line(self):
        tasks = TaskList()
        outcome = handle_line("todo read book", tasks, BufferedOutput())
        assert outcome is not None and outcome.ok
        assert len(tasks) == 1


class TestRunSession:
    def test_greets_with_name(self):
        out = BufferedOutput()
        run_session([], TaskList(), out, name="Tess")
        assert "Hello! I'm Tess" in out.lines

    def test_full_session(self):
        lines = [
            "todo read book\n",
            "deadline return book /by Sunday\n",
            "\n",
            "mark 1\n",
            "mark 5\n",
            "blah\n",
            "find book\n",
            "bye\n",
            "todo never reached\n",
        ]
        out = BufferedOutput()

        tasks = run_session(lines, TaskList(), out)

        assert [str(t) for t in tasks] == [
            "[T][X] read book",
            "[D][ ] return book (by: Sunday)",
        ]
        assert BOUNDS_MESSAGE in out.lines
        assert "blah doesn't exist as a command" in out.lines
        assert "2.[D][ ] return book (by: Sunday)" in out.lines
        assert "Bye. Hope to see you again soon!" in out.lines

    def test_stops_at_end_of_input(self):
        tasks = run_session(["todo a", "todo b"], TaskList(), BufferedOutput())
        assert len(tasks) == 2

    def test_crlf_line_endings(self):
        tasks = run_session(["todo a\r\n"], TaskList(), BufferedOutput())
        assert tasks.get(0).description == "a"
