"""Output sink adapters."""

import click


class ConsoleOutput:
    """
    Terminal output.

    Implements OutputSink protocol via click.echo.
    """

    def __init__(self, err: bool = False):
        self.err = err

    def print(self, line: str) -> None:
        click.echo(line, err=self.err)


class BufferedOutput:
    """Collects printed lines in memory. Implements OutputSink protocol."""

    def __init__(self):
        self.lines: list[str] = []

    def print(self, line: str) -> None:
        self.lines.append(line)

    def text(self) -> str:
        return "\n".join(self.lines)
