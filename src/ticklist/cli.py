"""Ticklist CLI - Personal task tracker."""

import logging
import sys

import click

from .adapters.console import ConsoleOutput
from .adapters.file_store import FileTaskStore, StoreError
from .config import load_config
from .core.errors import ParseError
from .core.executor import execute
from .core.parser import parse
from .core.tasks import TaskList
from .ports.task_store import TaskStore
from .session import run_session

logger = logging.getLogger(__name__)


def _setup_logging(level: str, debug: bool) -> None:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else getattr(logging, level, logging.WARNING),
    )


def _get_store(ctx: click.Context) -> TaskStore:
    config = ctx.obj["config"]
    path = ctx.obj["data_file"] or config.data_path
    logger.debug("Using task file %s", path)
    return FileTaskStore(path)


def _load(store: TaskStore) -> TaskList:
    """Load tasks, exiting before anything can overwrite an unreadable file."""
    try:
        return store.load()
    except StoreError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.group(invoke_without_command=True)
@click.version_option(package_name="ticklist")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--data-file", default=None, help="Task file to use instead of the configured one")
@click.pass_context
def main(ctx, debug: bool, data_file: str | None):
    """Ticklist - track todos, deadlines and events."""
    config = load_config()
    _setup_logging(config.log_level, debug)
    ctx.obj = {"config": config, "data_file": data_file}

    if ctx.invoked_subcommand is None:
        ctx.invoke(chat)


@main.command()
@click.pass_context
def chat(ctx):
    """Interactive session: one command per line, 'bye' to quit."""
    store = _get_store(ctx)
    tasks = _load(store)
    try:
        run_session(
            sys.stdin,
            tasks,
            ConsoleOutput(),
            name=ctx.obj["config"].assistant_name,
        )
    except KeyboardInterrupt:
        click.echo()
    finally:
        store.save(tasks)


@main.command("do")
@click.argument("command", nargs=-1, required=True)
@click.pass_context
def do_command(ctx, command: tuple[str, ...]):
    """Run a single command, e.g. ticklist do todo read book."""
    raw = " ".join(command)
    try:
        parsed = parse(raw)
    except ParseError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    store = _get_store(ctx)
    tasks = _load(store)
    outcome = execute(parsed, tasks, ConsoleOutput())
    store.save(tasks)
    if not outcome.ok:
        sys.exit(1)


@main.command("list")
@click.pass_context
def list_tasks(ctx):
    """List saved tasks."""
    tasks = _load(_get_store(ctx))
    if not len(tasks):
        click.echo("No tasks yet.")
        return

    for i, task in enumerate(tasks, start=1):
        click.echo(f"{i}.{task}")


if __name__ == "__main__":
    main()
