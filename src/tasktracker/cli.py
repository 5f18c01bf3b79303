"""CLI interface for tasktracker."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from tasktracker import __version__
from tasktracker.config import TrackerConfig
from tasktracker.display import printable
from tasktracker.exceptions import TaskTrackerError
from tasktracker.logging_setup import setup_logging
from tasktracker.models import Date, Priority, Task, TaskKind
from tasktracker.shell import DATE, print_text, run_shell
from tasktracker.store import TaskStore

console = Console()


def _open_store(ctx: click.Context) -> TaskStore:
    config: TrackerConfig = ctx.obj["config"]
    store = TaskStore(config.storage.path)
    store.load()
    return store


def _fail(ctx: click.Context, error: Exception) -> None:
    console.print(f"[red]Error:[/red] {escape(str(error))}")
    ctx.exit(1)


def _save(ctx: click.Context, store: TaskStore) -> None:
    if not store.save():
        console.print(
            f"[red]Error:[/red] Could not save tasks to {escape(str(store.path))}. "
            "The change was not kept."
        )
        ctx.exit(1)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="tasktracker")
@click.option(
    "--file",
    "-f",
    "tasks_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Task file to use instead of the configured one",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Configuration file (default: .tasktracker/config.json)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def main(ctx: click.Context, tasks_file: Path | None, config_path: Path | None, verbose: bool) -> None:
    """tasktracker - a personal task tracker.

    Run without a command to open the interactive menu.

    \b
    Examples:
      tasktracker                              # Interactive menu
      tasktracker add "Write report" -p 3 --deadline "15 8 2025"
      tasktracker list --overdue
      tasktracker done 2
    """
    ctx.ensure_object(dict)
    config = TrackerConfig.load(config_path)
    if tasks_file is not None:
        config.storage.path = str(tasks_file)

    setup_logging(level="DEBUG" if verbose else config.logging.level, log_file=config.logging.file)
    ctx.obj["config"] = config

    if ctx.invoked_subcommand is None:
        ctx.invoke(shell)


@main.command()
@click.pass_context
def shell(ctx: click.Context) -> None:
    """Open the interactive menu. Tasks are saved on exit."""
    store = _open_store(ctx)
    run_shell(store, console)


@main.command()
@click.argument("title")
@click.option("--description", "-d", default="", help="Task description")
@click.option(
    "--priority",
    "-p",
    type=click.IntRange(1, 3),
    default=1,
    show_default=True,
    help="1=Low, 2=Medium, 3=High",
)
@click.option("--deadline", "-D", type=DATE, required=True, help='Deadline as "day month year"')
@click.option("--special", "-s", is_flag=True, help="Add as a special deadline task")
@click.pass_context
def add(
    ctx: click.Context,
    title: str,
    description: str,
    priority: int,
    deadline: Date,
    special: bool,
) -> None:
    """Add a new task."""
    try:
        task = Task(
            title=title,
            description=description,
            priority=Priority(priority),
            created=Date.today(),
            deadline=deadline,
            kind=TaskKind.DEADLINE if special else TaskKind.PLAIN,
        )
    except TaskTrackerError as e:
        _fail(ctx, e)
        return

    store = _open_store(ctx)
    number = store.add(task)
    _save(ctx, store)
    console.print(f"[green]Task added:[/green] #{number} {escape(printable(task.title))}")


@main.command("list")
@click.option("--done", "status", flag_value="done", help="Only completed tasks")
@click.option("--pending", "status", flag_value="pending", help="Only pending tasks")
@click.option("--overdue", "status", flag_value="overdue", help="Only overdue tasks")
@click.pass_context
def list_command(ctx: click.Context, status: str | None) -> None:
    """List tasks with their task numbers."""
    store = _open_store(ctx)

    if status == "done":
        text = store.list_by_status(True)
    elif status == "pending":
        text = store.list_by_status(False)
    elif status == "overdue":
        text = store.list_overdue()
    else:
        text = store.list_tasks()

    print_text(console, text)


@main.command()
@click.argument("number", type=click.IntRange(min=1))
@click.pass_context
def done(ctx: click.Context, number: int) -> None:
    """Mark task NUMBER as done."""
    store = _open_store(ctx)
    try:
        store.mark_done(number - 1)
    except TaskTrackerError as e:
        _fail(ctx, e)
        return

    _save(ctx, store)
    console.print(f"[green]Task marked as done:[/green] #{number}")


@main.command()
@click.argument("number", type=click.IntRange(min=1))
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def remove(ctx: click.Context, number: int, yes: bool) -> None:
    """Delete task NUMBER. Later tasks move up by one."""
    store = _open_store(ctx)
    try:
        task = store[number - 1]
    except TaskTrackerError as e:
        _fail(ctx, e)
        return

    prompt = f"Delete task #{number} \"{printable(task.title)}\"? Are you sure?"
    if not yes and not click.confirm(prompt, default=False):
        console.print("Deletion cancelled.")
        return

    store.remove(number - 1)
    _save(ctx, store)
    console.print(f"[green]Task removed:[/green] {escape(printable(task.title))}")


@main.command()
@click.argument("key", type=click.Choice(["priority", "deadline"]))
@click.pass_context
def sort(ctx: click.Context, key: str) -> None:
    """Reorder tasks by priority (high first) or deadline (earliest first)."""
    store = _open_store(ctx)

    if key == "priority":
        store.sort_by_priority()
        message = "Tasks sorted by priority (High to Low)."
    else:
        store.sort_by_deadline()
        message = "Tasks sorted by deadline (earliest first)."

    _save(ctx, store)
    console.print(message)
