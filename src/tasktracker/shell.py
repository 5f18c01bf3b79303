"""Interactive menu for tasktracker."""

from __future__ import annotations

from collections.abc import Callable

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from tasktracker.exceptions import TaskTrackerError, ValidationError
from tasktracker.models import Date, Priority, Task, TaskKind
from tasktracker.store import TaskStore


class DateParamType(click.ParamType):
    """A ``day month year`` date, e.g. ``15 8 2025``."""

    name = "date"

    def convert(self, value: object, param: click.Parameter | None, ctx: click.Context | None) -> Date:
        if isinstance(value, Date):
            return value
        try:
            return Date.parse(str(value), strict=True)
        except ValidationError as e:
            self.fail(str(e), param, ctx)


DATE = DateParamType()

MENU_OPTIONS: list[tuple[int, str]] = [
    (1, "Add new task"),
    (2, "Show all tasks"),
    (3, "Show completed tasks"),
    (4, "Show pending tasks"),
    (5, "Show overdue tasks"),
    (6, "Mark task as done"),
    (7, "Delete a task"),
    (8, "Sort by priority"),
    (9, "Sort by deadline"),
    (0, "Exit"),
]


def print_text(console: Console, text: str) -> None:
    """Print rendered task text verbatim (no rich markup)."""
    console.print(text, markup=False, highlight=False)


def prompt_task(console: Console) -> Task:
    """Collect the fields of a new task from the user."""
    console.print("\n[bold]--- New Task ---[/bold]")
    title = click.prompt("Title")
    description = click.prompt("Description", default="", show_default=False)
    priority = click.prompt("Priority (1=Low, 2=Medium, 3=High)", type=click.IntRange(1, 3))

    created = Date.today()
    console.print(f"Creation date set to today: {created}")

    deadline = click.prompt("Deadline (day month year, e.g. 15 8 2025)", type=DATE)
    kind = click.prompt("Task type (1=Normal, 2=Special DeadlineTask)", type=click.IntRange(1, 2))

    return Task(
        title=title,
        description=description,
        priority=Priority(priority),
        created=created,
        deadline=deadline,
        kind=TaskKind.PLAIN if kind == 1 else TaskKind.DEADLINE,
    )


def _add(store: TaskStore, console: Console) -> None:
    task = prompt_task(console)
    store.add(task)
    console.print("[green]Task added successfully.[/green]")


def _show_all(store: TaskStore, console: Console) -> None:
    print_text(console, store.list_tasks())


def _show_completed(store: TaskStore, console: Console) -> None:
    print_text(console, store.list_by_status(True))


def _show_pending(store: TaskStore, console: Console) -> None:
    print_text(console, store.list_by_status(False))


def _show_overdue(store: TaskStore, console: Console) -> None:
    print_text(console, store.list_overdue())


def _mark_done(store: TaskStore, console: Console) -> None:
    number = click.prompt("Enter task number to mark as done", type=click.IntRange(min=1))
    store.mark_done(number - 1)
    console.print("[green]Task marked as done.[/green]")


def _delete(store: TaskStore, console: Console) -> None:
    number = click.prompt("Enter task number to delete", type=click.IntRange(min=1))
    if click.confirm("Are you sure?", default=False):
        store.remove(number - 1)
        console.print("[green]Task removed.[/green]")
    else:
        console.print("Deletion cancelled.")


def _sort_priority(store: TaskStore, console: Console) -> None:
    store.sort_by_priority()
    console.print("Tasks sorted by priority (High to Low).")


def _sort_deadline(store: TaskStore, console: Console) -> None:
    store.sort_by_deadline()
    console.print("Tasks sorted by deadline (earliest first).")


ACTIONS: dict[int, Callable[[TaskStore, Console], None]] = {
    1: _add,
    2: _show_all,
    3: _show_completed,
    4: _show_pending,
    5: _show_overdue,
    6: _mark_done,
    7: _delete,
    8: _sort_priority,
    9: _sort_deadline,
}


def print_menu(console: Console) -> None:
    table = Table.grid(padding=(0, 2))
    table.add_column(justify="right", style="cyan")
    table.add_column()
    for number, label in MENU_OPTIONS:
        table.add_row(f"{number}.", label)

    console.print()
    console.print(Panel.fit(table, title="[bold]TODO LIST MANAGER[/bold]"))


def run_shell(store: TaskStore, console: Console) -> None:
    """Run the menu loop until the user exits.

    The store is saved when the loop ends, whether by choosing Exit, by
    aborting the prompt or by an unexpected error.
    """
    try:
        while True:
            print_menu(console)
            choice = click.prompt("Your choice", type=click.IntRange(0, 9))
            if choice == 0:
                break

            try:
                ACTIONS[choice](store, console)
            except TaskTrackerError as e:
                console.print(f"[red]Error:[/red] {escape(str(e))}")
    finally:
        if store.save():
            console.print("Goodbye! Your tasks have been saved.")
        else:
            console.print(f"[red]Error:[/red] Could not save tasks to {escape(str(store.path))}.")
