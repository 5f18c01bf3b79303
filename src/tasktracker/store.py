"""Task store - the ordered task collection and its flat-file round trip.

Task numbers shown to the user are 1-based positions in the store. They are
not stable identifiers: removing or sorting tasks renumbers everything after
the affected position.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from tasktracker.config import TASKS_FILE
from tasktracker.display import render_listing, render_section
from tasktracker.exceptions import TaskIndexError
from tasktracker.models import Date, Task
from tasktracker.records import read_records, write_records

logger = logging.getLogger(__name__)


class TaskStore:
    """Ordered, exclusively owned collection of tasks backed by a text file."""

    def __init__(self, path: str | Path | None = None, tasks: Iterable[Task] | None = None) -> None:
        self.path = Path(path) if path is not None else TASKS_FILE
        self._tasks: list[Task] = list(tasks) if tasks is not None else []
        self._load_failed = False

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __getitem__(self, index: int) -> Task:
        return self._tasks[self._check_index(index)]

    def _check_index(self, index: int) -> int:
        if index < 0 or index >= len(self._tasks):
            raise TaskIndexError()
        return index

    # ---- collection management ----

    def add(self, task: Task) -> int:
        """Append a task and return its 1-based task number."""
        self._tasks.append(task)
        return len(self._tasks)

    def mark_done(self, index: int) -> Task:
        """Mark the task at 0-based ``index`` as done."""
        task = self._tasks[self._check_index(index)]
        task.mark_done()
        return task

    def remove(self, index: int) -> Task:
        """Remove and return the task at 0-based ``index``."""
        return self._tasks.pop(self._check_index(index))

    def sort_by_priority(self) -> None:
        """High to low. Equal priorities keep their relative order."""
        self._tasks.sort(key=lambda t: t.priority, reverse=True)

    def sort_by_deadline(self) -> None:
        """Earliest deadline first. Equal deadlines keep their relative order."""
        self._tasks.sort(key=lambda t: t.deadline)

    # ---- queries ----

    def entries(self) -> list[tuple[int, Task]]:
        """All tasks paired with their 1-based task numbers."""
        return list(enumerate(self._tasks, start=1))

    def by_status(self, done: bool) -> list[tuple[int, Task]]:
        return [(number, task) for number, task in self.entries() if task.done == done]

    def overdue(self, today: Date | None = None) -> list[tuple[int, Task]]:
        if today is None:
            today = Date.today()
        return [(number, task) for number, task in self.entries() if task.is_overdue(today)]

    def list_tasks(self) -> str:
        """Render every task with its number, or a notice when empty."""
        if not self._tasks:
            return "No tasks to display."
        return render_listing(self.entries())

    def list_by_status(self, done: bool) -> str:
        """Render completed (``done=True``) or pending tasks."""
        matches = self.by_status(done)
        if not matches:
            return f"No {'completed' if done else 'pending'} tasks."
        heading = "COMPLETED TASKS" if done else "PENDING TASKS"
        return render_section(heading, matches)

    def list_overdue(self, today: Date | None = None) -> str:
        """Render pending tasks whose deadline has passed."""
        matches = self.overdue(today)
        if not matches:
            return "No overdue tasks. Good job!"
        return render_section("OVERDUE TASKS", matches)

    # ---- persistence ----

    def save(self) -> bool:
        """Overwrite the store file with every task in current order.

        Returns False if the file could not be written, or if it exists but
        could not be read by ``load``; such a file is never overwritten. The
        in-memory tasks are untouched either way.
        """
        if self._load_failed:
            logger.error("Not saving to %s: the existing file could not be read", self.path)
            return False

        try:
            write_records(self._tasks, self.path)
        except OSError as e:
            logger.error("Could not save tasks to %s: %s", self.path, e)
            return False

        logger.info("Saved %d task(s) to %s", len(self._tasks), self.path)
        return True

    def load(self) -> int:
        """Append tasks read from the store file and return how many were read.

        A missing file leaves the store as it is. An unreadable one does too,
        and also blocks ``save`` from replacing it.
        """
        if not self.path.exists():
            logger.debug("No task file at %s", self.path)
            return 0

        try:
            tasks = read_records(self.path)
        except OSError as e:
            logger.warning("Could not read tasks from %s: %s", self.path, e)
            self._load_failed = True
            return 0

        self._load_failed = False
        self._tasks.extend(tasks)
        logger.info("Loaded %d task(s) from %s", len(tasks), self.path)
        return len(tasks)
