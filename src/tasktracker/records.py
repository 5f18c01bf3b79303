"""Flat-file record format for persisted tasks.

Each task is stored as six lines::

    <tag: 0 plain, 1 deadline task>
    <title>
    <description>
    <priority> <done: 0|1>
    <day> <month> <year>      (created)
    <day> <month> <year>      (deadline)

There is no header and no escaping. Reading stops quietly at the first
record that cannot be parsed, dropping that record and anything after it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from tasktracker.exceptions import ValidationError
from tasktracker.models import Date, Priority, Task, TaskKind

logger = logging.getLogger(__name__)

RECORD_LINES = 6

# Bytes that are not UTF-8 survive a load and save unchanged.
FILE_ERRORS = "surrogateescape"


def format_record(task: Task) -> str:
    """Render one task as a six-line record, including the final newline."""
    lines = [
        str(int(task.kind)),
        task.title,
        task.description,
        f"{task.priority.to_record()} {int(task.done)}",
        task.created.to_record(),
        task.deadline.to_record(),
    ]
    return "\n".join(lines) + "\n"


def dump_records(tasks: Iterable[Task]) -> str:
    """Render every task, in order, as one file body."""
    return "".join(format_record(task) for task in tasks)


def iter_records(lines: Iterable[str]) -> Iterator[Task]:
    """Yield tasks parsed from ``lines`` until input ends or a record is malformed."""
    it = iter(lines)
    line_no = 0

    def next_line() -> str | None:
        nonlocal line_no
        line = next(it, None)
        if line is not None:
            line_no += 1
            line = line.rstrip("\n")
        return line

    while True:
        tag_line = next_line()
        while tag_line is not None and not tag_line.strip():
            tag_line = next_line()
        if tag_line is None:
            return

        start = line_no
        fields = [tag_line]
        for _ in range(RECORD_LINES - 1):
            line = next_line()
            if line is None:
                logger.debug("Truncated record starting at line %d", start)
                return
            fields.append(line)

        try:
            task = _parse_record(fields)
        except ValidationError as e:
            logger.debug("Malformed record starting at line %d: %s", start, e)
            return
        yield task


def _parse_record(fields: list[str]) -> Task:
    tag_text, title, description, status_text, created_text, deadline_text = fields

    try:
        tag = int(tag_text.strip())
    except ValueError:
        raise ValidationError(f"Invalid record tag {tag_text!r}") from None

    status = status_text.split()
    if len(status) != 2:
        raise ValidationError(f"Expected 'priority done', got {status_text!r}")
    priority = Priority.parse(status[0])
    try:
        done = int(status[1]) != 0
    except ValueError:
        raise ValidationError(f"Invalid done flag {status[1]!r}") from None

    return Task(
        title=title,
        description=description,
        priority=priority,
        created=Date.parse(created_text),
        deadline=Date.parse(deadline_text),
        done=done,
        kind=TaskKind.from_tag(tag),
    )


def parse_records(text: str) -> list[Task]:
    """Parse a whole file body."""
    return list(iter_records(text.split("\n")))


def read_records(path: Path) -> list[Task]:
    """Read tasks from ``path``. Raises OSError if the file cannot be read."""
    with open(path, encoding="utf-8", errors=FILE_ERRORS) as f:
        return list(iter_records(f))


def write_records(tasks: Iterable[Task], path: Path) -> None:
    """Overwrite ``path`` with ``tasks``. Raises OSError on failure."""
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8", errors=FILE_ERRORS) as f:
        f.write(dump_records(tasks))
