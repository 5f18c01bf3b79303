"""Shared fixtures for tasktracker tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest

from tasktracker.logging_setup import LOGGER_NAME
from tasktracker.models import Date, Priority, Task, TaskKind


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Drop handlers installed by setup_logging during a test."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory and change to it."""
    original_dir = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_dir)


@pytest.fixture
def temp_tracker_dir(temp_project: Path) -> Path:
    """Create a temporary .tasktracker directory."""
    tracker_dir = temp_project / ".tasktracker"
    tracker_dir.mkdir()
    return tracker_dir


@pytest.fixture
def sample_tasks() -> list[Task]:
    """A mix of kinds, priorities, dates and statuses."""
    return [
        Task(
            title="Write report",
            description="Quarterly numbers",
            priority=Priority.HIGH,
            created=Date(1, 10, 2026),
            deadline=Date(15, 10, 2026),
        ),
        Task(
            title="Renew passport",
            description="",
            priority=Priority.LOW,
            created=Date(2, 9, 2026),
            deadline=Date(29, 2, 2028),
            kind=TaskKind.DEADLINE,
        ),
        Task(
            title="Call plumber",
            description="Kitchen sink leaks",
            priority=Priority.MEDIUM,
            created=Date(5, 1, 2026),
            deadline=Date(6, 1, 2026),
            done=True,
        ),
    ]


@pytest.fixture
def sample_tasks_txt(temp_project: Path) -> Path:
    """Create a sample tasks.txt file in the current directory."""
    content = """\
0
Write report
Quarterly numbers
3 0
1 10 2026
15 10 2026
1
Renew passport

1 0
2 9 2026
29 2 2028
"""
    tasks_path = temp_project / "tasks.txt"
    tasks_path.write_text(content)
    return tasks_path
