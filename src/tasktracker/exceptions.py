"""Exception hierarchy for tasktracker."""

from __future__ import annotations


class TaskTrackerError(Exception):
    """Base exception for all tasktracker errors."""


class ValidationError(TaskTrackerError, ValueError):
    """Raised when user-supplied values cannot be accepted."""


class TaskIndexError(TaskTrackerError, IndexError):
    """Raised when a task number does not refer to a task in the store."""

    def __init__(self, message: str = "Invalid task number.") -> None:
        super().__init__(message)
