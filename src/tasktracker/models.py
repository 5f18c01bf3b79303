"""Data models for tasktracker.

Dates and priorities never fail on bad components: they fall back to a
default value (1/1/2000 and Low respectively). Input boundaries that want to
re-prompt instead use ``Date.strict`` or ``strict=True`` parsing.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from enum import IntEnum
from functools import total_ordering

from tasktracker.exceptions import ValidationError

DAYS_IN_MONTH: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

DEFAULT_DAY = 1
DEFAULT_MONTH = 1
DEFAULT_YEAR = 2000


def is_leap_year(year: int) -> bool:
    """Gregorian leap year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(month: int, year: int) -> int:
    """Number of days in ``month`` (1-12) of ``year``."""
    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month - 1]


def is_valid_date(day: int, month: int, year: int) -> bool:
    """Check whether the components form a real calendar date."""
    if year < 0 or month < 1 or month > 12 or day < 1:
        return False
    return day <= days_in_month(month, year)


def _parse_ints(text: str, count: int, what: str) -> list[int]:
    parts = text.split()
    if len(parts) != count:
        raise ValidationError(f"Expected {count} integer(s) for {what}, got {text!r}")
    try:
        return [int(part) for part in parts]
    except ValueError:
        raise ValidationError(f"Expected integer(s) for {what}, got {text!r}") from None


@total_ordering
@dataclass(frozen=True)
class Date:
    """A calendar date without time of day.

    Constructing with invalid components yields the default date 1/1/2000.
    """

    day: int = DEFAULT_DAY
    month: int = DEFAULT_MONTH
    year: int = DEFAULT_YEAR

    def __post_init__(self) -> None:
        if not is_valid_date(self.day, self.month, self.year):
            object.__setattr__(self, "day", DEFAULT_DAY)
            object.__setattr__(self, "month", DEFAULT_MONTH)
            object.__setattr__(self, "year", DEFAULT_YEAR)

    @classmethod
    def strict(cls, day: int, month: int, year: int) -> Date:
        """Build a date, raising ValidationError instead of falling back."""
        if not is_valid_date(day, month, year):
            raise ValidationError(f"Invalid date: {day}/{month}/{year}")
        return cls(day, month, year)

    @classmethod
    def today(cls) -> Date:
        """Today's date in the host's local time."""
        now = dt.date.today()
        return cls(now.day, now.month, now.year)

    @classmethod
    def parse(cls, text: str, strict: bool = False) -> Date:
        """Parse ``"day month year"``.

        Text that is not three integers always raises ValidationError. Out of
        range values become the default date unless ``strict`` is set.
        """
        day, month, year = _parse_ints(text, 3, "a date")
        if strict:
            return cls.strict(day, month, year)
        return cls(day, month, year)

    def to_record(self) -> str:
        """Persisted form: ``day month year``."""
        return f"{self.day} {self.month} {self.year}"

    @property
    def _key(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key < other._key

    def __str__(self) -> str:
        return f"{self.day}/{self.month}/{self.year}"


class Priority(IntEnum):
    """Task priority, ordered by rank. Unknown values clamp to LOW."""

    LOW = 1
    MEDIUM = 2
    HIGH = 3

    @classmethod
    def _missing_(cls, value: object) -> Priority:
        return cls.LOW

    @classmethod
    def parse(cls, text: str) -> Priority:
        """Parse a single integer rank."""
        (value,) = _parse_ints(text, 1, "a priority")
        return cls(value)

    @property
    def rank(self) -> int:
        return int(self)

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    def to_record(self) -> str:
        return str(int(self))


class TaskKind(IntEnum):
    """Task variants, valued by their persisted tag."""

    PLAIN = 0
    DEADLINE = 1

    @classmethod
    def from_tag(cls, tag: int) -> TaskKind:
        """Tag 0 is a plain task; any other tag is a deadline task."""
        return cls.PLAIN if tag == 0 else cls.DEADLINE


@dataclass
class Task:
    """A single task.

    Both kinds carry the same fields; the kind only changes how the task is
    displayed and which tag it is saved with.
    """

    title: str
    description: str = ""
    priority: Priority = Priority.LOW
    created: Date = field(default_factory=Date.today)
    deadline: Date = field(default_factory=Date.today)
    done: bool = False
    kind: TaskKind = TaskKind.PLAIN

    def __post_init__(self) -> None:
        # Records are line oriented, so a line break would split the record.
        for name in ("title", "description"):
            value = getattr(self, name)
            if "\n" in value or "\r" in value:
                raise ValidationError(f"{name.capitalize()} cannot contain line breaks")
        self.priority = Priority(self.priority)
        self.kind = TaskKind(self.kind)
        self.done = bool(self.done)

    @property
    def is_special(self) -> bool:
        return self.kind is TaskKind.DEADLINE

    def mark_done(self) -> None:
        """Mark the task as completed. There is no way back to pending."""
        self.done = True

    def is_overdue(self, today: Date | None = None) -> bool:
        """A pending task whose deadline is before today. Done tasks never are."""
        if today is None:
            today = Date.today()
        return not self.done and self.deadline < today
