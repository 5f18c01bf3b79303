"""Plain-text rendering of tasks and task listings."""

from __future__ import annotations

from collections.abc import Sequence

from jinja2 import BaseLoader, Environment

from tasktracker.models import Task

SEPARATOR = "-" * 40
SPECIAL_BANNER = "[Deadline Task - Special]"

TASK_TEMPLATE = """\
{% if banner %}
{{ banner }}
{% endif %}
Title       : {{ task.title | printable }}
Description : {{ task.description | printable }}
Priority    : {{ task.priority.display_name }}
Status      : {{ "Done" if task.done else "Pending" }}
Created     : {{ task.created }}
Deadline    : {{ task.deadline }}
"""

LISTING_TEMPLATE = """\
{% for number, card in entries %}
{% if not loop.first %}

{% endif %}
{{ separator }}
  TASK #{{ number }}
{{ separator }}
{{ card }}
{% endfor %}
"""

SECTION_TEMPLATE = """\
{{ separator }}
{{ heading }}
{{ separator }}
{% for number, card in entries %}

Task #{{ number }}:
{{ card }}
{% endfor %}
"""


def printable(text: str) -> str:
    """Swap undecodable bytes kept from the task file for U+FFFD, for output only."""
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


_env = Environment(loader=BaseLoader(), trim_blocks=True, lstrip_blocks=True)
_env.filters["printable"] = printable
_task_template = _env.from_string(TASK_TEMPLATE)
_listing_template = _env.from_string(LISTING_TEMPLATE)
_section_template = _env.from_string(SECTION_TEMPLATE)


def render_task(task: Task) -> str:
    """Render every field of a task, one per line."""
    if task.is_special:
        banner = SPECIAL_BANNER
    else:
        banner = None
    return _task_template.render(task=task, banner=banner).rstrip("\n")


def _cards(entries: Sequence[tuple[int, Task]]) -> list[tuple[int, str]]:
    return [(number, render_task(task)) for number, task in entries]


def render_listing(entries: Sequence[tuple[int, Task]]) -> str:
    """Render numbered tasks, each under its own separator banner."""
    return _listing_template.render(entries=_cards(entries), separator=SEPARATOR).rstrip("\n")


def render_section(heading: str, entries: Sequence[tuple[int, Task]]) -> str:
    """Render a filtered listing under one heading, keeping task numbers."""
    return _section_template.render(
        heading=heading, entries=_cards(entries), separator=SEPARATOR
    ).rstrip("\n")
