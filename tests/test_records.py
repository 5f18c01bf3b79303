"""Tests for tasktracker.records module."""

from __future__ import annotations

from pathlib import Path

import pytest

from tasktracker.models import Date, Priority, Task, TaskKind
from tasktracker.records import (
    dump_records,
    format_record,
    parse_records,
    read_records,
    write_records,
)


class TestFormatRecord:
    """Tests for format_record."""

    def test_plain_task(self) -> None:
        task = Task(
            title="Write report",
            description="Quarterly numbers",
            priority=Priority.HIGH,
            created=Date(1, 10, 2026),
            deadline=Date(15, 10, 2026),
        )
        assert format_record(task) == (
            "0\nWrite report\nQuarterly numbers\n3 0\n1 10 2026\n15 10 2026\n"
        )

    def test_deadline_task_differs_only_in_tag(self) -> None:
        plain = Task(title="t", created=Date(1, 1, 2026), deadline=Date(2, 1, 2026), done=True)
        special = Task(
            title="t",
            created=Date(1, 1, 2026),
            deadline=Date(2, 1, 2026),
            done=True,
            kind=TaskKind.DEADLINE,
        )
        plain_lines = format_record(plain).splitlines()
        special_lines = format_record(special).splitlines()

        assert plain_lines[0] == "0"
        assert special_lines[0] == "1"
        assert plain_lines[1:] == special_lines[1:]
        assert plain_lines[3] == "1 1"

    def test_empty_description_keeps_its_line(self) -> None:
        task = Task(title="t", created=Date(1, 1, 2026), deadline=Date(2, 1, 2026))
        assert format_record(task).split("\n")[2] == ""

    def test_dump_records_empty(self) -> None:
        assert dump_records([]) == ""


class TestParseRecords:
    """Tests for parse_records."""

    def test_round_trip(self, sample_tasks: list[Task]) -> None:
        assert parse_records(dump_records(sample_tasks)) == sample_tasks

    def test_empty_input(self) -> None:
        assert parse_records("") == []
        assert parse_records("\n\n") == []

    def test_non_zero_tag_is_deadline_task(self) -> None:
        text = "2\nt\nd\n2 1\n1 1 2026\n2 1 2026\n"
        (task,) = parse_records(text)
        assert task.kind is TaskKind.DEADLINE
        assert task.priority is Priority.MEDIUM
        assert task.done is True

    def test_out_of_range_values_fall_back(self) -> None:
        """Test bad priorities and dates load as defaults."""
        text = "0\nt\nd\n9 0\n31 2 2026\n2 1 2026\n"
        (task,) = parse_records(text)
        assert task.priority is Priority.LOW
        assert task.created == Date(1, 1, 2000)

    def test_blank_lines_between_records(self) -> None:
        text = "0\na\n\n1 0\n1 1 2026\n2 1 2026\n\n\n1\nb\n\n1 0\n1 1 2026\n2 1 2026\n"
        tasks = parse_records(text)
        assert [t.title for t in tasks] == ["a", "b"]

    def test_truncated_trailing_record_is_dropped(self, sample_tasks: list[Task]) -> None:
        text = dump_records(sample_tasks[:2]) + "0\nhalf a task\nno dates\n"
        assert parse_records(text) == sample_tasks[:2]

    @pytest.mark.parametrize(
        "bad_record",
        [
            "x\nt\nd\n1 0\n1 1 2026\n2 1 2026\n",
            "0\nt\nd\nhigh 0\n1 1 2026\n2 1 2026\n",
            "0\nt\nd\n1\n1 1 2026\n2 1 2026\n",
            "0\nt\nd\n1 no\n1 1 2026\n2 1 2026\n",
            "0\nt\nd\n1 0\n1 1\n2 1 2026\n",
            "0\nt\nd\n1 0\n1 1 2026\ntomorrow\n",
        ],
    )
    def test_stops_at_malformed_record(self, sample_tasks: list[Task], bad_record: str) -> None:
        """Test loading stops at the first bad record, dropping the rest."""
        text = dump_records(sample_tasks[:1]) + bad_record + dump_records(sample_tasks[1:])
        assert parse_records(text) == sample_tasks[:1]


class TestFileIO:
    """Tests for reading and writing record files."""

    def test_write_then_read(self, tmp_path: Path, sample_tasks: list[Task]) -> None:
        path = tmp_path / "tasks.txt"
        write_records(sample_tasks, path)
        assert read_records(path) == sample_tasks

    def test_write_creates_directory(self, tmp_path: Path, sample_tasks: list[Task]) -> None:
        path = tmp_path / "nested" / "dir" / "tasks.txt"
        write_records(sample_tasks, path)
        assert path.exists()

    def test_write_overwrites(self, tmp_path: Path, sample_tasks: list[Task]) -> None:
        path = tmp_path / "tasks.txt"
        write_records(sample_tasks, path)
        write_records(sample_tasks[:1], path)
        assert read_records(path) == sample_tasks[:1]

    def test_read_sample_file(self, sample_tasks_txt: Path) -> None:
        tasks = read_records(sample_tasks_txt)
        assert len(tasks) == 2
        assert tasks[0].title == "Write report"
        assert tasks[0].priority is Priority.HIGH
        assert tasks[1].kind is TaskKind.DEADLINE
        assert tasks[1].description == ""
        assert tasks[1].deadline == Date(29, 2, 2028)

    def test_read_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            read_records(tmp_path / "missing.txt")

    def test_undecodable_bytes_round_trip(self, tmp_path: Path) -> None:
        """Test bytes that are not UTF-8 are read as escapes and written back as-is."""
        path = tmp_path / "tasks.txt"
        original = b"0\nCaf\xe9\nr\xe9sum\xe9 \xff\n1 0\n1 1 2026\n2 1 2026\n"
        path.write_bytes(original)

        (task,) = read_records(path)
        assert task.title == "Caf\udce9"

        write_records([task], path)
        assert path.read_bytes() == original
