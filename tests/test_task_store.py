# tests/test_task_store.py

from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path

import pytest

from taskpal.core.errors import StorageInitError, StorageReadError
from taskpal.tasks.task_models import Deadline, Event, Todo
from taskpal.tasks.task_store import TaskFileStore


def test_creates_missing_dir_and_file(tmp_path: Path) -> None:
    path = tmp_path / "a" / "b" / "tasks.txt"
    store = TaskFileStore(path)
    assert path.exists()
    assert store.path == path
    assert store.load_all() == []


def test_save_then_load(tmp_path: Path) -> None:
    store = TaskFileStore(tmp_path / "tasks.txt")
    tasks = [
        Todo("read book"),
        Deadline("submit report", datetime(2024, 3, 15, 14, 30), is_done=True),
        Event("trip", datetime(2024, 4, 1, 9, 0), datetime(2024, 4, 3, 18, 0)),
    ]
    assert store.save_all(tasks) is True

    assert (tmp_path / "tasks.txt").read_text("utf-8").splitlines() == [
        "T | 0 | read book",
        "D | 1 | submit report | 2024-03-15 14:30",
        "E | 0 | trip | 2024-04-01 09:00 | 2024-04-03 18:00",
    ]
    assert store.load_all() == tasks
    assert store.count_tasks() == 3


def test_save_truncates(tmp_path: Path) -> None:
    store = TaskFileStore(tmp_path / "tasks.txt")
    store.save_all([Todo("a"), Todo("b")])
    store.save_all([Todo("c")])
    assert store.load_all() == [Todo("c")]


def test_malformed_lines_are_skipped(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text(
        "T | 0 | one\n"
        "D | 1 | missing time\n"
        "Z | 0 | unknown kind\n"
        "\n"
        "D | 0 | two | 2024-03-15 14:30\n"
        "E | 0 | bad | soon | later\n"
        "E | 1 | three | 2024-04-01 09:00 | 2024-04-03 18:00\n",
        "utf-8",
    )
    store = TaskFileStore(path)

    with caplog.at_level(logging.WARNING, logger="taskpal.tasks.task_store"):
        tasks = store.load_all()

    assert [t.description for t in tasks] == ["one", "two", "three"]
    assert sum("Skipping malformed line" in r.getMessage() for r in caplog.records) == 2


def test_init_failure_raises(tmp_path: Path) -> None:
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("x", "utf-8")
    with pytest.raises(StorageInitError):
        TaskFileStore(blocker / "tasks.txt")


def test_read_failure_raises(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    store = TaskFileStore(path)
    path.unlink()
    path.mkdir()
    with pytest.raises(StorageReadError):
        store.load_all()


def test_undecodable_line_is_skipped(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "tasks.txt"
    path.write_bytes(b"T | 0 | one\nT | 0 | \xff\xfe\r\nT | 1 | two\r\n")

    with caplog.at_level(logging.WARNING, logger="taskpal.tasks.task_store"):
        tasks = TaskFileStore(path).load_all()

    assert tasks == [Todo("one"), Todo("two", is_done=True)]
    assert any("line 2" in r.getMessage() for r in caplog.records)


def test_description_ending_in_pipe_survives_reload(tmp_path: Path) -> None:
    store = TaskFileStore(tmp_path / "tasks.txt")
    tasks = [
        Deadline("x |", datetime(2024, 3, 15, 14, 30)),
        Event("y |", datetime(2024, 4, 1, 9, 0), datetime(2024, 4, 3, 18, 0)),
    ]
    store.save_all(tasks)
    assert TaskFileStore(tmp_path / "tasks.txt").load_all() == tasks


def test_write_failure_is_logged_not_raised(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "tasks.txt"
    store = TaskFileStore(path)
    path.unlink()
    path.mkdir()

    with caplog.at_level(logging.ERROR, logger="taskpal.tasks.task_store"):
        assert store.save_all([Todo("lost")]) is False

    assert any("Failed to save tasks" in r.getMessage() for r in caplog.records)


@pytest.mark.skipif(os.name != "posix" or os.geteuid() == 0, reason="needs POSIX permissions as non-root")
def test_unreadable_file_raises(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    store = TaskFileStore(path)
    path.chmod(0o000)
    try:
        with pytest.raises(StorageReadError):
            store.load_all()
    finally:
        path.chmod(0o600)
