# tests/test_task_list.py

from __future__ import annotations

from datetime import datetime

import pytest

from taskpal.core.errors import TaskIndexError
from taskpal.tasks.task_list import TaskList
from taskpal.tasks.task_models import Deadline, Event, Todo


def _sample() -> TaskList:
    return TaskList(
        [
            Deadline("report", datetime(2024, 3, 15, 14, 30)),
            Todo("read book"),
            Event("trip", datetime(2024, 1, 1, 9, 0), datetime(2024, 1, 2, 9, 0)),
            Todo("buy milk"),
        ]
    )


def test_add_get_remove() -> None:
    tl = TaskList()
    tl.add(Todo("a"))
    tl.add(Todo("b"))
    assert tl.length() == 2
    assert tl.get(1).description == "b"
    removed = tl.remove(0)
    assert removed.description == "a"
    assert [t.description for t in tl] == ["b"]


@pytest.mark.parametrize("index", [-1, 2, 99])
def test_out_of_range_index_raises_and_leaves_list(index: int) -> None:
    tl = TaskList([Todo("a"), Todo("b")])
    for op in (tl.get, tl.remove, tl.mark_done, tl.mark_undone):
        with pytest.raises(IndexError):
            op(index)
    assert len(tl) == 2
    assert not any(t.is_done for t in tl)


def test_index_error_is_task_index_error() -> None:
    with pytest.raises(TaskIndexError) as ei:
        TaskList().get(0)
    assert ei.value.length == 0


def test_mark_returns_task_and_is_idempotent() -> None:
    tl = TaskList([Todo("a")])
    assert tl.mark_done(0).is_done
    assert tl.mark_done(0).is_done
    assert not tl.mark_undone(0).is_done


def test_filter_is_lazy_and_ordered() -> None:
    tl = _sample()
    gen = tl.filter(lambda t: "o" in t.description)
    assert not isinstance(gen, list)
    assert [t.description for t in gen] == ["report", "read book"]


def test_sorted_view_does_not_mutate() -> None:
    tl = _sample()
    asc = tl.sorted_view(ascending=True)
    desc = tl.sorted_view(ascending=False)

    assert [t.description for t in asc] == ["read book", "buy milk", "trip", "report"]
    assert desc == list(reversed(asc))
    assert tl.get(0).description == "report"
    assert [t.description for t in tl] == ["report", "read book", "trip", "buy milk"]


def test_snapshot_is_a_copy() -> None:
    tl = _sample()
    snap = tl.snapshot()
    snap.clear()
    assert len(tl) == 4


def test_index_error_message_names_empty_list() -> None:
    with pytest.raises(TaskIndexError, match="list is empty"):
        TaskList().remove(0)
    with pytest.raises(TaskIndexError, match=r"\(0\.\.1\)"):
        TaskList([Todo("a"), Todo("b")]).get(5)
