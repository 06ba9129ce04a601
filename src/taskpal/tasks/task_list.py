# src/taskpal/tasks/task_list.py

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from ..core.errors import TaskIndexError
from .task_models import Task, sort_key

SortKey = Callable[[Task], Any]


class TaskList:
    """
    Ordered, mutable task collection.

    Indices here are 0-based; the command layer converts from the 1-based
    numbers users see. Out-of-range indices raise TaskIndexError (an
    IndexError). Negative indices are rejected rather than wrapped.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def length(self) -> int:
        return len(self._tasks)

    def snapshot(self) -> list[Task]:
        return list(self._tasks)

    # ---- mutation ----

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def get(self, index: int) -> Task:
        self._check(index)
        return self._tasks[index]

    def remove(self, index: int) -> Task:
        self._check(index)
        return self._tasks.pop(index)

    def mark_done(self, index: int) -> Task:
        task = self.get(index)
        task.mark_done()
        return task

    def mark_undone(self, index: int) -> Task:
        task = self.get(index)
        task.mark_undone()
        return task

    # ---- queries ----

    def filter(self, predicate: Callable[[Task], bool]) -> Iterator[Task]:
        """Lazily yield matching tasks in list order. Do not mutate while iterating."""
        return (t for t in self._tasks if predicate(t))

    def sorted_view(self, ascending: bool = True, key: SortKey = sort_key) -> list[Task]:
        """
        Return a sorted copy; the stored order is never touched.

        Descending is the exact reverse of ascending (ties included), so the
        two views of an unchanged list always mirror each other.
        """
        out = sorted(self._tasks, key=key)
        if not ascending:
            out.reverse()
        return out

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            raise TaskIndexError(index, len(self._tasks))

