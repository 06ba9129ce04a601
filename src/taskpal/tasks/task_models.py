# src/taskpal/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Final, TypeAlias

# Process-wide point-in-time format (date + 24h hour:minute, no seconds, no tz).
TIME_FORMAT: Final = "%Y-%m-%d %H:%M"
_TIME_RE: Final = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}")

FIELD_SEP: Final = " | "


class TaskKind(StrEnum):
    """Type tag written as the first field of a persisted line."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


def parse_time(text: str) -> datetime:
    """
    Parse `yyyy-MM-dd HH:mm` strictly.

    strptime alone accepts unpadded fields ("2024-3-5 9:00"), which would not
    survive a save/load cycle unchanged, so the shape is checked first.
    """
    if not _TIME_RE.fullmatch(text):
        raise ValueError(f"time does not match yyyy-MM-dd HH:mm: {text!r}")
    return datetime.strptime(text, TIME_FORMAT)


def format_time(dt: datetime) -> str:
    return dt.strftime(TIME_FORMAT)


class _TaskOps:
    """Behavior shared by every task variant (fields live on the dataclasses)."""

    __slots__ = ()

    kind: TaskKind
    description: str
    is_done: bool

    def mark_done(self) -> None:
        self.is_done = True

    def mark_undone(self) -> None:
        self.is_done = False

    def _head(self) -> list[str]:
        return [self.kind.value, "1" if self.is_done else "0", self.description]


@dataclass(slots=True)
class Todo(_TaskOps):
    description: str
    is_done: bool = False

    kind = TaskKind.TODO

    def serialize(self) -> str:
        return FIELD_SEP.join(self._head())

    def sort_key(self) -> tuple[int, datetime]:
        return (0, datetime.min)


@dataclass(slots=True)
class Deadline(_TaskOps):
    description: str
    due_at: datetime
    is_done: bool = False

    kind = TaskKind.DEADLINE

    def serialize(self) -> str:
        return FIELD_SEP.join([*self._head(), format_time(self.due_at)])

    def sort_key(self) -> tuple[int, datetime]:
        return (1, self.due_at)


@dataclass(slots=True)
class Event(_TaskOps):
    # start_at > end_at is accepted as-is.
    description: str
    start_at: datetime
    end_at: datetime
    is_done: bool = False

    kind = TaskKind.EVENT

    def serialize(self) -> str:
        return FIELD_SEP.join(
            [*self._head(), format_time(self.start_at), format_time(self.end_at)]
        )

    def sort_key(self) -> tuple[int, datetime]:
        return (1, self.start_at)


Task: TypeAlias = Todo | Deadline | Event


def sort_key(task: Task) -> tuple[int, datetime]:
    """To-dos first, then dated tasks by their primary time."""
    return task.sort_key()


def parse_task_line(line: str) -> Task | None:
    """
    Decode one persisted line.

    Returns None for an unknown type tag.
    Raises ValueError when the line has too few fields for its tag or a time
    field does not parse.
    """
    head = line.split(FIELD_SEP, 2)
    try:
        kind = TaskKind(head[0])
    except ValueError:
        return None
    if len(head) < 3:
        raise ValueError(f"expected type, done flag and description: {line!r}")
    _, flag, rest = head
    is_done = _done_flag(flag)

    # Time fields are cut from the right, so separators inside the description
    # (even one overlapping its last character, "x |") decode unchanged.
    match kind:
        case TaskKind.TODO:
            return Todo(rest, is_done=is_done)
        case TaskKind.DEADLINE:
            parts = _cut_times(rest, 1, line)
            return Deadline(parts[0], parse_time(parts[1]), is_done=is_done)
        case TaskKind.EVENT:
            parts = _cut_times(rest, 2, line)
            return Event(parts[0], parse_time(parts[1]), parse_time(parts[2]), is_done=is_done)


def _cut_times(rest: str, n: int, line: str) -> list[str]:
    parts = rest.rsplit(FIELD_SEP, n)
    if len(parts) < n + 1:
        raise ValueError(f"expected {n} time field(s): {line!r}")
    return parts


def _done_flag(raw: str) -> bool:
    return raw != "0"
