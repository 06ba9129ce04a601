# src/taskpal/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The command interpreter depends on this Protocol instead of the concrete file
store, which keeps storage swappable and makes testing easier.
"""

from collections.abc import Iterable
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Whole-list persistence: read everything once, rewrite everything after each change."""

    def load_all(self) -> list[Task]: ...

    def save_all(self, tasks: Iterable[Task]) -> bool: ...
