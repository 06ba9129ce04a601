# src/taskpal/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- opens the task file and loads the task list,
- wires the command interpreter into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.errors import StorageInitError
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskFileStore
from .commands import CommandInterpreter

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    try:
        settings.data_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageInitError(f"cannot create data dir {settings.data_dir}: {e}") from e


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().

    Raises StorageInitError / StorageReadError; both are fatal for the caller.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskFileStore(settings.tasks_path)
    tasks = TaskList(store.load_all())

    return AppState(
        settings=settings,
        store=store,
        tasks=tasks,
        interpreter=CommandInterpreter(tasks, store),
    )
