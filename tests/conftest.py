# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskpal.cli.bootstrap import create_initial_state
from taskpal.cli.commands import CommandInterpreter
from taskpal.core.state import AppState
from taskpal.tasks.task_list import TaskList

from .fakes import FakeTaskRepo


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and the console loop.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="taskpal-test",
        log_level="DEBUG",
        show_timestamps=False,
        data_dir=data_dir,
        tasks_path=data_dir / "tasks.txt",
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState wired through the real bootstrap.

    NOTE: We keep the real file store here because the file contents after
    each command are part of what we want to test.
    """
    return create_initial_state(settings=settings)


@pytest.fixture()
def repo() -> FakeTaskRepo:
    return FakeTaskRepo()


@pytest.fixture()
def interp(repo: FakeTaskRepo) -> CommandInterpreter:
    return CommandInterpreter(TaskList(), repo)
