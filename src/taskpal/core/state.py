# src/taskpal/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..cli.commands import CommandInterpreter
from ..tasks.task_list import TaskList
from .ports import TaskRepo


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    store: TaskRepo
    tasks: TaskList
    interpreter: CommandInterpreter
