# src/taskpal/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from ..core.errors import StorageInitError, StorageReadError
from .task_models import Task, parse_task_line

logger = logging.getLogger(__name__)


class TaskFileStore:
    """
    Flat text file task store, one serialized task per line.

    Failure policy:
    - creating the file/directory fails -> StorageInitError
    - reading the file fails            -> StorageReadError
    - a single malformed line           -> skipped (logged), load continues
    - writing fails                     -> logged, not raised; the next save retries

    The file is opened and closed inside each call; no handle is kept.
    """

    def __init__(self, path: str | Path = "tasks.txt") -> None:
        self._path = Path(path)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.touch(exist_ok=True)
        except OSError as e:
            raise StorageInitError(f"cannot create task file {self._path}: {e}") from e
        logger.info("TaskFileStore ready path=%s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    def load_all(self) -> list[Task]:
        out: list[Task] = []
        skipped = 0
        try:
            # Decoded per line: an undecodable line counts as malformed.
            with self._path.open("rb") as f:
                for lineno, raw in enumerate(f, start=1):
                    try:
                        line = raw.decode("utf-8").rstrip("\r\n")
                        if not line.strip():
                            continue
                        task = parse_task_line(line)
                    except ValueError as e:
                        skipped += 1
                        logger.warning("Skipping malformed line %d in %s: %s", lineno, self._path, e)
                        continue
                    if task is None:
                        logger.debug("Ignoring line %d with unknown type tag", lineno)
                        continue
                    out.append(task)
        except OSError as e:
            raise StorageReadError(f"cannot read task file {self._path}: {e}") from e

        logger.info("Loaded %d tasks from %s (skipped=%d)", len(out), self._path, skipped)
        return out

    def save_all(self, tasks: Iterable[Task]) -> bool:
        try:
            with self._path.open("w", encoding="utf-8") as f:
                n = 0
                for task in tasks:
                    f.write(task.serialize())
                    f.write("\n")
                    n += 1
        except OSError:
            logger.exception("Failed to save tasks to %s", self._path)
            return False
        logger.debug("Saved %d tasks to %s", n, self._path)
        return True

    def count_tasks(self) -> int:
        return len(self.load_all())
