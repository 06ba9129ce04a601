# src/taskpal/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "taskpal.log"

# Store logs one line per save; on the terminal only its problems matter.
_QUIET_BELOW_WARNING = ("taskpal.tasks.task_store",)


class _PromptFriendlyFilter(logging.Filter):
    """Keeps the REPL readable: own records pass, everything else only at ERROR."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name in _QUIET_BELOW_WARNING:
            return record.levelno >= logging.WARNING
        if record.name.startswith("taskpal."):
            return True
        return record.levelno >= logging.ERROR


def _console_handler(level: int, fmt: logging.Formatter) -> logging.Handler:
    h = logging.StreamHandler(sys.stderr)
    h.setLevel(level)
    h.setFormatter(fmt)
    h.addFilter(_PromptFriendlyFilter())
    return h


def _file_handler(path: Path, level: int, fmt: logging.Formatter) -> logging.Handler:
    h = logging.FileHandler(str(path), encoding="utf-8")
    h.setLevel(level)
    h.setFormatter(fmt)
    return h


def setup_logging(
    *,
    log_dir: str | Path = ".local/taskpal",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Point the root logger at stderr (filtered) and at `<log_dir>/taskpal.log` (unfiltered).

    Replaces whatever handlers the root logger had, so calling it twice does
    not duplicate output. `warnings.warn` ends up in the log as 'py.warnings'.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)
    root.addHandler(_console_handler(console_level, fmt))
    root.addHandler(_file_handler(log_dir / LOG_FILE_NAME, file_level, fmt))

    logging.captureWarnings(True)
