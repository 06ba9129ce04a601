# src/taskpal/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is read from disk except an optional .env file.
- Values are read-only after startup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKPAL"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Console ----
    show_timestamps: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_path: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskpal").strip() or "taskpal"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        show_timestamps = _env_bool(_k("SHOW_TIMESTAMPS"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskpal"))
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / "tasks.txt")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            show_timestamps=show_timestamps,
            data_dir=data_dir,
            tasks_path=tasks_path,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
