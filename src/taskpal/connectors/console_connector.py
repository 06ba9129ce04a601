# src/taskpal/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.messages import GREETING, render_result
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def run_console_loop(state: AppState) -> None:
    """Read commands from stdin until `bye`, EOF or Ctrl+C."""
    settings = state.settings
    app_name = str(getattr(settings, "app_name", "taskpal"))
    show_ts = bool(getattr(settings, "show_timestamps", False))

    def say(text: str) -> None:
        if show_ts:
            print(f"[{_ts_local()}] {text}")
        else:
            print(text)

    interpreter = state.interpreter
    help_text = interpreter.build_help()

    logger.info("Console connector started (tasks=%d).", len(state.tasks))
    say(GREETING.format(name=app_name))

    while True:
        try:
            line = input(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not line:
            continue

        result = interpreter.execute(line)
        say(render_result(result, help_text))

        if result.exit_requested:
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")
