# src/taskpal/cli/commands.py

"""
Command interpreter.

One line in, one CommandResult out. The first whitespace-delimited token is the
verb (matched upper-cased); the rest of the line, leading whitespace included,
is handed to the verb's handler. Handlers validate everything before touching
the task list, so a rejected command never leaves a half-applied change.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from ..core.errors import (
    CommandError,
    EmptyDescriptionError,
    EmptyListError,
    InvalidArgumentError,
    InvalidCommandError,
    InvalidTimeFormatError,
    MissingArgumentError,
    TaskIndexError,
    UnknownCommandError,
)
from ..core.ports import TaskRepo
from ..tasks.task_list import TaskList
from ..tasks.task_models import Deadline, Event, Task, Todo, parse_time

logger = logging.getLogger(__name__)

_VERB_RE = re.compile(r"(\S+)(.*)", re.DOTALL)
_EVENT_SPLIT_RE = re.compile(r"\s+/from\s+|\s+/to\s+")
_NUMBER_RE = re.compile(r"-?[0-9]+")
BY_MARKER = " /by "


class Verb(StrEnum):
    LIST = "LIST"
    SORT = "SORT"
    TODO = "TODO"
    DEADLINE = "DEADLINE"
    EVENT = "EVENT"
    MARK = "MARK"
    UNMARK = "UNMARK"
    DELETE = "DELETE"
    FIND = "FIND"
    BYE = "BYE"


@dataclass(frozen=True, slots=True)
class CommandResult:
    """
    Outcome of one command.

    - task: the task created, marked, unmarked or deleted
    - tasks: the listing produced by list/find/sort
    - total: task count after the command ran
    """

    verb: Verb | None
    command: str
    task: Task | None = None
    tasks: tuple[Task, ...] = ()
    total: int = 0
    error: CommandError | None = None
    exit_requested: bool = False
    ascending: bool | None = None
    pattern: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


CommandHandler = Callable[["CommandInterpreter", str, str], CommandResult]


class CommandInterpreter:
    """Verb registry bound to one task list and its store."""

    def __init__(self, tasks: TaskList, store: TaskRepo) -> None:
        self.tasks = tasks
        self.store = store
        self._handlers: dict[Verb, CommandHandler] = {}
        self._help: dict[Verb, str] = {}
        for verb, handler, help_text in _DEFAULT_COMMANDS:
            self.register(verb, handler, help_text)

    def register(self, verb: Verb, handler: CommandHandler, help_text: str) -> None:
        self._handlers[verb] = handler
        self._help[verb] = help_text

    def execute(self, line: str) -> CommandResult:
        command = line.strip()
        verb: Verb | None = None
        try:
            verb, args = self._split(command)
            result = self._handlers[verb](self, args, command)
        except CommandError as e:
            if not e.command:
                e.command = command
            logger.debug("Command rejected verb=%s error=%s: %s", verb, type(e).__name__, e)
            return CommandResult(verb=verb, command=command, total=len(self.tasks), error=e)

        logger.debug("Command ok verb=%s total=%d", verb, result.total)
        return result

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for help_text in self._help.values():
            lines.append(f"  {help_text}")
        return "\n".join(lines)

    # ---- helpers used by handlers ----

    def _split(self, command: str) -> tuple[Verb, str]:
        m = _VERB_RE.match(command)
        if not m:
            raise UnknownCommandError("", command=command)
        token, args = m.group(1), m.group(2)
        try:
            verb = Verb(token.upper())
        except ValueError:
            raise UnknownCommandError(token, command=command) from None
        if verb not in self._handlers:
            raise UnknownCommandError(token, command=command)
        return verb, args

    def _save(self) -> None:
        # Write failures are reported by the store, never raised.
        self.store.save_all(self.tasks)

    def _add(self, verb: Verb, task: Task, command: str) -> CommandResult:
        self.tasks.add(task)
        self._save()
        return CommandResult(verb=verb, command=command, task=task, total=len(self.tasks))

    def _index(self, args: str, command: str) -> int:
        """Convert a 1-based task number to a checked 0-based index."""
        raw = args.strip()
        if not _NUMBER_RE.fullmatch(raw):
            raise InvalidCommandError(f"not a task number: {raw!r}", command=command)
        number = int(raw)
        n = len(self.tasks)
        if number < 0 or n == 0:
            raise EmptyListError(number - 1, n, command=command)
        if not 1 <= number <= n:
            raise TaskIndexError(number - 1, n, command=command)
        return number - 1


def _time(text: str, command: str) -> datetime:
    try:
        return parse_time(text)
    except ValueError:
        raise InvalidTimeFormatError(text, command=command) from None


# ---- handlers ----


def cmd_list(ctx: CommandInterpreter, args: str, command: str) -> CommandResult:
    return CommandResult(
        verb=Verb.LIST, command=command, tasks=tuple(ctx.tasks), total=len(ctx.tasks)
    )


def cmd_sort(ctx: CommandInterpreter, args: str, command: str) -> CommandResult:
    """
    sort asc   -> to-dos first, then dated tasks earliest first
    sort desc  -> exact reverse of asc
    """
    param = args.strip()
    match param.lower():
        case "asc":
            ascending = True
        case "desc":
            ascending = False
        case _:
            raise InvalidArgumentError("sort", param, command=command)
    return CommandResult(
        verb=Verb.SORT,
        command=command,
        tasks=tuple(ctx.tasks.sorted_view(ascending)),
        total=len(ctx.tasks),
        ascending=ascending,
    )


def cmd_todo(ctx: CommandInterpreter, args: str, command: str) -> CommandResult:
    description = args.strip()
    if not description:
        raise EmptyDescriptionError("todo", command=command)
    return ctx._add(Verb.TODO, Todo(description), command)


def cmd_deadline(ctx: CommandInterpreter, args: str, command: str) -> CommandResult:
    parts = args.split(BY_MARKER, 1)
    if len(parts) < 2 or not parts[1].strip():
        raise MissingArgumentError("/by", command=command)
    description = parts[0].strip()
    if not description:
        raise EmptyDescriptionError("deadline", command=command)
    due_at = _time(parts[1].strip(), command)
    return ctx._add(Verb.DEADLINE, Deadline(description, due_at), command)


def cmd_event(ctx: CommandInterpreter, args: str, command: str) -> CommandResult:
    parts = _EVENT_SPLIT_RE.split(args)
    if len(parts) < 3 or not parts[1].strip() or not parts[2].strip():
        raise MissingArgumentError("/from and /to", command=command)
    if len(parts) > 3:
        raise InvalidArgumentError("event", args.strip(), command=command)
    description = parts[0].strip()
    if not description:
        raise EmptyDescriptionError("event", command=command)
    start_at = _time(parts[1].strip(), command)
    end_at = _time(parts[2].strip(), command)
    return ctx._add(Verb.EVENT, Event(description, start_at, end_at), command)


def cmd_mark(ctx: CommandInterpreter, args: str, command: str) -> CommandResult:
    task = ctx.tasks.mark_done(ctx._index(args, command))
    ctx._save()
    return CommandResult(verb=Verb.MARK, command=command, task=task, total=len(ctx.tasks))


def cmd_unmark(ctx: CommandInterpreter, args: str, command: str) -> CommandResult:
    task = ctx.tasks.mark_undone(ctx._index(args, command))
    ctx._save()
    return CommandResult(verb=Verb.UNMARK, command=command, task=task, total=len(ctx.tasks))


def cmd_delete(ctx: CommandInterpreter, args: str, command: str) -> CommandResult:
    task = ctx.tasks.remove(ctx._index(args, command))
    ctx._save()
    return CommandResult(verb=Verb.DELETE, command=command, task=task, total=len(ctx.tasks))


def cmd_find(ctx: CommandInterpreter, args: str, command: str) -> CommandResult:
    pattern = args.strip()
    if not pattern:
        raise InvalidArgumentError("find", pattern, command=command)
    try:
        rx = re.compile(pattern)
    except re.error:
        raise InvalidArgumentError("find", pattern, command=command) from None
    matches = ctx.tasks.filter(lambda t: rx.search(t.description) is not None)
    return CommandResult(
        verb=Verb.FIND,
        command=command,
        tasks=tuple(matches),
        total=len(ctx.tasks),
        pattern=pattern,
    )


def cmd_bye(ctx: CommandInterpreter, args: str, command: str) -> CommandResult:
    return CommandResult(
        verb=Verb.BYE, command=command, total=len(ctx.tasks), exit_requested=True
    )


_DEFAULT_COMMANDS: tuple[tuple[Verb, CommandHandler, str], ...] = (
    (Verb.LIST, cmd_list, "list                                  show all tasks"),
    (Verb.SORT, cmd_sort, "sort asc|desc                         show tasks ordered by date"),
    (Verb.TODO, cmd_todo, "todo <desc>                           add a to-do"),
    (Verb.DEADLINE, cmd_deadline, "deadline <desc> /by <time>            add a deadline"),
    (Verb.EVENT, cmd_event, "event <desc> /from <time> /to <time>  add an event"),
    (Verb.MARK, cmd_mark, "mark <n>                              mark task n as done"),
    (Verb.UNMARK, cmd_unmark, "unmark <n>                            mark task n as not done"),
    (Verb.DELETE, cmd_delete, "delete <n>                            remove task n"),
    (Verb.FIND, cmd_find, "find <pattern>                        search descriptions"),
    (Verb.BYE, cmd_bye, "bye                                   save and quit"),
)
