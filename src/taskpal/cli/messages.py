# src/taskpal/cli/messages.py

"""User-facing wording for command results."""

from __future__ import annotations

from collections.abc import Iterable

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
from ..tasks.task_models import Deadline, Event, Task, Todo
from .commands import CommandResult, Verb

DISPLAY_TIME_FORMAT = "%b %d %Y %H:%M"

GREETING = "Hello! I'm {name}. What can I do for you?"
GOODBYE = "Bye. Hope to see you again soon!"


def describe_task(task: Task) -> str:
    box = "X" if task.is_done else " "
    head = f"[{task.kind.value}][{box}] {task.description}"
    match task:
        case Todo():
            return head
        case Deadline(due_at=due_at):
            return f"{head} (by: {due_at.strftime(DISPLAY_TIME_FORMAT)})"
        case Event(start_at=start_at, end_at=end_at):
            return (
                f"{head} (from: {start_at.strftime(DISPLAY_TIME_FORMAT)}"
                f" to: {end_at.strftime(DISPLAY_TIME_FORMAT)})"
            )


def _count(n: int) -> str:
    return f"Now you have {n} task{'' if n == 1 else 's'} in the list."


def _numbered(tasks: Iterable[Task]) -> list[str]:
    return [f"{i}. {describe_task(t)}" for i, t in enumerate(tasks, start=1)]


def render_error(err: CommandError, help_text: str = "") -> str:
    match err:
        case UnknownCommandError(verb=""):
            text = "Please type a command."
        case UnknownCommandError(verb=verb):
            text = f"Sorry, I don't know what '{verb}' means."
        case InvalidCommandError():
            return f"'{err.command}' needs a task number, e.g. mark 2."
        case MissingArgumentError(marker=marker):
            return f"'{err.command}' is missing {marker}; please provide it."
        case InvalidArgumentError(verb="sort"):
            return "Please use 'sort asc' or 'sort desc'."
        case InvalidArgumentError(verb="find", argument=""):
            return "Please tell me what to find, e.g. find book."
        case InvalidArgumentError(verb=verb, argument=argument):
            return f"'{argument}' is not a valid argument for {verb}."
        case InvalidTimeFormatError(text=bad):
            return f"I can't read the time '{bad}'. Use yyyy-MM-dd HH:mm, e.g. 2024-03-15 14:30."
        case EmptyDescriptionError(kind=kind):
            return f"The description of a {kind} cannot be empty."
        case EmptyListError(length=0):
            return "Your task list is empty."
        case EmptyListError():
            return "Task numbers start at 1."
        case TaskIndexError(index=index, length=length):
            return f"There is no task {index + 1}; you have {length} task{'' if length == 1 else 's'}."
        case _:
            return str(err)
    return f"{text}\n{help_text}" if help_text else text


def render_result(result: CommandResult, help_text: str = "") -> str:
    if result.error is not None:
        return render_error(result.error, help_text)

    match result.verb:
        case Verb.LIST:
            if not result.tasks:
                return "Your task list is empty."
            return "\n".join(["Here are the tasks in your list:", *_numbered(result.tasks)])
        case Verb.SORT:
            order = "ascending" if result.ascending else "descending"
            if not result.tasks:
                return "Your task list is empty."
            return "\n".join([f"Here are your tasks in {order} order:", *_numbered(result.tasks)])
        case Verb.FIND:
            if not result.tasks:
                return f"No tasks match '{result.pattern}'."
            return "\n".join(["Here are the matching tasks in your list:", *_numbered(result.tasks)])
        case Verb.TODO | Verb.DEADLINE | Verb.EVENT:
            return f"Got it. I've added this task:\n  {describe_task(result.task)}\n{_count(result.total)}"
        case Verb.MARK:
            return f"Nice! I've marked this task as done:\n  {describe_task(result.task)}"
        case Verb.UNMARK:
            return f"OK, I've marked this task as not done yet:\n  {describe_task(result.task)}"
        case Verb.DELETE:
            return f"Noted. I've removed this task:\n  {describe_task(result.task)}\n{_count(result.total)}"
        case Verb.BYE:
            return GOODBYE
    return ""
