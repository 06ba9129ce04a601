# src/taskpal/core/errors.py

"""
Error taxonomy.

Storage errors are fatal at startup. Command errors are recoverable: the
interpreter turns them into a failed CommandResult and leaves state untouched.
"""

from __future__ import annotations


class TaskPalError(Exception):
    """Base class for every error raised by taskpal."""


# ---- storage ----


class StorageError(TaskPalError):
    pass


class StorageInitError(StorageError):
    """Task file or its directory could not be created."""


class StorageReadError(StorageError):
    """Task file exists but could not be read."""


# ---- commands ----


class CommandError(TaskPalError):
    """A single command was rejected; `command` is the raw input line."""

    def __init__(self, message: str, *, command: str = "") -> None:
        super().__init__(message)
        self.command = command


class UnknownCommandError(CommandError):
    def __init__(self, verb: str, *, command: str = "") -> None:
        super().__init__(f"unknown command: {verb!r}", command=command)
        self.verb = verb


class InvalidCommandError(CommandError):
    pass


class MissingArgumentError(CommandError):
    def __init__(self, marker: str, *, command: str = "") -> None:
        super().__init__(f"missing argument for {marker}", command=command)
        self.marker = marker


class InvalidArgumentError(CommandError):
    def __init__(self, verb: str, argument: str, *, command: str = "") -> None:
        super().__init__(f"invalid argument for {verb}: {argument!r}", command=command)
        self.verb = verb
        self.argument = argument


class InvalidTimeFormatError(CommandError):
    def __init__(self, text: str, *, command: str = "") -> None:
        super().__init__(f"invalid time: {text!r}", command=command)
        self.text = text


class EmptyDescriptionError(CommandError):
    def __init__(self, kind: str, *, command: str = "") -> None:
        super().__init__(f"description of a {kind} cannot be empty", command=command)
        self.kind = kind


class TaskIndexError(CommandError, IndexError):
    def __init__(self, index: int, length: int, *, command: str = "") -> None:
        if length == 0:
            message = f"task index {index} out of range (list is empty)"
        else:
            message = f"task index {index} out of range (0..{length - 1})"
        super().__init__(message, command=command)
        self.index = index
        self.length = length


class EmptyListError(TaskIndexError):
    """Raised for index commands on an empty list or with a negative number."""
