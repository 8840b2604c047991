"""Exceptions shared by the scripthelp modules."""

from __future__ import annotations


class ScriptHelpError(Exception):
    """Base exception for scripthelp operations."""


class UnreadableSourceError(ScriptHelpError):
    """Raised when a script file cannot be opened or decoded."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path


class InvalidOptionError(ScriptHelpError):
    """Raised for malformed or unrecognized --key[=value] options."""

    pass


class UnknownCommandError(ScriptHelpError):
    """Raised when the requested command has no handler."""

    def __init__(self, command: str):
        super().__init__(f"Command {command} is not recognized.")
        self.command = command
