#!/usr/bin/env python3
# simplemenu/errors.py
from __future__ import annotations

"""
Exception hierarchy for the menu shell.

Construction-time errors (DuplicateAliasError, ConfigError) abort startup.
Everything else is raised inside a dispatch and converted to a user-facing
message at the Dispatcher boundary.
"""

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from simplemenu.commands.command_types import Command


class Severity(Enum):
    """How loudly an error is rendered."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class MenuError(Exception):
    """Base class for every error raised by the menu shell."""

    severity: Severity = Severity.ERROR


class DuplicateAliasError(MenuError, ValueError):
    """Two commands of one registry normalize to the same lookup key."""

    severity = Severity.CRITICAL

    def __init__(self, token: str, existing: "Command", incoming: "Command") -> None:
        self.token = token
        self.existing = existing
        self.incoming = incoming
        super().__init__(
            f"Alias '{token}' of command '{incoming.name}' collides with "
            f"command '{existing.name}'."
        )


class UnknownCommandError(MenuError):
    """Input token does not resolve at the current menu level."""

    severity = Severity.WARNING

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Invalid command: '{token}'")


class NavigationError(MenuError):
    """A navigation stack transition was rejected."""

    severity = Severity.WARNING


class MaxDepthExceededError(NavigationError):
    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__(f"Maximum menu depth ({max_depth}) reached.")


class AlreadyAtRootError(NavigationError):
    def __init__(self) -> None:
        super().__init__("Already at root level.")


class ArgumentCountError(MenuError, TypeError):
    """A command received the wrong number of arguments."""

    severity = Severity.WARNING

    def __init__(self, expected: int, found: int) -> None:
        self.expected = expected
        self.found = found
        qualifier = "many" if found > expected else "few"
        super().__init__(
            f"Too {qualifier} arguments: expected {expected}, found {found}")


class InvalidInputError(MenuError, ValueError):
    severity = Severity.WARNING

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid input: {detail}")


class PathValidationError(MenuError, PermissionError):
    """A user-supplied path is empty, traverses upwards or escapes the workspace."""


class ConfigError(MenuError, ValueError):
    severity = Severity.CRITICAL


def severity_of(exc: BaseException) -> Severity:
    """Return the display severity for any exception."""
    if isinstance(exc, MenuError):
        return exc.severity
    return Severity.ERROR
