#!/usr/bin/env python3
# simplemenu/commands/command_types.py
from __future__ import annotations

"""
Command data structures and protocols.

This module defines:
- Outcome variants returned by every command execution
  (Continue, EnterSubmenu, ExitSubmenu, Terminate, Failed).
- CommandCallback: the callable protocol for a leaf command implementation.
- Command: a named action with aliases and a summary, optionally owning the
  registry of a nested menu.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol, Sequence, Union

from simplemenu.errors import ArgumentCountError

if TYPE_CHECKING:  # pragma: no cover - typing only
    from simplemenu.commands.registry import CommandRegistry


# ---------------- Outcomes ----------------

@dataclass(frozen=True, slots=True)
class Continue:
    """Stay at the current level. `message` is printed when non-empty."""
    message: str = ""


@dataclass(frozen=True, slots=True)
class EnterSubmenu:
    """Push `registry` onto the navigation stack; `label` feeds the breadcrumb."""
    registry: "CommandRegistry"
    label: str = ""


@dataclass(frozen=True, slots=True)
class ExitSubmenu:
    """Pop the current level (rejected at root)."""


@dataclass(frozen=True, slots=True)
class Terminate:
    """End the interactive session."""
    message: str = ""


@dataclass(frozen=True, slots=True)
class Failed:
    """The command could not complete; `reason` is shown to the user."""
    reason: str
    error: BaseException | None = field(default=None, compare=False)


Outcome = Union[Continue, EnterSubmenu, ExitSubmenu, Terminate, Failed]


class CommandCallback(Protocol):
    """Protocol for any leaf command function."""

    def __call__(self, arguments: Sequence[str], session: Any) -> Outcome:  # pragma: no cover - signature only
        ...


# ---------------- Command ----------------

@dataclass(slots=True)
class Command:
    """
    A command valid at one menu level.

    Important fields:
        name: Canonical name, unique (case-insensitively) within its registry.
        summary: One-line description for listings and help.
        callback: Function implementing a leaf action.
        aliases: Extra names resolving to the same command.
        submenu: Registry entered when this command is a menu node.
        usage: Usage line rendered by help (defaults to the name).
        example: One-line example usage string (optional).
        hidden: Resolvable but left out of rendered listings.
        module: Python module path where the command is defined.
    """

    name: str
    summary: str
    callback: CommandCallback | None = None
    aliases: tuple[str, ...] = ()
    submenu: "CommandRegistry | None" = field(default=None, repr=False)
    usage: str = ""
    example: str = ""
    hidden: bool = False
    module: str = field(default="", repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Command name must be a non-empty string.")
        if any(ch.isspace() for ch in self.name):
            raise ValueError(f"Command name {self.name!r} must not contain whitespace.")
        # keep first occurrence order, drop exact duplicates
        self.aliases = tuple(dict.fromkeys(self.aliases))
        for alias in self.aliases:
            if not alias or any(ch.isspace() for ch in alias):
                raise ValueError(f"Invalid alias {alias!r} for command '{self.name}'.")
        self.summary = " ".join(self.summary.split())
        if not self.usage:
            self.usage = self.name

    @property
    def is_menu(self) -> bool:
        return self.submenu is not None

    def execute(self, arguments: Sequence[str], session: Any) -> Outcome:
        """Run the command and return the outcome that drives navigation."""
        if self.callback is not None:
            return self.callback(arguments, session)
        if self.submenu is not None:
            if arguments:
                raise ArgumentCountError(expected=0, found=len(arguments))
            return EnterSubmenu(self.submenu, self.name)
        return Failed(f"Command '{self.name}' has no action.")
