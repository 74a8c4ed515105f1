#!/usr/bin/env python3
# simplemenu/commands/commands.py
from __future__ import annotations

"""
Command construction helpers.

This module provides:
- command: decorator turning a `(arguments, session) -> Outcome` function
  into a Command.
- menu: factory for a menu node owning a nested CommandRegistry.
- bind_submenu: attach a registry to a menu command built before it.
"""

from typing import Callable, Iterable

from simplemenu.commands.command_types import Command, CommandCallback
from simplemenu.commands.registry import CommandRegistry


def command(
    *,
    name: str | None = None,
    summary: str | None = None,
    aliases: Iterable[str] | None = None,
    usage: str | None = None,
    example: str | None = None,
    hidden: bool = False,
) -> Callable[[CommandCallback], Command]:
    """
    Decorator to build a leaf Command from a function.

    - Function name is transformed from snake_case to kebab-case for `name` if not provided.
    - `summary` falls back to the first line of the docstring.
    """

    def wrapper(func: CommandCallback) -> Command:
        doc_line = ((getattr(func, "__doc__", None) or "").strip().splitlines() or [""])[0]
        command_obj = Command(
            name=name or getattr(func, "__name__", "").replace("_", "-"),
            summary=summary or doc_line,
            callback=func,
            aliases=tuple(aliases or ()),
            usage=usage or "",
            example=example or "",
            hidden=hidden,
        )
        command_obj.module = getattr(func, "__module__", "") or ""
        return command_obj

    return wrapper


def menu(
    name: str,
    summary: str,
    commands: Iterable[Command] | None = None,
    *,
    aliases: Iterable[str] | None = None,
    title: str | None = None,
) -> Command:
    """
    Build a menu command.

    When `commands` is None the submenu is left unbound so it can later be
    pointed at a registry that contains the menu command itself.
    """
    submenu = None
    if commands is not None:
        submenu = CommandRegistry(commands, title=title or name)
    return Command(
        name=name,
        summary=summary,
        aliases=tuple(aliases or ()),
        submenu=submenu,
        usage=name,
    )


def bind_submenu(command_obj: Command, registry: CommandRegistry) -> Command:
    """Point an unbound menu command at `registry`."""
    if command_obj.submenu is not None:
        raise ValueError(f"Menu '{command_obj.name}' is already bound.")
    command_obj.submenu = registry
    return command_obj
