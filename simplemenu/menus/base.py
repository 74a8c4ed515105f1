#!/usr/bin/env python3
# simplemenu/menus/base.py
from __future__ import annotations

"""Commands mounted in every menu: a hidden `info` and, below the root, `exit`."""

from typing import Optional, Sequence

from simplemenu.commands import Command, Continue, ExitSubmenu, command
from simplemenu.interface.parser import check_arg_count
from simplemenu.interface.session import Session


def make_info(menu_name: Optional[str] = None) -> Command:
    """Build the `info` command for a menu; None means the root menu."""

    @command(name="info", aliases=["i"], hidden=True,
             summary="Display information about the current menu")
    def info(arguments: Sequence[str], session: Session) -> Continue:
        check_arg_count(arguments, 0)
        label = menu_name or f"{session.app_name} main"
        lines = [f"{label} menu information:", "Available commands in this menu:"]

        registry = session.navigation.current() if session.navigation is not None else None
        if registry is not None:
            width = max((len(c.name) for c in registry), default=0)
            lines.extend(
                f"  {c.name.ljust(width)}  {c.summary}" for c in registry if not c.hidden)

        lines.append("Type any command name to execute it.")
        if menu_name is None:
            lines.append("Use 'quit' (or 'q') to leave the program.")
        else:
            lines.append("Use 'exit' (or 'e') to return to parent menu.")
        return Continue("\n".join(lines))

    return info


def make_exit() -> Command:
    @command(name="exit", aliases=["e"], summary="Exit to the parent menu")
    def exit_menu(arguments: Sequence[str], session: Session) -> ExitSubmenu:
        check_arg_count(arguments, 0)
        return ExitSubmenu()

    return exit_menu
