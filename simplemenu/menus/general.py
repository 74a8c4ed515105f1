#!/usr/bin/env python3
# simplemenu/menus/general.py
from __future__ import annotations

"""Root-level commands that are not menus: help and quit."""

from typing import Sequence

from simplemenu.commands import Continue, Failed, Terminate, command
from simplemenu.interface.handler import format_command_help, format_listing
from simplemenu.interface.parser import check_arg_count, check_arg_range
from simplemenu.interface.repl import FAREWELL
from simplemenu.interface.session import Session


@command(name="help", aliases=["h"], usage="help [command]", example="help file",
         summary="Help information for the available commands")
def help_command(arguments: Sequence[str], session: Session) -> Continue | Failed:
    check_arg_range(arguments, 0, 1)
    colored = session.preferences.colored_prompt
    navigation = session.navigation

    if not arguments:
        title = f"{session.app_name} Help"
        listing = navigation.root().list() if navigation is not None else ()
        return Continue("\n".join([
            title,
            "=" * len(title),
            "Available commands:",
            format_listing(listing, colored=colored),
            "",
            "Type a command name to enter its submenu or see its options.",
            "Use 'help <command>' for specific command help.",
        ]))

    name = arguments[0]
    command_obj = None
    if navigation is not None:
        # current level first, then the root
        command_obj = navigation.current().get(name) or navigation.root().get(name)
    if command_obj is None:
        return Failed(f"No help available for command: {name}")
    return Continue(format_command_help(command_obj, colored=colored))


@command(name="quit", aliases=["q"], summary="Quit the program and return to the shell")
def quit_command(arguments: Sequence[str], session: Session) -> Terminate:
    check_arg_count(arguments, 0)
    return Terminate(FAREWELL)
