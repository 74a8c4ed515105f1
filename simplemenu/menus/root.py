#!/usr/bin/env python3
# simplemenu/menus/root.py
from __future__ import annotations

from simplemenu.commands import CommandRegistry
from simplemenu.menus.base import make_info
from simplemenu.menus.context import build_edit_menu, build_view_menu
from simplemenu.menus.file import build_file_menu
from simplemenu.menus.general import help_command, quit_command


def build_root_registry() -> CommandRegistry:
    """
    Build the full menu tree and return its root level.

    Raises DuplicateAliasError if any level has colliding names or aliases.
    """
    return CommandRegistry(
        [
            build_file_menu(),
            build_edit_menu(),
            build_view_menu(),
            help_command,
            quit_command,
            make_info(),
        ],
        title="simple-menu main menu",
    )
