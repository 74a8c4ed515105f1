#!/usr/bin/env python3
# simplemenu/menus/context.py
from __future__ import annotations

"""
Edit and view menus.

Both menus share the same two leaves, parameterized by context name:
    axis [name]   record the active axis for the context
    show          display the context state
"""

import re
from typing import Sequence

from simplemenu.commands import Command, Continue, command, menu
from simplemenu.errors import InvalidInputError
from simplemenu.interface.parser import check_arg_count, check_arg_range, check_not_empty
from simplemenu.interface.session import Session
from simplemenu.menus.base import make_exit, make_info
from simplemenu.security import sanitize_for_display

DEFAULT_AXIS = "default"
_AXIS_NAME_RE = re.compile(r"[A-Za-z0-9_-]+")

_VERBS = {"edit": "editing", "view": "viewing"}


def make_axis(context: str) -> Command:
    verb = _VERBS.get(context, context)

    @command(name="axis", aliases=["a"], usage="axis [name]", example="axis x_main",
             summary=f"Configure axis properties for the {verb} environment")
    def axis(arguments: Sequence[str], session: Session) -> Continue:
        check_arg_range(arguments, 0, 1)
        axis_name = arguments[0] if arguments else DEFAULT_AXIS
        check_not_empty(axis_name, "Axis name")
        if not _AXIS_NAME_RE.fullmatch(axis_name):
            raise InvalidInputError(
                "Axis name can only contain alphanumeric characters, underscores, and hyphens")
        session.axes[context] = axis_name
        return Continue(f"Configuring axis properties for {verb}: {axis_name}")

    return axis


def make_show(context: str) -> Command:

    @command(name="show", aliases=["sh"],
             summary=f"Display current {context} state and configuration")
    def show(arguments: Sequence[str], session: Session) -> Continue:
        check_arg_count(arguments, 0)
        lines = [
            f"Displaying current {context} state...",
            f"{context.capitalize()} mode: Active",
            f"Axis: {session.axes.get(context, DEFAULT_AXIS)}",
        ]
        document = session.document
        if document is None:
            lines.append("Document: None")
            return Continue("\n".join(lines))

        lines.append(f"Document: {document.path.name} ({document.line_count} lines)")
        if context == "view":
            limit = session.preferences.max_list_items
            preview = document.text.splitlines()[:limit]
            lines.append("")
            lines.extend(sanitize_for_display(line) for line in preview)
            if document.line_count > limit:
                lines.append(f"... and {document.line_count - limit} more")
        return Continue("\n".join(lines))

    return show


def build_edit_menu() -> Command:
    return menu(
        "edit",
        "Edit operations: Axis, Show, Info, Exit",
        [make_axis("edit"), make_show("edit"), make_info("edit"), make_exit()],
        aliases=["e"],
    )


def build_view_menu() -> Command:
    return menu(
        "view",
        "View operations: Axis, Show, Info, Exit",
        [make_axis("view"), make_show("view"), make_info("view"), make_exit()],
        aliases=["v"],
    )
