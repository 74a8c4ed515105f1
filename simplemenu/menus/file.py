#!/usr/bin/env python3
# simplemenu/menus/file.py
from __future__ import annotations

"""
File menu: load, save and version info, plus a nested copy of itself.

All paths are resolved inside the session workspace; the document loaded
here is what `save` writes back and what `view show` previews.
"""

import logging
from typing import Sequence

from simplemenu.commands import Command, CommandRegistry, Continue, bind_submenu, command, menu
from simplemenu.errors import InvalidInputError
from simplemenu.interface.parser import check_arg_count, check_arg_range, check_not_empty
from simplemenu.interface.session import Document, Session
from simplemenu.menus.base import make_exit, make_info
from simplemenu.security import validate_file_path, validate_file_size

logger = logging.getLogger(__name__)

DEFAULT_SAVE_NAME = "untitled.txt"


@command(name="load", aliases=["l"], usage="load <filename>",
         example="load notes.txt", summary="Load a file from the filesystem")
def load(arguments: Sequence[str], session: Session) -> Continue:
    check_arg_count(arguments, 1)
    filename = arguments[0]
    check_not_empty(filename, "Filename")

    path = validate_file_path(filename, session.workspace)
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {filename}")
    size = path.stat().st_size
    validate_file_size(size)

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidInputError(f"'{filename}' is not UTF-8 text") from exc

    session.document = Document(path, text)
    logger.debug("Loaded %s (%d bytes)", path, size)
    return Continue(
        f"Loading file: {filename}\n"
        f"Loaded {session.document.line_count} lines ({size} bytes)."
    )


@command(name="save", aliases=["s"], usage="save [filename]",
         example="save notes.txt", summary="Save a file to the filesystem")
def save(arguments: Sequence[str], session: Session) -> Continue:
    check_arg_range(arguments, 0, 1)
    filename = arguments[0] if arguments else DEFAULT_SAVE_NAME
    check_not_empty(filename, "Filename")

    path = validate_file_path(filename, session.workspace)
    text = session.document.text if session.document is not None else ""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")

    session.document = Document(path, text)
    size = len(text.encode("utf-8"))
    logger.debug("Saved %s (%d bytes)", path, size)
    return Continue(f"Saving file: {filename}\nWrote {size} bytes.")


@command(name="vers", aliases=["v"], summary="Show version information about the application")
def vers(arguments: Sequence[str], session: Session) -> Continue:
    check_arg_count(arguments, 0)
    return Continue(f"{session.app_name} > version {session.version}")


def build_file_menu() -> Command:
    """
    Build the `file` menu command.

    The menu lists itself as `file`, so each `file` entered from inside it
    pushes another level until the depth bound is reached.
    """
    file_menu = menu("file", "File operations: Load, Save, Version, Info, Exit", aliases=["f"])
    registry = CommandRegistry(
        [load, save, vers, file_menu, make_info("file"), make_exit()],
        title="file",
    )
    return bind_submenu(file_menu, registry)
