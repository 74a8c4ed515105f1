#!/usr/bin/env python3
# simplemenu/menus/__init__.py
from __future__ import annotations

"""
The shipped menu tree.

Layout:
    root: file, edit, view, help, quit (+ hidden info)
    file: load, save, vers, file (nested), exit (+ hidden info)
    edit/view: axis, show, exit (+ hidden info)
"""

from .root import build_root_registry
from .file import build_file_menu
from .context import build_edit_menu, build_view_menu

__all__ = [
    "build_root_registry",
    "build_file_menu",
    "build_edit_menu",
    "build_view_menu",
]
