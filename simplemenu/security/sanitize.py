#!/usr/bin/env python3
# simplemenu/security/sanitize.py
from __future__ import annotations

import os
import unicodedata
from pathlib import Path

from simplemenu.errors import MenuError, PathValidationError

# Largest file the shell agrees to load (100 MiB)
MAX_FILE_SIZE = 100 * 1024 * 1024

# Characters kept by sanitize_for_display despite being control characters
_KEEP_CONTROLS = {"\n", "\t"}


def validate_file_path(user_path: str | os.PathLike[str], root: str | os.PathLike[str]) -> Path:
    """
    Resolve a user-supplied path strictly inside `root`.

    Rejects empty input, any '..' segment (even one that would stay inside
    the root) and anything that resolves outside the root, symlinks included.
    The target does not need to exist.
    """
    raw = str(user_path)
    if not raw.strip():
        raise PathValidationError("File path cannot be empty")

    path_obj = Path(raw)
    if ".." in path_obj.parts:
        raise PathValidationError("Path traversal not allowed (.. components detected)")

    root_path = Path(root).resolve()
    resolved_path = (root_path / path_obj).resolve()
    if not resolved_path.is_relative_to(root_path):
        raise PathValidationError(f"Access denied: '{raw}' is outside the workspace")
    return resolved_path


def validate_file_size(size: int) -> None:
    if size > MAX_FILE_SIZE:
        raise MenuError(
            f"File too large: {size} bytes (maximum: {MAX_FILE_SIZE} bytes)")


def sanitize_for_display(text: str) -> str:
    """Drop control characters (escape sequences included) except newlines and tabs."""
    return "".join(
        ch for ch in text
        if ch in _KEEP_CONTROLS or unicodedata.category(ch) != "Cc"
    )
