#!/usr/bin/env python3
# simplemenu/security/__init__.py
from __future__ import annotations

"""
Filesystem path and display sanitization for file commands.

Provides:
- Strict path resolution inside the workspace (`validate_file_path`).
- Size guard for loaded files (`validate_file_size`, `MAX_FILE_SIZE`).
- Control character stripping for echoed file content (`sanitize_for_display`).
"""

from .sanitize import (
    MAX_FILE_SIZE,
    sanitize_for_display,
    validate_file_path,
    validate_file_size,
)

__all__ = [
    "MAX_FILE_SIZE",
    "sanitize_for_display",
    "validate_file_path",
    "validate_file_size",
]
