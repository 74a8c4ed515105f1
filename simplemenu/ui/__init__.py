#!/usr/bin/env python3
# simplemenu/ui/__init__.py
from __future__ import annotations
# Re-export convenient top-level API
from .utils import (
    ANSI,
    ANSI_REGEX,
    strip_ansi,
    enable_windows_vt,
    print_line,
    colorize,
    rgb,
)
from .static import (
    format_table,
    init_logger,
    ColorizingStreamHandler,
    PlainFormatter,
)

__all__ = [
    "ANSI",
    "ANSI_REGEX",
    "strip_ansi",
    "enable_windows_vt",
    "colorize",
    "rgb",
    "print_line",
    "format_table",
    "init_logger",
    "ColorizingStreamHandler",
    "PlainFormatter",
]
