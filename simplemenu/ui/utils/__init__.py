#!/usr/bin/env python3
# simplemenu/ui/utils/__init__.py
from __future__ import annotations
from .ansi import (
    ANSI,
    ANSI_REGEX,
    strip_ansi,
    enable_windows_vt,
    colorize,
    rgb,
)
from .console import print_line

__all__ = [
    "ANSI",
    "ANSI_REGEX",
    "strip_ansi",
    "enable_windows_vt",
    "colorize",
    "rgb",
    "print_line",
]
