#!/usr/bin/env python3
# simplemenu/ui/utils/ansi.py
from __future__ import annotations

import ctypes
import os
import re
from typing import Optional

# SGR codes for the styles the menu renders with.
_SGR_CODES = {
    "reset": 0,
    "bold": 1,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "magenta": 35,
    "cyan": 36,
    "bright_black": 90,
}

ANSI = {style: f"\x1b[{code}m" for style, code in _SGR_CODES.items()}

ANSI_REGEX = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")

_ENABLE_VIRTUAL_TERMINAL_PROCESSING = 0x0004
_STD_OUTPUT_HANDLE = -11

_vt_enabled: Optional[bool] = None


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return ANSI_REGEX.sub("", text)


def _windows_terminal_speaks_ansi() -> bool:
    env = os.environ
    return bool(
        env.get("WT_SESSION")
        or env.get("ANSICON")
        or env.get("ConEmuANSI") == "ON"
        or env.get("TERM", "").startswith(("xterm", "vt100"))
    )


def _switch_console_to_vt() -> bool:
    try:
        kernel32 = ctypes.windll.kernel32  # type: ignore[attr-defined]
        handle = kernel32.GetStdHandle(_STD_OUTPUT_HANDLE)
        mode = ctypes.c_uint()
        if handle in (0, -1) or not kernel32.GetConsoleMode(handle, ctypes.byref(mode)):
            return False
        return bool(kernel32.SetConsoleMode(handle, mode.value | _ENABLE_VIRTUAL_TERMINAL_PROCESSING))
    except (AttributeError, OSError):
        return False


def enable_windows_vt() -> bool:
    """
    Report whether escape sequences reach the terminal as colours.

    Always true off Windows. On Windows the console is switched to VT mode
    once; the answer is cached for the process.
    """
    global _vt_enabled
    if _vt_enabled is None:
        _vt_enabled = (
            os.name != "nt"
            or _windows_terminal_speaks_ansi()
            or _switch_console_to_vt()
        )
    return _vt_enabled


def rgb(r: int, g: int, b: int) -> str:
    """24-bit foreground colour, channels clamped to 0..255."""
    r, g, b = (max(0, min(255, c)) for c in (r, g, b))
    return f"\x1b[38;2;{r};{g};{b}m"


def colorize(text: str, *styles: str) -> str:
    """Wrap text in the named styles and reset afterwards. Unknown names are ignored."""
    seq = "".join(ANSI[s] for s in styles if s in ANSI)
    return f"{seq}{text}{ANSI['reset']}" if seq else text
