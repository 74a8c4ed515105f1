#!/usr/bin/env python3
# simplemenu/ui/utils/console.py
from __future__ import annotations

import sys


def print_line(text: str = "", *, file=None, flush: bool = False) -> None:
    """Write one line to `file`, or to whatever sys.stdout is at call time."""
    stream = file if file is not None else sys.stdout
    stream.write(f"{text}\n")
    if flush:
        stream.flush()
