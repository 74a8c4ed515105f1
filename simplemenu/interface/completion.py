#!/usr/bin/env python3
# simplemenu/interface/completion.py
from __future__ import annotations

"""
Command line completion utilities.

Suggestions are always computed against the registry of the current menu
level, so completion follows the user through submenus:
- First token: command names and aliases of the level, plus history entries.
- 'help <partial>': command names and aliases of the level.
- Anything else: no suggestions.
"""

from typing import Iterable

from simplemenu.commands import CommandRegistry


def _split_current_token(raw_input: str) -> tuple[list[str], str]:
    """
    Return (parts, current_prefix).

    If trailing whitespace exists, append an empty token to signal a new one.
    """
    if not raw_input:
        return [], ""
    parts = raw_input.split()
    if raw_input[-1].isspace():
        parts.append("")
    current_prefix = parts[-1] if parts else ""
    return parts, current_prefix


def suggest(
    text_before_cursor: str,
    registry: CommandRegistry,
    history: Iterable[str] = (),
) -> list[str]:
    """Produce sorted, de-duplicated suggestions for the current buffer."""
    raw_buffer = text_before_cursor.lstrip()
    parts, current_prefix = _split_current_token(raw_buffer)
    prefix_key = current_prefix.casefold()

    if len(parts) <= 1:
        words = {w for w in registry.names() if w.casefold().startswith(prefix_key)}
        # whole previous lines are offered too, only while typing the first word
        words.update(h for h in history if h.startswith(current_prefix) and h.strip())
        return sorted(words)

    command_obj = registry.get(parts[0])
    if command_obj is not None and command_obj.name == "help" and len(parts) == 2:
        return sorted({w for w in registry.names() if w.casefold().startswith(prefix_key)})

    return []
