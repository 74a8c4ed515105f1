#!/usr/bin/env python3
# simplemenu/interface/session.py
from __future__ import annotations

"""
Per-run session context.

One Session is created by the startup code, threaded through every command
execution and discarded when the loop ends. Nothing here is persisted.
"""

from collections import deque
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence

from simplemenu import __version__
from simplemenu.interface.navigation import NavigationStack
from simplemenu.ui import ANSI, rgb

# 24-bit green used for the application name in the prompt
PROMPT_COLOR = rgb(0, 215, 135)
DEFAULT_APP_NAME = "simple-menu"
DEFAULT_HISTORY_SIZE = 100


@dataclass(slots=True)
class Preferences:
    colored_prompt: bool = True
    show_suggestions: bool = True
    max_list_items: int = 50


@dataclass(slots=True)
class Document:
    """Text held in memory between `load` and `save`."""
    path: Path
    text: str

    @property
    def line_count(self) -> int:
        return len(self.text.splitlines())


@dataclass(slots=True)
class Session:
    """
    Mutable context handed to every command.

    `navigation` is set by the Dispatcher and is read-only for commands:
    they change levels by returning outcomes, never by touching the stack.
    """

    app_name: str = DEFAULT_APP_NAME
    version: str = __version__
    workspace: Path = field(default_factory=Path.cwd)
    preferences: Preferences = field(default_factory=Preferences)
    history_size: int = DEFAULT_HISTORY_SIZE
    running: bool = True
    document: Optional[Document] = None
    axes: dict[str, str] = field(default_factory=dict)
    navigation: Optional[NavigationStack] = field(default=None, repr=False)
    _history: deque = field(default_factory=deque, repr=False)

    # ---------------- Lifecycle ----------------

    def quit(self) -> None:
        self.running = False

    # ---------------- History ----------------

    def add_to_history(self, line: str) -> None:
        """Record a line, skipping blanks and consecutive duplicates."""
        if self.history_size <= 0 or not line.strip():
            return
        if self._history and self._history[-1] == line:
            return
        self._history.append(line)
        while len(self._history) > self.history_size:
            self._history.popleft()

    @property
    def history(self) -> tuple[str, ...]:
        return tuple(self._history)

    # ---------------- Prompt ----------------

    def breadcrumb(self) -> list[str]:
        return self.navigation.breadcrumb() if self.navigation is not None else []

    def prompt(self) -> str:
        return render_prompt(
            self.app_name, self.breadcrumb(), colored=self.preferences.colored_prompt)


def render_prompt(app_name: str, breadcrumb: Sequence[str], *, colored: bool = True) -> str:
    """
    Render the context-aware prompt.

    Examples (uncolored):
        'simple-menu > '
        'simple-menu ~ file > load > '
    """
    name = f"{PROMPT_COLOR}{app_name}{ANSI['reset']}" if colored else app_name
    if not breadcrumb:
        return f"{name} > "
    return f"{name} ~ {' > '.join(breadcrumb)} > "
