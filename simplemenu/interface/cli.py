#!/usr/bin/env python3
# simplemenu/interface/cli.py
from __future__ import annotations

"""
Interactive input frontends.

Selection order:
    1) prompt_toolkit (live completion + in-memory history)
    2) readline / pyreadline3 (tab completion + in-memory history)
    3) plain input (last resort, also used when stdin is not a terminal)

History is never written to disk.
"""

import sys
from typing import Callable, Optional

from simplemenu.ui import ANSI_REGEX

# Returns completion candidates for the text before the cursor
CompletionSource = Callable[[str], list[str]]


class BaseCLI:
    """
    Base interface for CLI frontends.

    Subclasses should implement:
        - setup()
        - get_line(prompt)
        - teardown()

    This base also provides context manager support to guarantee teardown.
    """

    def setup(self) -> None:  # pragma: no cover - interface
        ...

    def get_line(self, prompt: str) -> str:  # pragma: no cover - interface
        raise NotImplementedError

    def teardown(self) -> None:  # pragma: no cover - interface
        ...

    # Context manager helpers
    def __enter__(self) -> "BaseCLI":
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.teardown()


class PlainCLI(BaseCLI):
    """input() with no completion."""

    def get_line(self, prompt: str) -> str:
        return input(prompt)


# ===== Preferred: prompt_toolkit =====
class PromptToolkitCLI(BaseCLI):
    """Rich line editor with history and live completion."""

    def __init__(self, completion_source: Optional[CompletionSource] = None) -> None:
        from prompt_toolkit import prompt
        from prompt_toolkit.completion import Completer, Completion
        from prompt_toolkit.formatted_text import ANSI
        from prompt_toolkit.history import InMemoryHistory
        from prompt_toolkit.key_binding import KeyBindings

        self._prompt = prompt
        self._ansi = ANSI
        self._history = InMemoryHistory()
        self._completer = None

        if completion_source is not None:
            class _Completer(Completer):
                def get_completions(self, document, complete_event):
                    text_before_cursor = document.text_before_cursor
                    # only the token under the cursor is replaced
                    current_token = text_before_cursor.lstrip().rsplit(" ", 1)[-1]
                    for word in completion_source(text_before_cursor):
                        yield Completion(word, start_position=-len(current_token))

            self._completer = _Completer()

        # Key bindings to trigger completion when deleting characters.
        kb = KeyBindings()

        @kb.add("backspace")
        def _(event):
            b = event.app.current_buffer
            if b.read_only():
                return
            if b.selection_state:
                b.delete_selection()
            else:
                b.delete_before_cursor(1)
            # show fresh suggestions after deletion
            b.start_completion(select_first=False)

        self._key_bindings = kb

    def get_line(self, prompt: str) -> str:
        return self._prompt(
            self._ansi(prompt),
            history=self._history,
            completer=self._completer,
            complete_while_typing=self._completer is not None,
            key_bindings=self._key_bindings,
        )


# ===== Fallback: readline / pyreadline3 =====
class ReadlineCLI(BaseCLI):
    """Fallback editor with basic completion and history."""

    def __init__(self, completion_source: Optional[CompletionSource] = None) -> None:
        import readline  # type: ignore[attr-defined]

        self.readline = readline
        self._completion_source = completion_source

    def setup(self) -> None:
        self.readline.clear_history()
        if self._completion_source is None:
            return
        self.readline.set_completer_delims(" \t\n")
        source = self._completion_source

        def _complete(text_fragment: str, state_index: int) -> Optional[str]:
            # Build the entire line buffer and return the Nth suggestion
            buffer_text = self.readline.get_line_buffer()
            candidates = source(buffer_text)
            matches = [word for word in candidates if word.startswith(text_fragment)]
            return matches[state_index] if state_index < len(matches) else None

        self.readline.set_completer(_complete)
        self.readline.parse_and_bind("tab: complete")

    def get_line(self, prompt: str) -> str:
        return input(_readline_safe(prompt))

    def teardown(self) -> None:
        self.readline.set_completer(None)
        self.readline.clear_history()


def _readline_safe(prompt: str) -> str:
    """Mark escape sequences as zero-width so readline measures the prompt correctly."""
    return ANSI_REGEX.sub(lambda m: f"\x01{m.group(0)}\x02", prompt)


def make_cli(
    completion_source: Optional[CompletionSource] = None,
    *,
    interactive: Optional[bool] = None,
) -> BaseCLI:
    """
    Factory to select the best available CLI frontend at runtime.
    """
    if interactive is None:
        interactive = sys.stdin.isatty() and sys.stdout.isatty()
    if not interactive:
        return PlainCLI()

    # Try prompt_toolkit first
    try:
        return PromptToolkitCLI(completion_source)
    except ImportError:
        pass
    # Try readline/pyreadline3
    try:
        return ReadlineCLI(completion_source)
    except ImportError:
        # Last resort: plain input with no completion or history
        return PlainCLI()
