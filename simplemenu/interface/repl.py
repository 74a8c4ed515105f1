#!/usr/bin/env python3
# simplemenu/interface/repl.py
from __future__ import annotations

"""
The interactive session loop.

read line -> record history -> dispatch -> render -> repeat, until the
session stops (quit) or input ends (EOF). Ctrl-C while reading only
cancels the current line.
"""

import logging
import sys
from typing import Callable, Optional, TextIO

from simplemenu.interface.cli import BaseCLI
from simplemenu.interface.completion import suggest
from simplemenu.interface.dispatcher import Dispatcher
from simplemenu.interface.handler import HELP_TEXT, render_result
from simplemenu.interface.session import Session
from simplemenu.ui import colorize, print_line

logger = logging.getLogger(__name__)

FAREWELL = "Goodbye!"
INTERRUPT_MESSAGE = "Operation interrupted. Type 'quit' to exit."


def _supports_unicode(stream: TextIO) -> bool:
    encoding = (getattr(stream, "encoding", None) or "").lower().replace("-", "")
    return encoding.startswith("utf")


def completion_source(dispatcher: Dispatcher) -> Callable[[str], list[str]]:
    """Bind completion to whatever level the dispatcher is currently at."""
    session = dispatcher.session

    def _source(text_before_cursor: str) -> list[str]:
        return suggest(text_before_cursor, dispatcher.current(), session.history)

    return _source


def render_banner(session: Session) -> str:
    title = f"{session.app_name} v{session.version}"
    if session.preferences.colored_prompt:
        title = colorize(title, "bold", "green")
    return "\n".join([
        title,
        "Type a command name, or press Enter to list the commands of this menu.",
        HELP_TEXT,
    ])


def run_loop(
    cli: BaseCLI,
    dispatcher: Dispatcher,
    *,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """
    Drive one interactive session to completion and return the exit code.

    Results go to `out`, failures to `err`. OSError from the terminal is not
    handled here; the caller maps it to an exit code.
    """
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    session = dispatcher.session
    unicode = _supports_unicode(out)

    with cli:
        while session.running:
            try:
                line = cli.get_line(session.prompt())
            except KeyboardInterrupt:
                print_line(file=out)
                print_line(INTERRUPT_MESSAGE, file=out)
                continue
            except EOFError:
                logger.debug("End of input, leaving session")
                print_line(file=out)
                print_line(FAREWELL, file=out)
                session.quit()
                break

            session.add_to_history(line)
            result = dispatcher.dispatch(line)
            text = render_result(
                result,
                colored=session.preferences.colored_prompt,
                unicode=unicode,
                max_items=session.preferences.max_list_items,
            )
            if text:
                print_line(text, file=out if result.ok else err, flush=True)

    return 0
