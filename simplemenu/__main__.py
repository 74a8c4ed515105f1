#!/usr/bin/env python3
# simplemenu/__main__.py
from __future__ import annotations
"""
Entry point: `python -m simplemenu` or the `simple-menu` console script.

Exit codes:
    0  normal termination (quit or end of input)
    1  unrecoverable terminal / filesystem error
    2  fatal startup error (invalid configuration, colliding aliases)
"""

import logging
import sys

from simplemenu.boot import boot_sequence
from simplemenu.errors import ConfigError, DuplicateAliasError, Severity
from simplemenu.interface import completion_source, format_error, make_cli, render_banner, run_loop
from simplemenu.ui import print_line

logger = logging.getLogger("simplemenu")


def main() -> int:
    try:
        state = boot_sequence()
    except (ConfigError, DuplicateAliasError) as exc:
        print_line(format_error(str(exc), Severity.CRITICAL, colored=False, unicode=False),
                   file=sys.stderr)
        return 2
    except OSError as exc:
        print_line(format_error(f"Startup failed: {exc}", colored=False, unicode=False),
                   file=sys.stderr)
        return 1

    config = state.config
    source = completion_source(state.dispatcher) if config.enable_completion else None
    cli = make_cli(source)

    if config.show_banner:
        print_line(render_banner(state.session))

    try:
        return run_loop(cli, state.dispatcher)
    except OSError as exc:
        logger.debug("Session aborted", exc_info=True)
        print_line(format_error(f"I/O error: {exc}", colored=False, unicode=False),
                   file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
