#!/usr/bin/env python3
# simplemenu/interface/__init__.py
from __future__ import annotations

"""
Package for the interactive console interface and command dispatch.

Provides:
- Navigation stack and per-run session context.
- Line splitting and argument count validation.
- Command dispatcher and result / help formatting.
- Token-aware completion helpers.
- CLI frontends with history and completion (prompt_toolkit / readline / plain).
- The session loop.
"""


# State FIRST (dispatcher and handler depend on it)
from .navigation import MAX_DEPTH, Level, NavigationStack
from .session import Document, Preferences, Session, render_prompt

# Parser utilities
from .parser import check_arg_count, check_arg_range, check_not_empty, split_line

# Command dispatcher / help
from .dispatcher import DispatchResult, Dispatcher, ResultKind
from .handler import HELP_TEXT, format_command_help, format_error, format_listing, render_result

# Completion
from .completion import suggest

# CLI frontends and loop
from .cli import BaseCLI, PlainCLI, PromptToolkitCLI, ReadlineCLI, make_cli
from .repl import FAREWELL, INTERRUPT_MESSAGE, completion_source, render_banner, run_loop

__all__ = [
    # state
    "MAX_DEPTH",
    "Level",
    "NavigationStack",
    "Document",
    "Preferences",
    "Session",
    "render_prompt",
    # parser
    "check_arg_count",
    "check_arg_range",
    "check_not_empty",
    "split_line",
    # dispatch / handler
    "DispatchResult",
    "Dispatcher",
    "ResultKind",
    "HELP_TEXT",
    "format_command_help",
    "format_error",
    "format_listing",
    "render_result",
    # completion
    "suggest",
    # cli / loop
    "BaseCLI",
    "PlainCLI",
    "PromptToolkitCLI",
    "ReadlineCLI",
    "make_cli",
    "FAREWELL",
    "INTERRUPT_MESSAGE",
    "completion_source",
    "render_banner",
    "run_loop",
]
