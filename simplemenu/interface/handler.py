#!/usr/bin/env python3
# simplemenu/interface/handler.py
from __future__ import annotations

"""
Rendering of dispatch results, listings and help text.

The dispatch engine returns structured data; this module turns it into the
strings the session loop prints. Nothing here touches the navigation stack.
"""

from typing import Iterable, Optional

from simplemenu.commands import Command, CommandListing
from simplemenu.errors import Severity, severity_of
from simplemenu.interface.dispatcher import DispatchResult, ResultKind
from simplemenu.ui import colorize, format_table

# Short hint shown at startup and used in unknown command errors
HELP_TEXT = "Type 'help <command>' for more information on a specific command."

_ICONS = {
    Severity.WARNING: ("⚠️", "!"),
    Severity.ERROR: ("❌", "X"),
    Severity.CRITICAL: ("💥", "!!"),
}

_COLORS = {
    Severity.WARNING: "yellow",
    Severity.ERROR: "red",
    Severity.CRITICAL: "magenta",
}

# ---------------------------------------------------------------------------
# Listings and help
# ---------------------------------------------------------------------------


def format_listing(
    listing: Iterable[CommandListing],
    *,
    colored: bool = True,
    max_items: Optional[int] = None,
) -> str:
    """Render the visible commands of a level as a table."""
    visible = [row for row in listing if not row.hidden]
    if not visible:
        return "No commands available."

    shown = visible if max_items is None else visible[:max_items]
    rows = []
    for row in shown:
        name = colorize(row.name, "bold", "cyan") if colored else row.name
        alias_display = ", ".join(a.upper() for a in row.aliases) if row.aliases else "-"
        rows.append([name, alias_display, row.summary])

    text = format_table(rows, headers=["Command", "Aliases", "Description"])
    hidden_count = len(visible) - len(shown)
    if hidden_count > 0:
        text += f"\n... and {hidden_count} more"
    return text


def format_command_help(command_obj: Command, *, colored: bool = True) -> str:
    """Render detailed help for one command."""
    alias_text = ", ".join(command_obj.aliases) if command_obj.aliases else "(none)"
    title = command_obj.name.upper()
    lines = [
        colorize(title, "bold", "green") if colored else title,
        "=" * len(title),
        f"Name:        {command_obj.name}",
        f"Aliases:     {alias_text}",
        f"Description: {command_obj.summary or '(none)'}",
        f"Usage:       {command_obj.usage}",
    ]
    if command_obj.example:
        lines.append(f"Example:     {command_obj.example}")
    if command_obj.submenu is not None:
        lines.append("")
        lines.append("Subcommands:")
        lines.append(format_listing(command_obj.submenu.list(), colored=colored))
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Errors and results
# ---------------------------------------------------------------------------


def format_error(
    message: str,
    severity: Severity = Severity.ERROR,
    *,
    colored: bool = True,
    unicode: bool = True,
) -> str:
    """Render a one-line error with a severity icon."""
    fancy, plain = _ICONS[severity]
    line = f"{fancy if unicode else plain} {message}"
    return colorize(line, "bold", _COLORS[severity]) if colored else line


def render_result(
    result: DispatchResult,
    *,
    colored: bool = True,
    unicode: bool = True,
    max_items: Optional[int] = None,
) -> Optional[str]:
    """
    Turn a DispatchResult into printable text.

    Returns None when nothing should be printed (e.g. entering a submenu,
    where the prompt itself reflects the change).
    """
    kind = result.kind

    if kind is ResultKind.LISTING:
        return format_listing(result.listing, colored=colored, max_items=max_items)

    if kind in (ResultKind.OUTPUT, ResultKind.TERMINATED):
        return result.message or None

    if kind in (ResultKind.ENTERED, ResultKind.EXITED):
        return None

    if kind is ResultKind.UNKNOWN_COMMAND:
        lines = [format_error(result.message, Severity.WARNING, colored=colored, unicode=unicode)]
        if result.suggestions:
            lines.append(f"Did you mean: {', '.join(result.suggestions)}?")
        lines.append(format_listing(result.listing, colored=colored, max_items=max_items))
        lines.append(HELP_TEXT)
        return "\n".join(lines)

    # FAILED, NAVIGATION_ERROR, INTERRUPTED
    severity = severity_of(result.error) if result.error is not None else Severity.ERROR
    text = format_error(result.message, severity, colored=colored, unicode=unicode)
    if isinstance(result.error, TypeError) and result.command is not None:
        text += f"\nUsage: {result.command.usage}"
    return text
