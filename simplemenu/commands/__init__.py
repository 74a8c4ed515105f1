#!/usr/bin/env python3
# simplemenu/commands/__init__.py
from __future__ import annotations

"""
Package for command definitions, lookup and registries.

Provides:
- Data structures and protocols (`Command`, `CommandCallback`, outcome variants).
- Case-insensitive alias lookup (`AliasIndex`, `normalize`).
- Immutable per-level registries and resolution results (`CommandRegistry`).
- Construction helpers (`command`, `menu`, `bind_submenu`).
"""


# Re-export from submodules
from .command_types import (
    Command,
    CommandCallback,
    Continue,
    EnterSubmenu,
    ExitSubmenu,
    Failed,
    Outcome,
    Terminate,
)
from .alias_index import AliasIndex, normalize
from .registry import (
    CommandListing,
    CommandRegistry,
    ListRequest,
    NoMatch,
    Resolution,
    Resolved,
)
from .commands import bind_submenu, command, menu

__all__ = [
    "Command",
    "CommandCallback",
    "Continue",
    "EnterSubmenu",
    "ExitSubmenu",
    "Failed",
    "Outcome",
    "Terminate",
    "AliasIndex",
    "normalize",
    "CommandListing",
    "CommandRegistry",
    "ListRequest",
    "NoMatch",
    "Resolution",
    "Resolved",
    "bind_submenu",
    "command",
    "menu",
]
