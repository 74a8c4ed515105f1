#!/usr/bin/env python3
# simplemenu/commands/alias_index.py
from __future__ import annotations

"""
Case-insensitive lookup from command names and aliases to commands.

Keys are the case-folded form of the whole token. Matching is exact:
no prefixes, no fuzzy matching. The index is built once and never mutated.
"""

from typing import Iterable, Iterator, Mapping, Optional

from simplemenu.commands.command_types import Command
from simplemenu.errors import DuplicateAliasError


def normalize(token: str) -> str:
    """Fold a raw token into its lookup key."""
    return token.strip().casefold()


class AliasIndex(Mapping[str, Command]):
    """Read-only mapping of normalized name/alias -> Command."""

    __slots__ = ("_commands_by_key", "_matched_by_key")

    def __init__(self, commands: Iterable[Command]) -> None:
        # Normalized key -> Command
        self._commands_by_key: dict[str, Command] = {}
        # Normalized key -> spelling that was registered
        self._matched_by_key: dict[str, str] = {}

        for command_obj in commands:
            for token in (command_obj.name, *command_obj.aliases):
                key = normalize(token)
                existing = self._commands_by_key.get(key)
                if existing is None:
                    self._commands_by_key[key] = command_obj
                    self._matched_by_key[key] = token
                elif existing is not command_obj:
                    raise DuplicateAliasError(token, existing, command_obj)
                # same command listing a token twice (e.g. alias == name) is harmless

    # ---------------- Lookup ----------------

    def lookup(self, token: str) -> Optional[Command]:
        """Return the command bound to `token`, or None."""
        return self._commands_by_key.get(normalize(token))

    def spelling(self, token: str) -> Optional[str]:
        """Return the registered spelling that `token` matched, or None."""
        return self._matched_by_key.get(normalize(token))

    def keys_for(self, command_obj: Command) -> list[str]:
        return [k for k, v in self._commands_by_key.items() if v is command_obj]

    # ---------------- Mapping protocol ----------------

    def __getitem__(self, key: str) -> Command:
        return self._commands_by_key[normalize(key)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._commands_by_key)

    def __len__(self) -> int:
        return len(self._commands_by_key)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and normalize(key) in self._commands_by_key
