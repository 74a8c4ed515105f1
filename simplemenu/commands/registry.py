#!/usr/bin/env python3
# simplemenu/commands/registry.py
from __future__ import annotations

"""
Command registry for one menu level.

A registry owns a fixed list of commands (registration order is presentation
order) plus the derived AliasIndex. It is immutable once built: there is no
runtime add/remove.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, NamedTuple, Optional, Union

from simplemenu.commands.alias_index import AliasIndex, normalize
from simplemenu.commands.command_types import Command


class CommandListing(NamedTuple):
    """One row of a level listing."""
    name: str
    aliases: tuple[str, ...]
    summary: str
    hidden: bool = False


# ---------------- Resolution results ----------------

@dataclass(frozen=True, slots=True)
class Resolved:
    command: Command
    alias: str


@dataclass(frozen=True, slots=True)
class NoMatch:
    token: str
    listing: tuple[CommandListing, ...]


@dataclass(frozen=True, slots=True)
class ListRequest:
    listing: tuple[CommandListing, ...]


Resolution = Union[Resolved, NoMatch, ListRequest]


class CommandRegistry:
    """Holds the commands of one menu level and resolves tokens against them."""

    __slots__ = ("_title", "_commands", "_index")

    def __init__(self, commands: Iterable[Command], *, title: str = "") -> None:
        self._title = title
        self._commands: tuple[Command, ...] = tuple(commands)
        # Raises DuplicateAliasError before the registry becomes usable
        self._index = AliasIndex(self._commands)

    @property
    def title(self) -> str:
        return self._title

    # ---------------- Lookup ----------------

    def resolve(self, token: str) -> Resolution:
        """
        Resolve a raw token.

        Empty or whitespace-only tokens are a listing request, not a miss.
        """
        if not token or not token.strip():
            return ListRequest(self.list())
        command_obj = self._index.lookup(token)
        if command_obj is None:
            return NoMatch(normalize(token), self.list())
        return Resolved(command_obj, self._index.spelling(token) or command_obj.name)

    def get(self, name: str) -> Optional[Command]:
        """Return the command by primary name or alias, or None if not found."""
        return self._index.lookup(name)

    def list(self) -> tuple[CommandListing, ...]:
        """Return (name, aliases, summary) rows in registration order."""
        return tuple(
            CommandListing(c.name, c.aliases, c.summary, c.hidden)
            for c in self._commands
        )

    def all(self) -> list[Command]:
        return list(self._commands)

    def names(self, *, include_hidden: bool = False) -> list[str]:
        """Return primary names and aliases, for completion."""
        words: list[str] = []
        for command_obj in self._commands:
            if command_obj.hidden and not include_hidden:
                continue
            words.append(command_obj.name)
            words.extend(command_obj.aliases)
        return words

    # ---------------- Container protocol ----------------

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __contains__(self, token: object) -> bool:
        return token in self._index

    def __repr__(self) -> str:
        names = ", ".join(c.name for c in self._commands)
        return f"CommandRegistry(title={self._title!r}, commands=[{names}])"
