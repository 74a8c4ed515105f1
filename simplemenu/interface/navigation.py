#!/usr/bin/env python3
# simplemenu/interface/navigation.py
from __future__ import annotations

"""
Depth-bounded navigation stack.

The stack holds the active menu levels, root first and current last.
MAX_DEPTH bounds the submenus entered above the root.
Invariants:
    0 <= entered <= MAX_DEPTH  (depth == entered + 1)
    push/pop are the only mutators and leave the stack untouched on failure.
"""

from typing import Iterator, NamedTuple

from simplemenu.commands import CommandRegistry
from simplemenu.errors import AlreadyAtRootError, MaxDepthExceededError

MAX_DEPTH = 10


class Level(NamedTuple):
    registry: CommandRegistry
    label: str


class NavigationStack:
    """Ordered menu levels for one interactive session."""

    __slots__ = ("_levels", "_max_depth")

    def __init__(self, root: CommandRegistry, *, max_depth: int = MAX_DEPTH) -> None:
        if max_depth < 0:
            raise ValueError("max_depth must be >= 0")
        self._max_depth = max_depth
        self._levels: list[Level] = [Level(root, "")]

    # ---------------- Transitions ----------------

    def push(self, registry: CommandRegistry, label: str = "") -> None:
        """Enter a submenu. Raises MaxDepthExceededError at the bound."""
        if self.entered >= self._max_depth:
            raise MaxDepthExceededError(self._max_depth)
        self._levels.append(Level(registry, label or registry.title))

    def pop(self) -> Level:
        """Leave the current submenu. Raises AlreadyAtRootError at root."""
        if len(self._levels) <= 1:
            raise AlreadyAtRootError()
        return self._levels.pop()

    def reset(self) -> None:
        """Drop every entered level, keeping the root."""
        del self._levels[1:]

    # ---------------- Queries ----------------

    def current(self) -> CommandRegistry:
        return self._levels[-1].registry

    def root(self) -> CommandRegistry:
        return self._levels[0].registry

    @property
    def depth(self) -> int:
        return len(self._levels)

    @property
    def entered(self) -> int:
        """Number of submenus entered above the root."""
        return len(self._levels) - 1

    @property
    def max_depth(self) -> int:
        return self._max_depth

    def is_root(self) -> bool:
        return len(self._levels) == 1

    def breadcrumb(self) -> list[str]:
        """Labels of entered levels (root excluded), outermost first."""
        return [level.label for level in self._levels[1:]]

    def __iter__(self) -> Iterator[Level]:
        return iter(tuple(self._levels))

    def __len__(self) -> int:
        return len(self._levels)
