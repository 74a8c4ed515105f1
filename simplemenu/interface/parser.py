#!/usr/bin/env python3
# simplemenu/interface/parser.py
from __future__ import annotations

"""
Input line parsing and argument validation helpers.

Responsibilities:
- Split a raw line into a command token and its arguments (whitespace only,
  no quoting or escaping grammar).
- Validate argument counts for leaf commands.
"""

from typing import Sequence

from simplemenu.errors import ArgumentCountError, InvalidInputError


def split_line(input_line: str) -> tuple[str, list[str]]:
    """
    Return (command_token, arguments).

    Examples:
        'load  notes.txt' -> ('load', ['notes.txt'])
        '   '            -> ('', [])
    """
    parts = input_line.split()
    if not parts:
        return "", []
    return parts[0], parts[1:]


def check_arg_count(arguments: Sequence[str], expected: int) -> None:
    """Require exactly `expected` arguments."""
    if len(arguments) != expected:
        raise ArgumentCountError(expected=expected, found=len(arguments))


def check_arg_range(arguments: Sequence[str], minimum: int, maximum: int) -> None:
    """Require between `minimum` and `maximum` arguments (inclusive)."""
    if len(arguments) < minimum:
        raise ArgumentCountError(expected=minimum, found=len(arguments))
    if len(arguments) > maximum:
        raise ArgumentCountError(expected=maximum, found=len(arguments))


def check_not_empty(value: str, label: str) -> None:
    if not value.strip():
        raise InvalidInputError(f"{label} cannot be empty")
