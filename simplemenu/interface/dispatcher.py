#!/usr/bin/env python3
# simplemenu/interface/dispatcher.py
from __future__ import annotations

"""
Command dispatch against the current menu level.

One call to `Dispatcher.dispatch` handles one input line:
  1) split into command token + arguments
  2) empty token -> listing of the current level
  3) resolve the token through the current registry
  4) miss -> UNKNOWN_COMMAND result (stack untouched)
  5) hit  -> execute, then apply the outcome to the navigation stack

Every runtime failure is converted into a DispatchResult here; nothing but
construction errors escapes to the session loop.
"""

import difflib
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from simplemenu.commands import (
    Command,
    CommandListing,
    CommandRegistry,
    Continue,
    EnterSubmenu,
    ExitSubmenu,
    Failed,
    ListRequest,
    NoMatch,
    Outcome,
    Terminate,
)
from simplemenu.errors import NavigationError, UnknownCommandError
from simplemenu.interface.navigation import MAX_DEPTH, NavigationStack
from simplemenu.interface.parser import split_line
from simplemenu.interface.session import Session

logger = logging.getLogger(__name__)


class ResultKind(Enum):
    LISTING = "listing"
    OUTPUT = "output"
    ENTERED = "entered"
    EXITED = "exited"
    TERMINATED = "terminated"
    UNKNOWN_COMMAND = "unknown_command"
    NAVIGATION_ERROR = "navigation_error"
    FAILED = "failed"
    INTERRUPTED = "interrupted"


_SUCCESS_KINDS = frozenset({
    ResultKind.LISTING,
    ResultKind.OUTPUT,
    ResultKind.ENTERED,
    ResultKind.EXITED,
    ResultKind.TERMINATED,
})


@dataclass(frozen=True, slots=True)
class DispatchResult:
    """
    Structured result of one dispatched line.

    Attributes:
        kind: What happened.
        message: Text for the user (command output or error message).
        token: The literal command token as typed.
        command: The resolved command, if any.
        listing: Rows of the current level (listings and unknown commands).
        error: The exception behind a failure, if any.
        suggestions: Close matches for an unknown token.
    """
    kind: ResultKind
    message: str = ""
    token: str = ""
    command: Optional[Command] = None
    listing: tuple[CommandListing, ...] = ()
    error: Optional[BaseException] = None
    suggestions: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return self.kind in _SUCCESS_KINDS


class Dispatcher:
    """Resolves input lines through the navigation stack and applies outcomes."""

    def __init__(
        self,
        root: CommandRegistry,
        session: Session | None = None,
        *,
        max_depth: int = MAX_DEPTH,
    ) -> None:
        self.session = session if session is not None else Session()
        self.stack = NavigationStack(root, max_depth=max_depth)
        self.session.navigation = self.stack

    # ---------------- Queries ----------------

    def current(self) -> CommandRegistry:
        return self.stack.current()

    def listing(self) -> tuple[CommandListing, ...]:
        return self.stack.current().list()

    # ---------------- Dispatch ----------------

    def dispatch(self, input_line: str) -> DispatchResult:
        """Resolve and run one input line."""
        token, arguments = split_line(input_line)
        registry = self.stack.current()
        resolution = registry.resolve(token)

        if isinstance(resolution, ListRequest):
            return DispatchResult(ResultKind.LISTING, listing=resolution.listing)

        if isinstance(resolution, NoMatch):
            error = UnknownCommandError(token)
            logger.info("Unknown command %r at depth %d", token, self.stack.depth)
            return DispatchResult(
                ResultKind.UNKNOWN_COMMAND,
                message=str(error),
                token=token,
                listing=resolution.listing,
                error=error,
                suggestions=self._suggest_similar_names(token, registry),
            )

        command_obj = resolution.command
        logger.debug("Resolved %r -> %s", token, command_obj.name)
        try:
            outcome = command_obj.execute(tuple(arguments), self.session)
        except KeyboardInterrupt:
            logger.info("Command %r interrupted", command_obj.name)
            return DispatchResult(
                ResultKind.INTERRUPTED,
                message="Operation interrupted by user",
                token=token,
                command=command_obj,
            )
        except Exception as exc:
            logger.debug("Command %r failed", command_obj.name, exc_info=True)
            outcome = Failed(str(exc) or type(exc).__name__, exc)

        return self._apply(token, command_obj, outcome)

    # ---------------- Outcome handling ----------------

    def _apply(self, token: str, command_obj: Command, outcome: Outcome | None) -> DispatchResult:
        """Apply an outcome to the stack. Transitions happen only here."""
        if outcome is None:
            outcome = Continue()

        if isinstance(outcome, Continue):
            return DispatchResult(
                ResultKind.OUTPUT, message=outcome.message, token=token, command=command_obj)

        if isinstance(outcome, EnterSubmenu):
            try:
                self.stack.push(outcome.registry, outcome.label or command_obj.name)
            except NavigationError as exc:
                return self._navigation_error(token, command_obj, exc)
            return DispatchResult(
                ResultKind.ENTERED, token=token, command=command_obj,
                listing=outcome.registry.list())

        if isinstance(outcome, ExitSubmenu):
            try:
                self.stack.pop()
            except NavigationError as exc:
                return self._navigation_error(token, command_obj, exc)
            return DispatchResult(ResultKind.EXITED, token=token, command=command_obj)

        if isinstance(outcome, Terminate):
            self.session.quit()
            return DispatchResult(
                ResultKind.TERMINATED, message=outcome.message, token=token, command=command_obj)

        if isinstance(outcome, Failed):
            return DispatchResult(
                ResultKind.FAILED, message=outcome.reason, token=token,
                command=command_obj, error=outcome.error)

        logger.warning("Command %r returned unsupported outcome %r",
                       command_obj.name, type(outcome).__name__)
        return DispatchResult(
            ResultKind.FAILED,
            message=f"Command '{command_obj.name}' returned an unsupported result.",
            token=token,
            command=command_obj,
        )

    def _navigation_error(self, token: str, command_obj: Command, exc: NavigationError) -> DispatchResult:
        logger.info("Navigation rejected for %r: %s", command_obj.name, exc)
        return DispatchResult(
            ResultKind.NAVIGATION_ERROR, message=str(exc), token=token,
            command=command_obj, error=exc)

    def _suggest_similar_names(self, token: str, registry: CommandRegistry) -> tuple[str, ...]:
        """Return close matches for a misspelled command."""
        if not self.session.preferences.show_suggestions:
            return ()
        universe = registry.names()
        matches = difflib.get_close_matches(token.casefold(), universe, n=3, cutoff=0.6)
        return tuple(matches)
