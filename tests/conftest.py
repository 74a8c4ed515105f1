"""Shared pytest fixtures and test helpers for simple-menu tests."""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Callable, Iterable, Sequence

import pytest

from simplemenu.commands import Command, CommandRegistry, Continue, Outcome
from simplemenu.interface import BaseCLI, Dispatcher, Preferences, Session
from simplemenu.menus import build_root_registry
from simplemenu.ui import ColorizingStreamHandler

# Handler types installed by init_logger; anything else (pytest capture) is left alone
APP_HANDLER_TYPES = (ColorizingStreamHandler, RotatingFileHandler)


@pytest.fixture
def root_registry() -> CommandRegistry:
    """The shipped menu tree, freshly built."""
    return build_root_registry()


@pytest.fixture
def session(tmp_path: Path) -> Session:
    """Session rooted in a temp workspace with colours turned off."""
    return Session(
        workspace=tmp_path,
        preferences=Preferences(colored_prompt=False),
    )


@pytest.fixture
def dispatcher(root_registry: CommandRegistry, session: Session) -> Dispatcher:
    return Dispatcher(root_registry, session)


@pytest.fixture
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from a temp CWD with no SIMPLE_MENU_* variables leaking in."""
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("SIMPLE_MENU_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def _reset_simplemenu_logger():
    """Drop handlers installed by init_logger so they never outlive a test's streams."""
    yield
    logger = logging.getLogger("simplemenu")
    for handler in [h for h in logger.handlers if isinstance(h, APP_HANDLER_TYPES)]:
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def leaf(
    name: str,
    aliases: Iterable[str] = (),
    *,
    action: Callable[[Sequence[str], Session], Outcome | None] | None = None,
    hidden: bool = False,
) -> Command:
    """Build a leaf command; the default action returns Continue(name)."""
    return Command(
        name=name,
        summary=f"{name} command",
        callback=action or (lambda arguments, session: Continue(name)),
        aliases=tuple(aliases),
        hidden=hidden,
    )


class ScriptedCLI(BaseCLI):
    """Frontend replaying a fixed script; exceptions in the script are raised."""

    def __init__(self, script: Iterable[object]) -> None:
        self.script = list(script)
        self.prompts: list[str] = []
        self.setup_called = False
        self.teardown_called = False

    def setup(self) -> None:
        self.setup_called = True

    def teardown(self) -> None:
        self.teardown_called = True

    def get_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.script:
            raise EOFError
        item = self.script.pop(0)
        if isinstance(item, BaseException) or (
            isinstance(item, type) and issubclass(item, BaseException)
        ):
            raise item
        return str(item)
