"""Tests for the depth-bounded navigation stack."""

from __future__ import annotations

import pytest

from simplemenu.commands import CommandRegistry
from simplemenu.errors import AlreadyAtRootError, MaxDepthExceededError, NavigationError
from simplemenu.interface import MAX_DEPTH, NavigationStack
from tests.conftest import leaf


@pytest.fixture
def root() -> CommandRegistry:
    return CommandRegistry([leaf("file")], title="root")


@pytest.fixture
def child() -> CommandRegistry:
    return CommandRegistry([leaf("load")], title="child")


class TestNavigationStack:
    def test_starts_at_root(self, root: CommandRegistry) -> None:
        stack = NavigationStack(root)
        assert stack.depth == 1
        assert stack.is_root()
        assert stack.current() is root
        assert stack.root() is root
        assert stack.breadcrumb() == []

    def test_push_then_pop_restores_current(self, root: CommandRegistry, child: CommandRegistry) -> None:
        stack = NavigationStack(root)
        before = stack.current()
        stack.push(child, "file")
        assert stack.current() is child
        assert stack.depth == 2
        popped = stack.pop()
        assert popped.registry is child
        assert stack.current() is before
        assert stack.depth == 1

    def test_pop_at_root_is_rejected(self, root: CommandRegistry) -> None:
        stack = NavigationStack(root)
        with pytest.raises(AlreadyAtRootError, match="Already at root level."):
            stack.pop()
        assert stack.depth == 1
        assert stack.current() is root

    def test_ten_pushes_succeed_and_the_eleventh_fails(self, root: CommandRegistry, child: CommandRegistry) -> None:
        stack = NavigationStack(root)
        for _ in range(MAX_DEPTH):
            stack.push(child, "child")
        assert stack.entered == MAX_DEPTH == 10
        assert stack.depth == MAX_DEPTH + 1

        with pytest.raises(MaxDepthExceededError) as exc_info:
            stack.push(root, "one-too-many")
        assert isinstance(exc_info.value, NavigationError)
        assert stack.entered == MAX_DEPTH
        assert stack.current() is child
        assert stack.breadcrumb() == ["child"] * MAX_DEPTH

    def test_custom_bound(self, root: CommandRegistry, child: CommandRegistry) -> None:
        stack = NavigationStack(root, max_depth=2)
        stack.push(child)
        stack.push(child)
        with pytest.raises(MaxDepthExceededError, match=r"Maximum menu depth \(2\) reached."):
            stack.push(child)
        assert stack.max_depth == 2

    def test_invalid_bound(self, root: CommandRegistry) -> None:
        with pytest.raises(ValueError):
            NavigationStack(root, max_depth=-1)

    def test_label_defaults_to_registry_title(self, root: CommandRegistry, child: CommandRegistry) -> None:
        stack = NavigationStack(root)
        stack.push(child)
        stack.push(child, "again")
        assert stack.breadcrumb() == ["child", "again"]
        assert [level.label for level in stack] == ["", "child", "again"]
        assert len(stack) == 3

    def test_reset_keeps_root(self, root: CommandRegistry, child: CommandRegistry) -> None:
        stack = NavigationStack(root)
        stack.push(child)
        stack.push(child)
        stack.reset()
        assert stack.depth == 1
        assert stack.current() is root
