"""Tests for listener module."""

import pytest

from cmdtree.listener import CommandListener
from recorders import RecordingSender


@pytest.fixture
def listener(foo_tree):
    tree, _, _ = foo_tree
    return CommandListener(tree)


class TestIsCommand:
    """Test the top-level dispatch gate."""

    def test_known_command(self, listener):
        assert listener.is_command("foo x y")

    def test_leading_whitespace_ignored(self, listener):
        assert listener.is_command("   foo")

    def test_subcommand_alone_is_not_command(self, listener):
        assert not listener.is_command("bar")

    def test_empty_is_not_command(self, listener):
        assert not listener.is_command("")
        assert not listener.is_command("   ")


class TestConsoleCommand:
    """Test on_console_command."""

    def test_dispatches_known_command(self, foo_tree, listener, sender):
        _, _, bar = foo_tree

        assert listener.on_console_command(sender, "foo 1 bar 2") is True

        assert bar.last_env == {"foo": ["1"], "bar": ["2"]}

    def test_ignores_unrelated_input(self, foo_tree, listener, sender):
        _, foo, bar = foo_tree

        assert listener.on_console_command(sender, "say hello") is False

        assert not foo.called
        assert not bar.called

    def test_prefixed_console_line_not_command(self, listener, sender):
        assert listener.on_console_command(sender, "/foo") is False

    def test_denied_command_still_dispatched(self, foo_tree, listener):
        tree, foo, _ = foo_tree
        tree.get("foo").set_permission("p").set_permission_denied_message("no")
        sender = RecordingSender()

        assert listener.on_console_command(sender, "foo") is True

        assert sender.messages == ["no"]
        assert not foo.called


class TestChatCommand:
    """Test on_chat_command."""

    def test_strips_prefix(self, foo_tree, listener, sender):
        _, foo, _ = foo_tree

        assert listener.on_chat_command(sender, "/foo hi") is True

        assert foo.last_env == {"foo": ["hi"]}

    def test_plain_chat_ignored(self, foo_tree, listener, sender):
        _, foo, _ = foo_tree

        assert listener.on_chat_command(sender, "foo hi") is False
        assert not foo.called

    def test_unknown_prefixed_ignored(self, listener, sender):
        assert listener.on_chat_command(sender, "/unknown") is False

    def test_prefix_only_ignored(self, listener, sender):
        assert listener.on_chat_command(sender, "/") is False

    def test_custom_prefix(self, foo_tree, sender):
        tree, foo, _ = foo_tree
        listener = CommandListener(tree, prefix="!")

        assert listener.on_chat_command(sender, "!foo") is True
        assert listener.on_chat_command(sender, "/foo") is False
        assert len(foo.calls) == 1

    def test_empty_prefix_rejected(self, foo_tree):
        tree, _, _ = foo_tree
        with pytest.raises(ValueError):
            CommandListener(tree, prefix="")


class TestStripPrefix:
    """Test strip_prefix."""

    def test_returns_remainder(self, listener):
        assert listener.strip_prefix("  /foo bar") == "foo bar"

    def test_returns_none_without_prefix(self, listener):
        assert listener.strip_prefix("foo") is None
