"""Adapters from host input transports to a command tree."""

from __future__ import annotations

from typing import Any

from .constants import DEFAULT_CHAT_PREFIX
from .node import split_command
from .tree import CommandTree, strip_extra_spaces


class CommandListener:
    """Route raw console lines and prefixed chat messages into a tree.

    Input whose leading token is not a top-level command is ignored so the
    host can pass everything it receives through the listener.
    """

    def __init__(self, tree: CommandTree, prefix: str = DEFAULT_CHAT_PREFIX) -> None:
        if not prefix:
            raise ValueError("Chat command prefix cannot be empty")
        self.tree = tree
        self.prefix = prefix

    def is_command(self, text: str) -> bool:
        """Return True if the leading token of ``text`` is a known command."""
        key, _ = split_command(strip_extra_spaces(text))
        return bool(key) and self.tree.has_alias(key)

    def strip_prefix(self, message: str) -> str | None:
        """Return ``message`` without the chat prefix, or None if it has none."""
        stripped = message.lstrip()
        if not stripped.startswith(self.prefix):
            return None
        return stripped[len(self.prefix):]

    def on_console_command(self, sender: Any, text: str) -> bool:
        """Dispatch a console line; return False if it is not a command."""
        if not self.is_command(text):
            return False
        self.tree.execute(sender, text)
        return True

    def on_chat_command(self, sender: Any, message: str) -> bool:
        """Dispatch a prefixed chat message; return False if not a command."""
        command = self.strip_prefix(message)
        if command is None or not self.is_command(command):
            return False
        self.tree.execute(sender, command)
        return True
