"""Shared type aliases and host-facing contracts."""

from __future__ import annotations

from typing import Any, Callable, Protocol, TypeAlias


Environment: TypeAlias = dict[str, list[str]]
CommandExecutor: TypeAlias = Callable[[Any, Environment], object]
PermissionCheck: TypeAlias = Callable[[Any, str], bool]
MessageSink: TypeAlias = Callable[[Any, str], None]


class CommandSender(Protocol):
    """Structural contract for callers handed to the tree by a host."""

    def has_permission(self, permission: str) -> bool:
        ...

    def send_message(self, text: str) -> None:
        ...


def noop_executor(sender: Any, env: Environment) -> None:
    """Default executor for nodes registered without a handler."""
    return None


def sender_has_permission(sender: Any, permission: str) -> bool:
    """Ask the sender itself whether it holds a permission."""
    return bool(sender.has_permission(permission))


def sender_send_message(sender: Any, text: str) -> None:
    """Deliver text through the sender's own message channel."""
    sender.send_message(text)
