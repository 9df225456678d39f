"""Root of a command trie and its public registration/dispatch API."""

from __future__ import annotations

import logging
import time
from typing import Any, Iterator, Optional

from .errors import InvalidCommandTokenError
from .logging import log_event, summarize_command_args
from .node import CommandNode, split_command
from .types import (
    CommandExecutor,
    Environment,
    MessageSink,
    PermissionCheck,
    sender_has_permission,
    sender_send_message,
)


def strip_extra_spaces(text: str) -> str:
    """Trim ``text`` and collapse internal whitespace runs to single spaces."""
    return " ".join(text.split())


class CommandTree:
    """Owner of the top-level command nodes.

    Commands are registered during start-up and the tree is read-only
    afterwards; ``seal()`` makes that phase boundary explicit. Resolution
    itself never mutates the tree.
    """

    def __init__(
        self,
        *,
        has_permission: Optional[PermissionCheck] = None,
        send_message: Optional[MessageSink] = None,
    ) -> None:
        self._root = CommandNode("")
        self._has_permission = has_permission or sender_has_permission
        self._send_message = send_message or sender_send_message

    def __str__(self) -> str:
        parts = ["\n"]
        for child in self._root.children.values():
            parts.append(child.render(0))
        parts.append("\n")
        return "".join(parts)

    @property
    def root(self) -> CommandNode:
        return self._root

    @property
    def sealed(self) -> bool:
        return self._root.sealed

    def seal(self) -> None:
        """End the registration phase; later mutations raise TreeSealedError."""
        if self._root._sealed:
            return
        self._root._sealed = True
        log_event("tree_sealed", command_count=sum(1 for _ in self.walk()))

    def walk(self) -> Iterator[CommandNode]:
        """Yield every registered node, depth first."""
        stack = list(reversed(list(self._root.children.values())))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(list(node.children.values())))

    def has_alias(self, token: str) -> bool:
        """Return True if ``token`` names a top-level command."""
        return self._root.has_alias(token)

    def get(self, path: str) -> Optional[CommandNode]:
        """Return the node registered at ``path`` (aliases allowed), if any."""
        tokens = strip_extra_spaces(path).split()
        if not tokens:
            return None
        node: Optional[CommandNode] = self._root
        for token in tokens:
            node = node.get_child(token)
            if node is None:
                return None
        return node

    def register(self, path: str, executor: Optional[CommandExecutor] = None) -> CommandNode:
        """Register a command path and return its node.

        Whitespace in ``path`` is normalized first. Without ``executor``,
        an existing executor on the node is left in place.
        """
        normalized = strip_extra_spaces(path)
        if not normalized:
            raise InvalidCommandTokenError("Command path cannot be empty")
        node = self._root.register(normalized)
        if executor is not None:
            node.set_executor(executor)
        log_event(
            "command_register",
            level=logging.DEBUG,
            command=node.path,
            has_executor=executor is not None,
        )
        return node

    def execute(self, sender: Any, command: str) -> bool:
        """Resolve ``command`` and run the executor of the node it reaches.

        Hosts gate input with ``has_alias`` first; an empty command or an
        unknown leading token raises InvalidCommandTokenError. Returns False
        when the permission check denied the command.
        """
        normalized = strip_extra_spaces(command)
        key, _ = split_command(normalized)
        if not key or not self._root.has_alias(key):
            raise InvalidCommandTokenError(f"Unknown command: {key or '<empty>'}")

        env: Environment = {}
        started = time.perf_counter()
        result = self._root.execute(
            sender,
            normalized,
            env,
            has_permission=self._has_permission,
            send_message=self._send_message,
        )
        if result.executed:
            log_event(
                "command_exec",
                command=result.node.path,
                args_summary=summarize_command_args(env),
                elapsed_ms=round((time.perf_counter() - started) * 1000, 1),
            )
        else:
            log_event(
                "command_denied",
                level=logging.WARNING,
                command=result.node.path,
                permission=result.node.permission,
            )
        return result.executed
