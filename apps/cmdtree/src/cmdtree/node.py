"""Command trie node: path registration and alias-aware resolution."""

from __future__ import annotations

import weakref
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .errors import CommandTreeError, InvalidCommandTokenError, TreeSealedError
from .types import (
    CommandExecutor,
    Environment,
    MessageSink,
    PermissionCheck,
    noop_executor,
    sender_has_permission,
    sender_send_message,
)

DEFAULT_PERMISSION_DENIED_MESSAGE = "You do not have permission to use this command."
RENDER_INDENT = "| "


def split_command(command: str) -> tuple[str, str]:
    """Split command text into its first token and the remaining text."""
    parts = command.split(None, 1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1]


def validate_token(token: str) -> str:
    """Return ``token`` if it can address a node, else raise."""
    if not isinstance(token, str) or not token:
        raise InvalidCommandTokenError("Command token cannot be empty")
    if any(ch.isspace() for ch in token):
        raise InvalidCommandTokenError(f"Command token cannot contain whitespace: {token!r}")
    return token


@dataclass(frozen=True)
class ExecutionResult:
    """Outcome of resolving one command: the node reached and whether it ran."""

    node: CommandNode
    executed: bool


class CommandNode:
    """One vertex of the command trie.

    A node is stored in its parent's ``children`` under its canonical key.
    Aliases of a node live in the parent's alias table, and every canonical
    key is also an alias of itself, so a child is always looked up as
    ``children[aliases[token]]``.

    The parent is held through a weak reference; the tree owns its nodes
    top-down only.
    """

    def __init__(self, key: str, parent: Optional[CommandNode] = None) -> None:
        self._key = key
        self._parent_ref = weakref.ref(parent) if parent is not None else None
        self._children: dict[str, CommandNode] = {}
        self._aliases: dict[str, str] = {}
        self._executor: CommandExecutor = noop_executor
        self._permission: str | None = None
        self._permission_denied_message: str | None = DEFAULT_PERMISSION_DENIED_MESSAGE
        # Only read on the root node.
        self._sealed = False

    def __repr__(self) -> str:
        return f"CommandNode(path={self.path!r}, children={sorted(self._children)!r})"

    @property
    def key(self) -> str:
        return self._key

    @property
    def parent(self) -> Optional[CommandNode]:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def is_root(self) -> bool:
        return self._parent_ref is None

    @property
    def children(self) -> Mapping[str, CommandNode]:
        return MappingProxyType(self._children)

    @property
    def aliases(self) -> Mapping[str, str]:
        return MappingProxyType(self._aliases)

    @property
    def executor(self) -> CommandExecutor:
        return self._executor

    @property
    def permission(self) -> str | None:
        return self._permission

    @property
    def permission_denied_message(self) -> str | None:
        return self._permission_denied_message

    @property
    def path(self) -> str:
        """Canonical space-joined path from the top level to this node."""
        keys: list[str] = []
        node: Optional[CommandNode] = self
        while node is not None and not node.is_root:
            keys.append(node.key)
            node = node.parent
        return " ".join(reversed(keys))

    @property
    def sealed(self) -> bool:
        node: CommandNode = self
        while not node.is_root:
            parent = node.parent
            if parent is None:
                break
            node = parent
        return node._sealed

    def _ensure_mutable(self) -> None:
        if self.sealed:
            raise TreeSealedError(
                f"Command tree is sealed; cannot modify '{self.path or '<root>'}'"
            )

    def set_executor(self, executor: CommandExecutor) -> CommandNode:
        """Set the executor run when resolution ends at this node."""
        self._ensure_mutable()
        self._executor = executor
        return self

    def set_permission(self, permission: str | None) -> CommandNode:
        """Require ``permission`` before the executor may run."""
        self._ensure_mutable()
        self._permission = permission
        return self

    def set_permission_denied_message(self, message: str | None) -> CommandNode:
        """Set the text sent to a sender that fails the permission check.

        ``None`` denies silently.
        """
        self._ensure_mutable()
        self._permission_denied_message = message
        return self

    def add_aliases(self, *aliases: str) -> CommandNode:
        """Add alternate tokens for this node.

        Aliases are local to the node's level: aliasing "beta" in
        "alpha beta" as "b" makes "alpha b" resolve to the same node.
        A later alias with the same token replaces the earlier one.
        """
        self._ensure_mutable()
        if self.is_root:
            raise CommandTreeError("The root of a command tree cannot have aliases")
        parent = self.parent
        if parent is None:
            raise CommandTreeError(f"Parent of '{self._key}' no longer exists")
        for alias in aliases:
            validate_token(alias)
        for alias in aliases:
            parent._aliases[alias] = self._key
        return self

    def has_alias(self, token: str) -> bool:
        """Return True if ``token`` names one of this node's children."""
        return token in self._aliases

    def get_child(self, token: str) -> Optional[CommandNode]:
        """Look up a child by canonical key or alias."""
        key = self._aliases.get(token)
        if key is None:
            return None
        return self._children.get(key)

    def register(self, path: str) -> CommandNode:
        """Return the node for ``path`` below this one, creating it on demand.

        ``path`` is normalized text (trimmed, single-spaced). An empty path
        means this node itself. Intermediate nodes are synthesized with the
        no-op executor, so paths may be registered in any order.
        """
        self._ensure_mutable()
        if not path:
            return self

        key, subpath = split_command(path)
        child = self.get_child(key)
        if child is None:
            validate_token(key)
            self._aliases[key] = key
            child = CommandNode(key, parent=self)
            self._children[key] = child
        return child.register(subpath)

    def execute(
        self,
        sender: Any,
        command: str,
        env: Environment,
        *,
        has_permission: PermissionCheck = sender_has_permission,
        send_message: MessageSink = sender_send_message,
    ) -> ExecutionResult:
        """Resolve ``command`` below this node and run the terminal executor.

        The first token selects a child. Following tokens are captured as
        that child's arguments until one of them names a child of the child;
        that token starts the next segment. Captured arguments are stored in
        ``env`` under the child's canonical key.

        Returns the terminal node reached, with ``executed`` True if its
        executor ran and False if the permission check denied it. Executor
        exceptions propagate unchanged.
        """
        tokens = command.split()
        if not tokens:
            if self._permission is not None and not has_permission(sender, self._permission):
                if self._permission_denied_message is not None:
                    send_message(sender, self._permission_denied_message)
                return ExecutionResult(self, False)
            self._executor(sender, env)
            return ExecutionResult(self, True)

        child = self.get_child(tokens[0])
        if child is None:
            raise InvalidCommandTokenError(f"Unknown command token: {tokens[0]}")

        boundary = len(tokens)
        for index in range(1, len(tokens)):
            if child.has_alias(tokens[index]):
                boundary = index
                break

        env[child.key] = tokens[1:boundary]
        return child.execute(
            sender,
            " ".join(tokens[boundary:]),
            env,
            has_permission=has_permission,
            send_message=send_message,
        )

    def render(self, depth: int = 0) -> str:
        """Render this subtree, one ``\\n``-prefixed line per node."""
        parts = ["\n", RENDER_INDENT * depth, self._key]
        for child in self._children.values():
            parts.append(child.render(depth + 1))
        return "".join(parts)
