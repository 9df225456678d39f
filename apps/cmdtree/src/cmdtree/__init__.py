"""Hierarchical command dispatcher built on an alias-aware command trie."""

from .errors import (
    CommandTreeError,
    ConfigError,
    InvalidCommandTokenError,
    TreeSealedError,
)
from .listener import CommandListener
from .node import CommandNode, ExecutionResult
from .tree import CommandTree, strip_extra_spaces
from .types import CommandExecutor, CommandSender, Environment, noop_executor

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "CommandExecutor",
    "CommandListener",
    "CommandNode",
    "CommandSender",
    "CommandTree",
    "CommandTreeError",
    "ConfigError",
    "Environment",
    "ExecutionResult",
    "InvalidCommandTokenError",
    "TreeSealedError",
    "noop_executor",
    "strip_extra_spaces",
]
