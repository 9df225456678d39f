"""Custom exception hierarchy for cmdtree."""


class CommandTreeError(Exception):
    """Base exception for command tree failures."""


class InvalidCommandTokenError(ValueError, CommandTreeError):
    """A command token or alias that cannot be used or resolved."""


class TreeSealedError(CommandTreeError):
    """Raised when a sealed tree is mutated."""


class ConfigError(ValueError, CommandTreeError):
    """Profile/configuration validation errors."""
