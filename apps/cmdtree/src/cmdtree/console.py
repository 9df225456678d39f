"""Console-side sender used by the interactive host."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from .constants import DEFAULT_SENDER_NAME


@dataclass
class ConsoleSender:
    """Sender backed by an in-memory permission set and a line printer."""

    name: str = DEFAULT_SENDER_NAME
    permissions: set[str] = field(default_factory=set)
    output: Callable[[str], None] = print

    def has_permission(self, permission: str) -> bool:
        return permission in self.permissions

    def send_message(self, text: str) -> None:
        self.output(text)

    def grant(self, permission: str) -> bool:
        """Add a permission; return False if it was already held."""
        if permission in self.permissions:
            return False
        self.permissions.add(permission)
        return True

    def revoke(self, permission: str) -> bool:
        """Remove a permission; return False if it was not held."""
        if permission not in self.permissions:
            return False
        self.permissions.discard(permission)
        return True
