"""Built-in command set for the interactive console."""

from __future__ import annotations

from .console import ConsoleSender
from .constants import ADMIN_PERMISSION
from .tree import CommandTree
from .types import Environment

PERMISSION_DENIED_MESSAGE = f"Requires permission: {ADMIN_PERMISSION}"


def render_help_text(tree: CommandTree) -> str:
    """Render the registered command tree as help text."""
    lines = ["Available commands:"]
    for line in str(tree).splitlines():
        if line:
            lines.append(f"  {line}")
    lines.append("")
    lines.append("Type 'exit' or 'quit' to leave.")
    return "\n".join(lines)


def _single_arg(env: Environment, key: str) -> str | None:
    args = env.get(key, [])
    if len(args) != 1:
        return None
    return args[0]


def _exec_echo(sender: ConsoleSender, env: Environment) -> None:
    words = env.get("echo", [])
    if not words:
        sender.send_message("Usage: echo <text...>")
        return
    sender.send_message(" ".join(words))


def _exec_perm_list(sender: ConsoleSender, env: Environment) -> None:
    if not sender.permissions:
        sender.send_message(f"{sender.name} holds no permissions")
        return
    sender.send_message(f"{sender.name} holds: {', '.join(sorted(sender.permissions))}")


def _exec_perm_grant(sender: ConsoleSender, env: Environment) -> None:
    permission = _single_arg(env, "grant")
    if permission is None:
        sender.send_message("Usage: perm grant <permission>")
        return
    if sender.grant(permission):
        sender.send_message(f"Granted {permission}")
    else:
        sender.send_message(f"Already granted: {permission}")


def _exec_perm_revoke(sender: ConsoleSender, env: Environment) -> None:
    permission = _single_arg(env, "revoke")
    if permission is None:
        sender.send_message("Usage: perm revoke <permission>")
        return
    if sender.revoke(permission):
        sender.send_message(f"Revoked {permission}")
    else:
        sender.send_message(f"Not granted: {permission}")


def build_console_tree() -> CommandTree:
    """Build and seal the console's command tree."""
    tree = CommandTree()

    def _exec_help(sender: ConsoleSender, env: Environment) -> None:
        sender.send_message(render_help_text(tree))

    tree.register("help", _exec_help).add_aliases("?")
    tree.register("echo", _exec_echo).add_aliases("say")
    tree.register("perm", _exec_perm_list).add_aliases("permissions")
    tree.register("perm list", _exec_perm_list).add_aliases("ls")
    (
        tree.register("perm grant", _exec_perm_grant)
        .set_permission(ADMIN_PERMISSION)
        .set_permission_denied_message(PERMISSION_DENIED_MESSAGE)
    )
    (
        tree.register("perm revoke", _exec_perm_revoke)
        .set_permission(ADMIN_PERMISSION)
        .set_permission_denied_message(PERMISSION_DENIED_MESSAGE)
    )
    tree.seal()
    return tree
