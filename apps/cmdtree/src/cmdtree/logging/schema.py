"""Preferred key order for structured log events."""

from __future__ import annotations

DEFAULT_EVENT_KEY_ORDER: list[str] = ["ts", "level"]

EVENT_KEY_ORDER: dict[str, list[str]] = {
    # Console lifecycle events
    "console_start": [
        "ts",
        "level",
        "sender",
        "profile_file",
        "log_file",
        "history_file",
        "chat_prefix",
        "command_count",
    ],
    "console_stop": [
        "ts",
        "level",
        "reason",
        "uptime_ms",
        "error_type",
        "error",
    ],
    # Tree construction events
    "command_register": [
        "ts",
        "level",
        "command",
        "has_executor",
    ],
    "tree_sealed": [
        "ts",
        "level",
        "command_count",
    ],
    # Command resolution events
    "command_exec": [
        "ts",
        "level",
        "command",
        "args_summary",
        "elapsed_ms",
    ],
    "command_denied": [
        "ts",
        "level",
        "command",
        "permission",
    ],
    "command_unknown": [
        "ts",
        "level",
        "source",
        "token",
    ],
    "command_error": [
        "ts",
        "level",
        "source",
        "input",
        "error_type",
        "error",
    ],
}
