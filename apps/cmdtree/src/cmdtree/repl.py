"""Interactive console loop feeding a command tree."""

from __future__ import annotations

import logging
import os
import traceback
from pathlib import Path
from typing import Any, Optional, Protocol

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory, InMemoryHistory

from .constants import DEBUG_ENV_VAR, DEFAULT_CHAT_PREFIX, REPL_PROMPT
from .errors import CommandTreeError
from .listener import CommandListener
from .logging import log_event, summarize_text
from .node import split_command
from .tree import CommandTree

_EXIT_COMMANDS = frozenset(("exit", "quit"))


class LineReader(Protocol):
    """The part of prompt_toolkit's PromptSession the loop relies on."""

    def prompt(self, message: str) -> str:
        ...


def create_prompt_session(history_file: Optional[str] = None) -> PromptSession:
    """Create prompt-toolkit session for console input."""
    if history_file:
        history_path = Path(history_file)
        history_path.parent.mkdir(parents=True, exist_ok=True)
        history: Any = FileHistory(str(history_path))
    else:
        history = InMemoryHistory()
    return PromptSession(history=history)


def _report_unexpected_error(error: Exception) -> None:
    """Print an unexpected exception with optional debug traceback."""
    print(f"ERROR: {error}")
    if os.getenv(DEBUG_ENV_VAR):
        print("Debug traceback:")
        traceback.print_exc()


def dispatch_line(listener: CommandListener, sender: Any, line: str) -> bool:
    """Send one input line through the listener.

    Lines starting with the chat prefix are handled as chat commands, all
    others as console commands. Returns False for input that is not a
    command; the caller reports it.
    """
    if listener.strip_prefix(line) is not None:
        return listener.on_chat_command(sender, line)
    return listener.on_console_command(sender, line)


def _leading_token(listener: CommandListener, line: str) -> str:
    command = listener.strip_prefix(line)
    key, _ = split_command(command if command is not None else line)
    return key


def run_repl(
    tree: CommandTree,
    sender: Any,
    *,
    prefix: str = DEFAULT_CHAT_PREFIX,
    prompt_session: Optional[LineReader] = None,
) -> str:
    """Run the REPL loop and return the reason it stopped."""
    listener = CommandListener(tree, prefix)
    session = prompt_session if prompt_session is not None else create_prompt_session()

    print("Type 'help' for commands. Type 'exit' or 'quit' to leave, or Ctrl-D.")

    while True:
        try:
            line = session.prompt(REPL_PROMPT)
        except EOFError:
            print()
            return "eof"
        except KeyboardInterrupt:
            print()
            continue

        stripped = line.strip()
        if not stripped:
            continue

        if stripped in _EXIT_COMMANDS:
            print("Exiting.")
            return "exit_command"

        try:
            if not dispatch_line(listener, sender, stripped):
                token = _leading_token(listener, stripped)
                log_event("command_unknown", source="console", token=token)
                print(f"Unknown command: {token}")

        except CommandTreeError as e:
            log_event(
                "command_error",
                level=logging.ERROR,
                source="console",
                input=summarize_text(stripped),
                error_type=type(e).__name__,
                error=str(e),
            )
            print(f"ERROR: {e}")

        except Exception as e:
            # Executor failures propagate out of the tree untouched.
            log_event(
                "command_error",
                level=logging.ERROR,
                source="console",
                input=summarize_text(stripped),
                error_type=type(e).__name__,
                error=str(e),
            )
            _report_unexpected_error(e)
