"""CLI bootstrap entry point for the cmdtree console."""

import argparse
import logging
import os
import sys
import time
from typing import Optional

from .console import ConsoleSender
from .console_commands import build_console_tree
from .constants import APP_NAME
from .errors import ConfigError
from .logging import log_event, setup_logging
from .profile import Profile, load_profile, map_path
from .repl import create_prompt_session, run_repl


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Interactive console for a hierarchical command tree",
    )
    parser.add_argument(
        "-p",
        "--profile",
        help="Path to profile JSON file (optional; defaults are used if omitted)",
    )
    parser.add_argument(
        "-l",
        "--log",
        help="Path to log file (optional; overrides the profile's log_file)",
    )
    return parser


def load_console_profile(profile_arg: Optional[str], log_arg: Optional[str]) -> Profile:
    """Resolve CLI arguments into the effective profile.

    Raises:
        ConfigError: If the profile or a path argument is invalid
    """
    cwd = os.getcwd()
    profile = load_profile(map_path(profile_arg, cwd)) if profile_arg else Profile()
    if log_arg:
        profile.log_file = map_path(log_arg, cwd)
    return profile


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the cmdtree console."""
    args = build_parser().parse_args(argv)

    try:
        profile = load_console_profile(args.profile, args.log)
    except ConfigError as e:
        print(f"Error: {e}")
        sys.exit(1)

    setup_logging(profile.log_file)
    app_started = time.perf_counter()

    sender = ConsoleSender(name=profile.sender_name, permissions=set(profile.permissions))
    tree = build_console_tree()

    log_event(
        "console_start",
        sender=sender.name,
        profile_file=args.profile,
        log_file=profile.log_file,
        history_file=profile.history_file,
        chat_prefix=profile.chat_prefix,
        command_count=sum(1 for _ in tree.walk()),
    )

    try:
        reason = run_repl(
            tree,
            sender,
            prefix=profile.chat_prefix,
            prompt_session=create_prompt_session(profile.history_file),
        )
    except KeyboardInterrupt:
        reason = "interrupted"
    except Exception as e:
        log_event(
            "console_stop",
            level=logging.ERROR,
            reason="error",
            uptime_ms=round((time.perf_counter() - app_started) * 1000, 1),
            error_type=type(e).__name__,
            error=str(e),
        )
        print(f"Error: {e}")
        sys.exit(1)

    log_event(
        "console_stop",
        reason=reason,
        uptime_ms=round((time.perf_counter() - app_started) * 1000, 1),
    )
