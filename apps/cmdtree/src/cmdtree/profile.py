"""Console profile: loading, validation, and path mapping."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .constants import DEFAULT_CHAT_PREFIX, DEFAULT_SENDER_NAME
from .errors import ConfigError

_KNOWN_FIELDS = frozenset(
    ("sender_name", "permissions", "chat_prefix", "history_file", "log_file")
)
_PATH_FIELDS = ("history_file", "log_file")


@dataclass
class Profile:
    """Settings for one interactive console session."""

    sender_name: str = DEFAULT_SENDER_NAME
    permissions: list[str] = field(default_factory=list)
    chat_prefix: str = DEFAULT_CHAT_PREFIX
    history_file: str | None = None
    log_file: str | None = None


def map_path(path: str, profile_dir: str | None = None) -> str:
    """Resolve a path string to an absolute path string.

    ~ or ~/...  -> user home directory
    Absolute    -> used as-is
    Relative    -> resolved relative to profile_dir if given; error otherwise
    """
    if "\0" in path:
        raise ConfigError("Path cannot contain NUL bytes")

    candidate = Path(path).expanduser()
    if candidate.is_absolute():
        return str(candidate.resolve())

    if profile_dir is not None:
        return str((Path(profile_dir) / candidate).resolve())

    raise ConfigError(
        "Relative profile paths are not supported. "
        "Use an absolute path or start with '~/'."
    )


def _require_string_field(
    profile: dict[str, Any],
    field_name: str,
    *,
    non_empty: bool = False,
) -> str:
    value = profile.get(field_name)
    if not isinstance(value, str):
        suffix = " non-empty" if non_empty else ""
        raise ConfigError(f"{field_name} must be a{suffix} string")
    if non_empty and not value:
        raise ConfigError(f"{field_name} must be a non-empty string")
    return value


def validate_profile(profile: dict[str, Any]) -> None:
    """Validate profile structure.

    Args:
        profile: Profile dictionary to validate

    Raises:
        ConfigError: If profile is invalid
    """
    if not isinstance(profile, dict):
        raise ConfigError("Profile must be a JSON object")

    unknown = sorted(set(profile) - _KNOWN_FIELDS)
    if unknown:
        raise ConfigError(f"Profile has unknown fields: {', '.join(unknown)}")

    if "sender_name" in profile:
        _require_string_field(profile, "sender_name", non_empty=True)

    if "chat_prefix" in profile:
        prefix = _require_string_field(profile, "chat_prefix", non_empty=True)
        if any(ch.isspace() for ch in prefix):
            raise ConfigError("chat_prefix cannot contain whitespace")

    if "permissions" in profile:
        permissions = profile["permissions"]
        if not isinstance(permissions, list) or not all(
            isinstance(p, str) and p for p in permissions
        ):
            raise ConfigError("permissions must be a list of non-empty strings")

    for field_name in _PATH_FIELDS:
        if profile.get(field_name) is not None:
            _require_string_field(profile, field_name, non_empty=True)


def load_profile(path: str) -> Profile:
    """Load and validate a profile JSON file.

    Relative paths inside the profile resolve against the profile's directory.
    """
    profile_path = Path(path)
    if not profile_path.is_file():
        raise ConfigError(f"Profile not found: {path}")

    try:
        with open(profile_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in profile {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read profile {path}: {e}") from e

    validate_profile(data)

    profile_dir = str(profile_path.resolve().parent)
    paths = {
        name: map_path(data[name], profile_dir) if data.get(name) else None
        for name in _PATH_FIELDS
    }

    return Profile(
        sender_name=data.get("sender_name", DEFAULT_SENDER_NAME),
        permissions=list(data.get("permissions", [])),
        chat_prefix=data.get("chat_prefix", DEFAULT_CHAT_PREFIX),
        history_file=paths["history_file"],
        log_file=paths["log_file"],
    )
