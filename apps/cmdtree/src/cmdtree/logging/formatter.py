"""Render cmdtree's JSON log events as readable text blocks."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any

from .schema import DEFAULT_EVENT_KEY_ORDER, EVENT_KEY_ORDER


def _record_payload(record: logging.LogRecord) -> dict[str, Any]:
    """Return the event dict carried by ``record``.

    Records not produced by ``log_event`` become an event named after the
    logger, with the raw text under ``message``.
    """
    message = record.getMessage()
    if message.startswith("{"):
        try:
            payload = json.loads(message)
        except ValueError:
            payload = None
        if isinstance(payload, dict):
            return payload
    return {
        "ts": datetime.fromtimestamp(record.created).astimezone().isoformat(),
        "event": record.name,
        "message": message,
    }


def _single_line(value: Any) -> str:
    return str(value).replace("\n", "\\n")


class StructuredTextFormatter(logging.Formatter):
    """One ``=== event ===`` block per record, keys in schema order."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._separate = False

    def format(self, record: logging.LogRecord) -> str:
        payload = _record_payload(record)
        event_name = str(payload.pop("event", record.name))
        payload.setdefault("level", record.levelname)

        fields = {key: value for key, value in payload.items() if value is not None}
        preferred = EVENT_KEY_ORDER.get(event_name, DEFAULT_EVENT_KEY_ORDER)
        keys = [key for key in preferred if key in fields]
        keys += sorted(key for key in fields if key not in preferred)

        lines = [f"=== {event_name} ==="]
        lines += [f"{key}: {_single_line(fields[key])}" for key in keys]
        if record.exc_info:
            lines += ["traceback:", self.formatException(record.exc_info)]

        block = "\n".join(lines)
        if self._separate:
            return "\n" + block
        self._separate = True
        return block
