"""Logging helpers shared across normalization modules."""

from __future__ import annotations

import logging
from typing import Any

from .config import runtime_event_logs_enabled


def _format_field(value: Any) -> str:
    text = str(value)
    if not text or any(character.isspace() for character in text):
        return repr(text)
    return text


def log_runtime_event(logger: logging.Logger, event: str, **fields: Any) -> None:
    """Emit one `event key=value ...` line when runtime event logs are enabled."""
    if not runtime_event_logs_enabled():
        return
    rendered = " ".join(f"{key}={_format_field(value)}" for key, value in sorted(fields.items()))
    if rendered:
        logger.info("%s %s", event, rendered)
    else:
        logger.info("%s", event)
