"""Embedding `input` normalization."""

from __future__ import annotations

import logging
from typing import Any

from .payload import ScalarPayload, SequencePayload, decode_payload
from .runtime_utils import log_runtime_event

_logger = logging.getLogger(__name__)


def parse_input(payload: Any) -> list[str]:
    """Normalize an embeddings `input` value into a list of strings.

    A string becomes a one-item list; a list keeps its string items in order and
    drops the rest. `None` and every other shape yield an empty list.
    """
    decoded = decode_payload(payload)
    if isinstance(decoded, ScalarPayload):
        return [decoded.value]
    if not isinstance(decoded, SequencePayload):
        return []

    normalized = [item for item in decoded.items if isinstance(item, str)]
    dropped = len(decoded.items) - len(normalized)
    if dropped:
        log_runtime_event(_logger, "input_items_dropped", count=dropped, kept=len(normalized))
    return normalized
