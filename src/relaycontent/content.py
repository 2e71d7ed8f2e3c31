"""Message content normalization: flattened text and typed content parts."""

from __future__ import annotations

import logging
from typing import Any

from .config import DEFAULT_IMAGE_DETAIL, ImagePartPolicy, get_malformed_image_policy, validate_image_policy
from .parts import ContentType, ImageURLPart, TextPart
from .payload import try_decode_object, try_decode_sequence, try_decode_string
from .runtime_utils import log_runtime_event

_logger = logging.getLogger(__name__)

_URL_NOT_STRING = "url_not_string"


def string_content(payload: Any) -> str:
    """Reduce a content payload to one flattened string.

    A string payload is returned verbatim. For a list payload the `text` of every
    text part is concatenated in order; other parts are skipped. Anything else
    yields an empty string.
    """
    text = try_decode_string(payload)
    if text is not None:
        return text

    items = try_decode_sequence(payload)
    if items is None:
        return ""

    chunks: list[str] = []
    for item in items:
        item_map = try_decode_object(item)
        if item_map is None:
            continue
        if item_map.get("type") != ContentType.TEXT:
            continue
        sub_text = item_map.get("text")
        if isinstance(sub_text, str):
            chunks.append(sub_text)
    return "".join(chunks)


def normalize_image_detail(image_url: dict[str, Any]) -> str:
    detail = image_url.get("detail")
    if isinstance(detail, str):
        return detail
    return DEFAULT_IMAGE_DETAIL


def _parse_text_part(item_map: dict[str, Any]) -> tuple[TextPart | None, str | None]:
    text = item_map.get("text")
    if isinstance(text, str):
        return TextPart(text=text), None
    return None, "text_not_string"


def _parse_image_part(item_map: dict[str, Any]) -> tuple[ImageURLPart | None, str | None]:
    image_url = try_decode_object(item_map.get("image_url"))
    if image_url is None:
        return None, "image_url_not_object"

    detail = normalize_image_detail(image_url)
    url = image_url.get("url")
    if not isinstance(url, str):
        return None, _URL_NOT_STRING
    return ImageURLPart(url=url, detail=detail), None


def parse_content(payload: Any, *, image_policy: ImagePartPolicy | None = None) -> list[TextPart | ImageURLPart]:
    """Reduce a content payload to ordered typed parts.

    A string payload becomes a single `TextPart`. A list payload keeps every
    well-formed text and image part in order and drops everything else, including
    unknown part types. Unusable payloads yield an empty list; malformed payloads
    never raise.

    `image_policy` decides what an image part without a string `url` does:
    ``"drop"`` skips that part, ``"reject_message"`` abandons the whole message.
    When omitted, ``RELAY_MALFORMED_IMAGE_POLICY`` is used; an invalid setting there
    falls back to ``"drop"``. Only an invalid explicit `image_policy` raises
    `ContentConfigError`, and only for list payloads, since strings never consult it.
    """
    text = try_decode_string(payload)
    if text is not None:
        return [TextPart(text=text)]

    items = try_decode_sequence(payload)
    if items is None:
        return []

    policy = validate_image_policy(image_policy) if image_policy is not None else get_malformed_image_policy()
    parts: list[TextPart | ImageURLPart] = []
    for index, item in enumerate(items):
        item_map = try_decode_object(item)
        if item_map is None:
            log_runtime_event(_logger, "content_part_dropped", index=index, reason="not_object")
            continue

        part_type = item_map.get("type")
        part: TextPart | ImageURLPart | None
        if part_type == ContentType.TEXT:
            part, reason = _parse_text_part(item_map)
        elif part_type == ContentType.IMAGE_URL:
            part, reason = _parse_image_part(item_map)
            if reason == _URL_NOT_STRING and policy == "reject_message":
                log_runtime_event(_logger, "content_message_rejected", index=index, reason=reason)
                return []
        else:
            part, reason = None, "unknown_type"

        if part is None:
            log_runtime_event(_logger, "content_part_dropped", index=index, part_type=part_type, reason=reason)
            continue
        parts.append(part)
    return parts
