"""relaycontent package exports."""

from __future__ import annotations

from .env import bootstrap_env

# Load project-local .env once for package consumers (CLI, imports, notebooks).
bootstrap_env(override=False)

from .content import parse_content, string_content  # noqa: E402
from .inputs import parse_input  # noqa: E402
from .models import GeneralRequest, Message  # noqa: E402
from .parts import ContentType, ImageURL, ImageURLPart, TextPart  # noqa: E402
from .payload import RawPayload, is_string_content  # noqa: E402

__all__ = [
    "ContentType",
    "GeneralRequest",
    "ImageURL",
    "ImageURLPart",
    "Message",
    "RawPayload",
    "TextPart",
    "is_string_content",
    "parse_content",
    "parse_input",
    "string_content",
]
