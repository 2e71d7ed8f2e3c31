"""
Normalization settings resolved from the environment.
"""

from __future__ import annotations

import logging
import os
from typing import Literal, cast

ImagePartPolicy = Literal["drop", "reject_message"]

DEFAULT_IMAGE_DETAIL = "auto"
DEFAULT_MALFORMED_IMAGE_POLICY: ImagePartPolicy = "drop"
SUPPORTED_MALFORMED_IMAGE_POLICIES = ("drop", "reject_message")
DEFAULT_ENABLE_RUNTIME_EVENT_LOGS = False

_logger = logging.getLogger(__name__)


class ContentConfigError(RuntimeError):
    """Raised when normalization configuration is invalid."""


def _resolve_bool_env(var_name: str, default: bool = False) -> bool:
    raw_value = os.environ.get(var_name)
    if raw_value is None:
        return default
    return str(raw_value).strip().lower() in {"1", "true", "yes", "on"}


def _resolve_choice_env(var_name: str, default: str, choices: tuple[str, ...]) -> str:
    raw_value = os.environ.get(var_name)
    if raw_value is None or not str(raw_value).strip():
        return default
    value = str(raw_value).strip().lower()
    if value in choices:
        return value
    _logger.warning(
        "Ignoring invalid %s=%r (supported: %s); using %r.",
        var_name,
        value,
        ", ".join(choices),
        default,
    )
    return default


def validate_image_policy(policy: str) -> ImagePartPolicy:
    value = str(policy).strip().lower()
    if value not in SUPPORTED_MALFORMED_IMAGE_POLICIES:
        supported = ", ".join(SUPPORTED_MALFORMED_IMAGE_POLICIES)
        raise ContentConfigError(f"Unsupported image part policy {policy!r}. Supported values: {supported}.")
    return cast(ImagePartPolicy, value)


def get_malformed_image_policy() -> ImagePartPolicy:
    """Policy for image parts whose nested `url` is missing or not a string.

    An unsupported value falls back to the default so extractors stay total.
    """
    value = _resolve_choice_env(
        "RELAY_MALFORMED_IMAGE_POLICY",
        DEFAULT_MALFORMED_IMAGE_POLICY,
        SUPPORTED_MALFORMED_IMAGE_POLICIES,
    )
    return cast(ImagePartPolicy, value)


def runtime_event_logs_enabled() -> bool:
    """Return whether low-noise runtime event logs are enabled."""
    return _resolve_bool_env("ENABLE_RUNTIME_EVENT_LOGS", DEFAULT_ENABLE_RUNTIME_EVENT_LOGS)
