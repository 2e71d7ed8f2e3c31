"""Inspect how a relay request body normalizes."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, TextIO

from pydantic import ValidationError

from .config import SUPPORTED_MALFORMED_IMAGE_POLICIES, ImagePartPolicy
from .models import GeneralRequest, Message
from .parts import parts_to_wire


def _normalized_message(message: Message, image_policy: ImagePartPolicy | None) -> dict[str, Any]:
    return {
        "role": message.role,
        "name": message.name,
        "is_string": message.is_string_content(),
        "text": message.string_content(),
        "parts": parts_to_wire(message.parse_content(image_policy=image_policy)),
    }


def normalize_request_body(body: dict[str, Any], *, image_policy: ImagePartPolicy | None = None) -> dict[str, Any]:
    """Return the normalized view of one decoded request body."""
    request = GeneralRequest.model_validate(body)
    result: dict[str, Any] = {
        "messages": [_normalized_message(message, image_policy) for message in request.messages],
    }
    if request.input is not None:
        result["input"] = request.parse_input()
    return result


def _read_body(path: str | None, stdin: TextIO) -> str:
    if path is None or path == "-":
        return stdin.read()
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="relaycontent",
        description="Print the normalized messages and embedding input of a relay request body.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="JSON request body file. Omit or pass '-' to read stdin.",
    )
    parser.add_argument(
        "--policy",
        choices=SUPPORTED_MALFORMED_IMAGE_POLICIES,
        help="Override RELAY_MALFORMED_IMAGE_POLICY for image parts without a string url.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_arg_parser()
    parsed = parser.parse_args(sys.argv[1:] if argv is None else argv)

    try:
        raw_body = _read_body(parsed.path, sys.stdin)
    except OSError as exc:
        print(f"relaycontent: cannot read {parsed.path}: {exc}", file=sys.stderr)
        return 2

    try:
        body = json.loads(raw_body)
    except (ValueError, RecursionError) as exc:
        print(f"relaycontent: request body is not valid JSON: {exc}", file=sys.stderr)
        return 2
    if not isinstance(body, dict):
        print("relaycontent: request body must be a JSON object.", file=sys.stderr)
        return 2

    try:
        normalized = normalize_request_body(body, image_policy=parsed.policy)
    except ValidationError as exc:
        print(f"relaycontent: request body does not match the relay schema:\n{exc}", file=sys.stderr)
        return 2

    print(json.dumps(normalized, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
