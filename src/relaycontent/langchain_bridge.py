"""Hand normalized messages to LangChain-based translators."""

from __future__ import annotations

from typing import Any

from langchain_core.messages import AIMessage, BaseMessage, ChatMessage, HumanMessage, SystemMessage

from .config import ImagePartPolicy
from .models import Message
from .parts import parts_to_wire


def _langchain_content(message: Message, image_policy: ImagePartPolicy | None) -> str | list[dict[str, Any]]:
    if message.is_string_content():
        return message.string_content()
    return parts_to_wire(message.parse_content(image_policy=image_policy))


def to_langchain_message(message: Message, *, image_policy: ImagePartPolicy | None = None) -> BaseMessage:
    """Convert one relay message into the matching `langchain_core` message type."""
    content = _langchain_content(message, image_policy)
    role = message.role.strip().lower()
    kwargs: dict[str, Any] = {}
    if message.name:
        kwargs["name"] = message.name

    if role == "user":
        return HumanMessage(content=content, **kwargs)
    if role == "assistant":
        return AIMessage(content=content, **kwargs)
    if role == "system":
        return SystemMessage(content=content, **kwargs)
    return ChatMessage(role=message.role, content=content, **kwargs)


def to_langchain_messages(
    messages: list[Message],
    *,
    image_policy: ImagePartPolicy | None = None,
) -> list[BaseMessage]:
    """Convert a conversation, keeping message order."""
    return [to_langchain_message(message, image_policy=image_policy) for message in messages]
