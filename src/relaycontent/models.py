"""Request-side wire records of an OpenAI-compatible relay."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from .config import ImagePartPolicy
from .content import parse_content, string_content
from .inputs import parse_input
from .parts import ImageURLPart, TextPart
from .payload import RawPayload, is_string_content


class Message(BaseModel):
    """One conversation turn with a not-yet-interpreted `content` field."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    role: str
    content: RawPayload = Field(default_factory=RawPayload)
    name: str | None = None

    @field_validator("content", mode="before")
    @classmethod
    def _wrap_content(cls, value: Any) -> RawPayload:
        if isinstance(value, (bytes, bytearray)):
            return RawPayload.from_json(value)
        return RawPayload.from_value(value)

    @field_serializer("content")
    def _dump_content(self, content: RawPayload) -> Any:
        return content.to_value()

    def is_string_content(self) -> bool:
        return is_string_content(self.content)

    def string_content(self) -> str:
        return string_content(self.content)

    def parse_content(self, *, image_policy: ImagePartPolicy | None = None) -> list[TextPart | ImageURLPart]:
        return parse_content(self.content, image_policy=image_policy)


class ResponseFormat(BaseModel):
    type: str | None = None


class GeneralRequest(BaseModel):
    """Generic chat/completion/embedding request body.

    Only `messages` and `input` carry normalization behavior; the remaining fields
    are passed through untouched for downstream translators.
    """

    model_config = ConfigDict(extra="allow")

    model: str | None = None
    messages: list[Message] = Field(default_factory=list)
    prompt: Any = None
    stream: bool = False
    max_tokens: int | None = None
    temperature: float | None = None
    top_p: float | None = None
    n: int | None = None
    input: Any = None
    instruction: str | None = None
    size: str | None = None
    functions: Any = None
    frequency_penalty: float | None = None
    presence_penalty: float | None = None
    response_format: ResponseFormat | None = None
    seed: float | None = None
    tools: Any = None
    tool_choice: Any = None
    user: str | None = None

    def parse_input(self) -> list[str]:
        return parse_input(self.input)
