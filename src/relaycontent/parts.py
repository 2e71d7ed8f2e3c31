"""Typed content parts produced by the content parser."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .config import DEFAULT_IMAGE_DETAIL


class ContentType:
    TEXT = "text"
    IMAGE_URL = "image_url"


class ImageURL(BaseModel):
    """Wire record nested under an `image_url` content part."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(description="Image location: an http(s) URL or a data URI.")
    detail: str = Field(default=DEFAULT_IMAGE_DETAIL, description="Requested fidelity, e.g. low/high/auto.")


class TextPart(BaseModel):
    """Plain text segment of a message."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str

    def to_wire(self) -> dict[str, Any]:
        return {"type": ContentType.TEXT, "text": self.text}


class ImageURLPart(BaseModel):
    """Image reference of a message."""

    model_config = ConfigDict(frozen=True)

    type: Literal["image_url"] = "image_url"
    url: str
    detail: str = DEFAULT_IMAGE_DETAIL

    @property
    def image_url(self) -> ImageURL:
        return ImageURL(url=self.url, detail=self.detail)

    def to_wire(self) -> dict[str, Any]:
        return {"type": ContentType.IMAGE_URL, "image_url": self.image_url.model_dump()}


ContentPart = Annotated[Union[TextPart, ImageURLPart], Field(discriminator="type")]


def parts_to_wire(parts: list[TextPart | ImageURLPart]) -> list[dict[str, Any]]:
    """Render parsed parts in the canonical OpenAI multi-part shape."""
    return [part.to_wire() for part in parts]
