import pytest
from pydantic import ValidationError

from relaycontent import GeneralRequest, ImageURL, ImageURLPart, Message, RawPayload, TextPart
from relaycontent.parts import parts_to_wire


def test_message_wraps_string_content_lazily():
    message = Message.model_validate({"role": "user", "content": "hello", "name": "ann"})

    assert isinstance(message.content, RawPayload)
    assert message.is_string_content() is True
    assert message.string_content() == "hello"
    assert message.parse_content() == [TextPart(text="hello")]
    assert message.name == "ann"


def test_message_with_multi_part_content():
    message = Message.model_validate(
        {
            "role": "user",
            "content": [
                {"type": "text", "text": "what is "},
                {"type": "image_url", "image_url": {"url": "http://x"}},
                {"type": "text", "text": "this?"},
            ],
        }
    )

    assert message.is_string_content() is False
    assert message.string_content() == "what is this?"
    assert message.parse_content() == [
        TextPart(text="what is "),
        ImageURLPart(url="http://x", detail="auto"),
        TextPart(text="this?"),
    ]


def test_message_without_content_is_empty():
    message = Message(role="assistant")

    assert message.content.is_empty
    assert message.string_content() == ""
    assert message.parse_content() == []
    assert Message(role="assistant", content=None).content.is_empty


def test_message_accepts_raw_json_bytes():
    message = Message(role="user", content=b'[{"type":"text","text":"raw"}]')
    broken = Message(role="user", content=b'{"type":')

    assert message.string_content() == "raw"
    assert broken.string_content() == ""
    assert broken.parse_content() == []


def test_message_requires_role():
    with pytest.raises(ValidationError):
        Message.model_validate({"content": "hi"})


def test_message_dump_restores_wire_content():
    body = {"role": "user", "content": [{"type": "text", "text": "a"}], "name": None}

    assert Message.model_validate(body).model_dump() == body


def test_message_extractors_are_independent():
    message = Message(role="user", content=[{"type": "text", "text": "a"}])

    parsed = message.parse_content()
    assert message.string_content() == "a"
    assert message.is_string_content() is False
    assert message.parse_content() == parsed


def test_general_request_parses_messages_and_input():
    request = GeneralRequest.model_validate_json(
        '{"model": "text-embedding-3-small", "input": ["a", 3, "b"],'
        ' "messages": [{"role": "system", "content": "be brief"}], "encoding_format": "float"}'
    )

    assert request.model == "text-embedding-3-small"
    assert request.parse_input() == ["a", "b"]
    assert request.messages[0].string_content() == "be brief"
    assert request.model_extra == {"encoding_format": "float"}


def test_general_request_without_input():
    request = GeneralRequest.model_validate({"model": "gpt-4o", "messages": []})

    assert request.parse_input() == []
    assert request.stream is False


def test_image_url_part_wire_shape():
    part = ImageURLPart(url="http://x", detail="low")

    assert part.image_url == ImageURL(url="http://x", detail="low")
    assert part.to_wire() == {"type": "image_url", "image_url": {"url": "http://x", "detail": "low"}}
    assert parts_to_wire([TextPart(text="hi"), part]) == [
        {"type": "text", "text": "hi"},
        {"type": "image_url", "image_url": {"url": "http://x", "detail": "low"}},
    ]


def test_content_parts_are_frozen():
    part = TextPart(text="a")

    with pytest.raises(ValidationError):
        part.text = "b"
