"""Tests for prompt normalization and render delegation."""

from typing import Any

import pytest

from colloquy.domain.entities.messages import (
    AIMessage,
    MessageList,
    SystemMessage,
    UserMessage,
)
from colloquy.domain.services.rendering import PromptSchema, normalize_prompt, render


class RecordingSchema:
    """Schema double that records what it was asked to render."""

    def __init__(self):
        self.calls: list[tuple[MessageList, dict[str, Any]]] = []

    def render(self, messages: MessageList, **kwargs: Any) -> str:
        self.calls.append((messages, kwargs))
        return "rendered"


class TestNormalizePrompt:
    """Test suite for normalize_prompt."""

    def test_string_becomes_default_user_message(self):
        assert normalize_prompt("hi") == [UserMessage("hi")]

    def test_string_placeholders_are_extracted(self):
        result = normalize_prompt("hi {{name}}")

        assert result[0].variables == ("name",)

    def test_single_message_is_wrapped(self):
        message = SystemMessage("sys")

        assert normalize_prompt(message) == [message]

    def test_list_passes_through_unchanged(self):
        messages = [SystemMessage("sys"), UserMessage("hi"), AIMessage("hello")]

        assert normalize_prompt(messages) is messages

    def test_tuple_passes_through_unchanged(self):
        messages = (SystemMessage("sys"), UserMessage("hi"))

        assert normalize_prompt(messages) is messages

    @pytest.mark.parametrize("prompt", [None, 42, {"content": "hi"}])
    def test_unsupported_input_raises(self, prompt):
        with pytest.raises(TypeError, match="Unsupported prompt type"):
            normalize_prompt(prompt)


class TestRender:
    """Test suite for render delegation."""

    @pytest.fixture
    def schema(self) -> RecordingSchema:
        return RecordingSchema()

    def test_recording_schema_satisfies_protocol(self, schema):
        assert isinstance(schema, PromptSchema)

    def test_render_string(self, schema):
        result = render(schema, "hi")

        assert result == "rendered"
        assert schema.calls == [([UserMessage("hi")], {})]

    def test_render_single_message(self, schema):
        render(schema, SystemMessage("sys"))

        assert schema.calls[0][0] == [SystemMessage("sys")]

    def test_render_sequence_and_options_pass_through(self, schema):
        messages = [SystemMessage("sys"), UserMessage("hi {{name}}")]

        render(schema, messages, name="Ada", model="any")

        rendered_messages, options = schema.calls[0]
        assert rendered_messages is messages
        assert options == {"name": "Ada", "model": "any"}

    def test_render_rejects_non_schema(self):
        with pytest.raises(TypeError, match="PromptSchema"):
            render(object(), "hi")
