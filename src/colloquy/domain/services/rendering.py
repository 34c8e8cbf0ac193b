"""Normalization of prompt inputs before schema-specific rendering."""

from functools import singledispatch
from typing import Any, Protocol, runtime_checkable

from colloquy.domain.entities.messages import (
    Message,
    MessageList,
    PromptInput,
    UserMessage,
)


@runtime_checkable
class PromptSchema(Protocol):
    """Provider-specific convention for turning messages into a request payload."""

    def render(self, messages: MessageList, **kwargs: Any) -> Any: ...


@singledispatch
def normalize_prompt(prompt: Any) -> MessageList:
    """Normalize a string, a message or a message sequence to a message sequence.

    Raises:
        TypeError: If *prompt* is none of the accepted shapes
    """
    raise TypeError(
        f"Unsupported prompt type {type(prompt).__name__}, "
        "expected str, Message or a sequence of messages."
    )


@normalize_prompt.register
def _(prompt: str) -> MessageList:
    return [UserMessage(content=prompt)]


@normalize_prompt.register
def _(prompt: Message) -> MessageList:
    return [prompt]


@normalize_prompt.register(list)
@normalize_prompt.register(tuple)
def _(prompt: MessageList) -> MessageList:
    return prompt


def render(schema: PromptSchema, prompt: PromptInput, **kwargs: Any) -> Any:
    """Normalize *prompt* and delegate formatting to *schema*.

    Keyword options are passed to ``schema.render`` unmodified.
    """
    if not isinstance(schema, PromptSchema):
        raise TypeError(f"{type(schema).__name__} does not implement PromptSchema")

    return schema.render(normalize_prompt(prompt), **kwargs)
