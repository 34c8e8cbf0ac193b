from collections.abc import Mapping
from functools import singledispatch
from typing import Any, Literal

from openai.types.responses import (
    EasyInputMessageParam,
    ResponseInputImageParam,
    ResponseInputParam,
    ResponseInputTextParam,
)

from colloquy.config import get_app_config
from colloquy.domain.entities.messages import (
    AIMessage,
    MessageList,
    MetadataMessage,
    Message,
    SystemMessage,
    UserMessage,
    UserMessageWithImages,
)
from colloquy.infrastructure.llm.templating import substitute_variables

ImageDetail = Literal["auto", "low", "high"]


@singledispatch
def translate(
    message: Message, replacements: Mapping[str, Any], detail: ImageDetail
) -> EasyInputMessageParam | None:
    raise ValueError(f"No translator for {type(message)}")


@translate.register
def _(
    message: MetadataMessage, replacements: Mapping[str, Any], detail: ImageDetail
) -> None:
    return None


@translate.register
def _(
    message: SystemMessage, replacements: Mapping[str, Any], detail: ImageDetail
) -> EasyInputMessageParam:
    return EasyInputMessageParam(
        role="system",
        content=substitute_variables(message.content, message.variables, replacements),
    )


@translate.register
def _(
    message: UserMessage, replacements: Mapping[str, Any], detail: ImageDetail
) -> EasyInputMessageParam:
    return EasyInputMessageParam(
        role="user",
        content=substitute_variables(message.content, message.variables, replacements),
    )


@translate.register
def _(
    message: UserMessageWithImages,
    replacements: Mapping[str, Any],
    detail: ImageDetail,
) -> EasyInputMessageParam:
    text = substitute_variables(message.content, message.variables, replacements)
    return EasyInputMessageParam(
        role="user",
        content=[
            ResponseInputTextParam(text=text, type="input_text"),
            *(
                ResponseInputImageParam(image_url=url, detail=detail, type="input_image")
                for url in message.image_url
            ),
        ],
    )


@translate.register
def _(
    message: AIMessage, replacements: Mapping[str, Any], detail: ImageDetail
) -> EasyInputMessageParam:
    return EasyInputMessageParam(role="assistant", content=message.content or "")


def messages_to_openai(
    messages: MessageList,
    replacements: Mapping[str, Any] | None = None,
    detail: ImageDetail = "auto",
) -> ResponseInputParam:
    replacements = replacements or {}
    rendered = (translate(message, replacements, detail) for message in messages)
    return [item for item in rendered if item is not None]


class OpenAISchema:
    """Renders a message sequence into the OpenAI Responses ``input`` payload.

    Keyword options given to ``render`` fill handlebar placeholders of
    system and user messages. ``MetadataMessage`` values are skipped.
    """

    def __init__(self, image_detail: ImageDetail | None = None):
        self.image_detail: ImageDetail = image_detail or get_app_config().image_detail

    def render(self, messages: MessageList, **kwargs: Any) -> ResponseInputParam:
        return messages_to_openai(messages, kwargs, detail=self.image_detail)
