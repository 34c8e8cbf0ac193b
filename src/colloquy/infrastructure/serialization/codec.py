"""Discriminator-based (de)serialization of messages.

Every record is a JSON-compatible mapping holding the variant's declared
fields plus the ``_type`` discriminator. Chat messages are dispatched through
the registry; data messages are only read when the caller names the class.
"""

import json
from collections.abc import Iterable, Mapping
from functools import cache
from typing import Any

from pydantic import TypeAdapter
from structlog import get_logger

from colloquy.domain.entities.messages import Message
from colloquy.domain.exceptions import UnknownVariantError
from colloquy.domain.registry import get_message_class
from colloquy.shared.logger import Logger

logger: Logger = get_logger(__name__)

TYPE_KEY = "_type"


@cache
def _adapter(message_class: type[Message]) -> TypeAdapter[Any]:
    return TypeAdapter(message_class)


def to_dict(message: Message) -> dict[str, Any]:
    """Serialize *message* to a tagged, JSON-compatible mapping."""
    payload = _adapter(type(message)).dump_python(message, mode="json")
    return {TYPE_KEY: message.TAG, **payload}


def from_dict[MessageT: Message](
    data: Mapping[str, Any], message_class: type[MessageT] | None = None
) -> Message:
    """Reconstruct a message from a tagged mapping.

    Args:
        data: Mapping produced by ``to_dict``
        message_class: Concrete class to read, required for data messages;
            when omitted the ``_type`` tag is looked up in the registry

    Raises:
        UnknownVariantError: If the tag is missing, unregistered or does not
            match ``message_class``
        pydantic.ValidationError: If a field value is invalid
    """
    tag = data.get(TYPE_KEY)

    if message_class is None:
        try:
            message_class = get_message_class(tag)
        except UnknownVariantError:
            logger.error("unknown_message_variant", tag=tag, keys=sorted(data))
            raise
    elif tag != message_class.TAG:
        raise UnknownVariantError(
            f"Record tagged '{tag}' cannot be read as {message_class.__name__}."
        )

    fields = {key: value for key, value in data.items() if key != TYPE_KEY}
    return _adapter(message_class).validate_python(fields)


def to_json(message: Message) -> str:
    return json.dumps(to_dict(message))


def from_json[MessageT: Message](
    text: str | bytes, message_class: type[MessageT] | None = None
) -> Message:
    return from_dict(json.loads(text), message_class)


def dump_conversation(messages: Iterable[Message], indent: int | None = None) -> str:
    """Serialize a message sequence to a JSON array of tagged records."""
    return json.dumps([to_dict(message) for message in messages], indent=indent)


def load_conversation(text: str | bytes) -> list[Message]:
    """Read a JSON array of tagged chat-message records."""
    records = json.loads(text)
    if not isinstance(records, list):
        raise ValueError("A serialized conversation must be a JSON array.")
    for position, record in enumerate(records):
        if not isinstance(record, Mapping):
            raise ValueError(
                f"Conversation entry {position} must be a JSON object, "
                f"got {type(record).__name__}."
            )
    return [from_dict(record) for record in records]
