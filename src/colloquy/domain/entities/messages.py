"""Domain entities for conversation messages.

A conversation is an ordered sequence of immutable message values. Each
concrete variant is a frozen dataclass with a class-level discriminator
(``TAG``, exposed as ``_type``) used for serialization.

Two families exist:
    - chat messages (``BaseChatMessage``): text-oriented, dispatched
      generically through the discriminator registry
    - data messages (``BaseDataMessage``): arbitrary payloads such as
      embeddings, only (de)serialized when the concrete class is known

Messages compare equal only if they are the same variant with equal fields,
and iterate over their field values in declaration order.
"""

import abc
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, ClassVar, Self

from colloquy.domain.exceptions import InvalidArgumentError
from colloquy.domain.protocols import ImageEncoder, PathSource
from colloquy.domain.registry import register_message, validate_registry
from colloquy.domain.services.variables import extract_handlebar_variables
from colloquy.shared.utils import as_string_tuple

ImageSource = str | Sequence[str]


class Message(abc.ABC):
    """Base of every message variant.

    Field traversal follows the dataclass-generated ``__match_args__`` of
    the concrete variant, i.e. its declared fields in order. The ``_type``
    discriminator is class-level and not part of the traversal, so
    ``len()`` counts data fields only.
    """

    TAG: ClassVar[str]
    __match_args__: ClassVar[tuple[str, ...]] = ()

    @property
    def _type(self) -> str:
        return self.TAG

    def __iter__(self) -> Iterator[Any]:
        return (getattr(self, name) for name in self.__match_args__)

    def __len__(self) -> int:
        return len(self.__match_args__)


class BaseChatMessage(Message):
    """Message with text-based content."""


class BaseDataMessage(Message):
    """Message with data-based content, e.g. embeddings."""


class _TemplatedContent:
    """Derives ``variables`` from ``content`` unless given explicitly."""

    content: str
    variables: tuple[str, ...] | None

    def __post_init__(self) -> None:
        if self.variables is None:
            variables = extract_handlebar_variables(self.content)
        else:
            variables = as_string_tuple(self.variables)
        object.__setattr__(self, "variables", variables)


def _normalize_tokens(message: Any) -> None:
    object.__setattr__(message, "tokens", tuple(message.tokens))


@register_message
@dataclass(frozen=True)
class MetadataMessage(BaseChatMessage):
    """Descriptive metadata attached to a serialized conversation or template.

    Ignored by renderers.
    """

    TAG: ClassVar[str] = "metadatamessage"

    content: str
    description: str = ""
    version: str = "1"
    source: str = ""


@register_message
@dataclass(frozen=True)
class SystemMessage(_TemplatedContent, BaseChatMessage):
    TAG: ClassVar[str] = "systemmessage"

    content: str
    variables: tuple[str, ...] | None = None


@register_message
@dataclass(frozen=True)
class UserMessage(_TemplatedContent, BaseChatMessage):
    TAG: ClassVar[str] = "usermessage"

    content: str
    variables: tuple[str, ...] | None = None


@register_message
@dataclass(frozen=True)
class UserMessageWithImages(_TemplatedContent, BaseChatMessage):
    """User message carrying one or more image references.

    Attributes:
        content: The message text
        image_url: Image URLs or data URLs, at least one
        variables: Placeholder names found in ``content``

    Examples:
        UserMessageWithImages("What is this?", image_url="https://example.com/a.png")

        UserMessageWithImages.from_images(
            "Compare these",
            image_url="https://example.com/a.png",
            image_path="b.jpg",
            encoder=encode_local_images,
        )
    """

    TAG: ClassVar[str] = "usermessagewithimages"

    content: str
    image_url: tuple[str, ...] = ()
    variables: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        image_url = as_string_tuple(self.image_url)
        if not image_url:
            raise InvalidArgumentError(
                "UserMessageWithImages requires at least one image reference."
            )
        object.__setattr__(self, "image_url", image_url)
        super().__post_init__()

    @classmethod
    def from_images(
        cls,
        content: str,
        image_url: ImageSource | None = None,
        image_path: PathSource | None = None,
        encoder: ImageEncoder | None = None,
    ) -> Self:
        """Construct the message from image URLs and/or local image paths.

        URL references come first, followed by the local images turned into
        references by *encoder*.

        Raises:
            InvalidArgumentError: If neither ``image_url`` nor ``image_path`` is
                given, or ``image_path`` is given without an ``encoder``
        """
        if image_url is None and image_path is None:
            raise InvalidArgumentError(
                "At least one of `image_url` and `image_path` must be provided."
            )

        urls = as_string_tuple(image_url) if image_url is not None else ()
        if image_path is not None and encoder is None:
            raise InvalidArgumentError(
                "`image_path` requires an image encoder to turn paths into references."
            )
        encoded = encoder(image_path) if image_path is not None else ()

        return cls(content=content, image_url=(*urls, *encoded))


@register_message
@dataclass(frozen=True)
class AIMessage(BaseChatMessage):
    """Model reply.

    ``content`` is ``None`` for a failed generation. ``tokens`` holds
    (prompt, completion) counts and ``elapsed`` the generation time in
    seconds; ``(-1, -1)`` and ``-1.0`` mean "not recorded".
    """

    TAG: ClassVar[str] = "aimessage"

    content: str | None = None
    status: int | None = None
    tokens: tuple[int, int] = (-1, -1)
    elapsed: float = -1.0

    def __post_init__(self) -> None:
        _normalize_tokens(self)


@dataclass(frozen=True)
class DataMessage(BaseDataMessage):
    TAG: ClassVar[str] = "datamessage"

    content: Any
    status: int | None = None
    tokens: tuple[int, int] = (-1, -1)
    elapsed: float = -1.0

    def __post_init__(self) -> None:
        _normalize_tokens(self)


MessageList = list[Message] | tuple[Message, ...]

PromptInput = str | Message | MessageList


def is_user_message(message: Message) -> bool:
    """True for plain ``UserMessage`` only, not ``UserMessageWithImages``."""
    return isinstance(message, UserMessage)


def is_system_message(message: Message) -> bool:
    return isinstance(message, SystemMessage)


def message_fields(message: Message) -> tuple[tuple[str, Any], ...]:
    """Return ``(name, value)`` pairs for every declared field of *message*."""
    return tuple(zip(message.__match_args__, message))


validate_registry(BaseChatMessage)
