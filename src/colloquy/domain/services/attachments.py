"""Attaching images to the user message that should carry them."""

from collections.abc import Sequence
from functools import singledispatch
from typing import Any

from structlog import get_logger

from colloquy.domain.entities.messages import (
    ImageSource,
    Message,
    UserMessage,
    UserMessageWithImages,
    is_user_message,
)
from colloquy.domain.exceptions import PreconditionError, UnsupportedOperationError
from colloquy.domain.protocols import ImageEncoder, PathSource
from colloquy.shared.logger import Logger

logger: Logger = get_logger(__name__)


@singledispatch
def attach_images_to_user_message(
    target: Any,
    *,
    image_url: ImageSource | None = None,
    image_path: PathSource | None = None,
    encoder: ImageEncoder | None = None,
    attach_to_latest: bool = True,
) -> Any:
    """Attach images to *target*, returning new values and never mutating it.

    Supported targets:
        - ``str``: becomes a new ``UserMessageWithImages``
        - ``UserMessage``: converted to ``UserMessageWithImages`` with the same content
        - ``list`` / ``tuple`` of messages: the latest ``UserMessage`` is converted,
          the container kind, length and order are preserved

    Raises:
        UnsupportedOperationError: If *target* already carries images or is
            another kind of message
        PreconditionError: If a sequence has no user message, or several user
            messages while ``attach_to_latest`` is False
        InvalidArgumentError: If neither ``image_url`` nor ``image_path`` is given,
            or ``image_path`` is given without an ``encoder``
    """
    raise UnsupportedOperationError(
        f"Cannot attach images to {type(target).__name__}."
    )


@attach_images_to_user_message.register
def _(
    target: str,
    *,
    image_url: ImageSource | None = None,
    image_path: PathSource | None = None,
    encoder: ImageEncoder | None = None,
    attach_to_latest: bool = True,
) -> UserMessageWithImages:
    return UserMessageWithImages.from_images(
        target, image_url=image_url, image_path=image_path, encoder=encoder
    )


@attach_images_to_user_message.register
def _(
    target: UserMessage,
    *,
    image_url: ImageSource | None = None,
    image_path: PathSource | None = None,
    encoder: ImageEncoder | None = None,
    attach_to_latest: bool = True,
) -> UserMessageWithImages:
    return UserMessageWithImages.from_images(
        target.content, image_url=image_url, image_path=image_path, encoder=encoder
    )


@attach_images_to_user_message.register
def _(target: UserMessageWithImages, **kwargs: Any) -> UserMessageWithImages:
    raise UnsupportedOperationError(
        "Cannot attach additional images to a message that already has images."
    )


def _attach_to_latest_user_message(
    messages: Sequence[Message],
    image_url: ImageSource | None,
    image_path: PathSource | None,
    encoder: ImageEncoder | None,
    attach_to_latest: bool,
) -> list[Message]:
    user_indices = [i for i, message in enumerate(messages) if is_user_message(message)]

    if not user_indices:
        raise PreconditionError("At least one user message must be provided.")
    if not attach_to_latest and len(user_indices) > 1:
        raise PreconditionError(
            f"Found {len(user_indices)} user messages and `attach_to_latest` is False. "
            "Cannot decide which message should carry the images."
        )

    idx = user_indices[-1]
    attached = attach_images_to_user_message(
        messages[idx], image_url=image_url, image_path=image_path, encoder=encoder
    )
    logger.debug("images_attached", index=idx, image_count=len(attached.image_url))

    updated: list[Message] = list(messages)
    updated[idx] = attached
    return updated


@attach_images_to_user_message.register(list)
def _(
    target: list,
    *,
    image_url: ImageSource | None = None,
    image_path: PathSource | None = None,
    encoder: ImageEncoder | None = None,
    attach_to_latest: bool = True,
) -> list[Message]:
    return _attach_to_latest_user_message(
        target, image_url, image_path, encoder, attach_to_latest
    )


@attach_images_to_user_message.register(tuple)
def _(
    target: tuple,
    *,
    image_url: ImageSource | None = None,
    image_path: PathSource | None = None,
    encoder: ImageEncoder | None = None,
    attach_to_latest: bool = True,
) -> tuple[Message, ...]:
    return tuple(
        _attach_to_latest_user_message(
            target, image_url, image_path, encoder, attach_to_latest
        )
    )
