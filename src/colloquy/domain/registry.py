"""Discriminator registry for the generic chat-message table."""

from structlog import get_logger

from colloquy.domain.exceptions import UnknownVariantError
from colloquy.shared.logger import Logger

logger: Logger = get_logger(__name__)

CHAT_MESSAGE_REGISTRY: dict[str, type] = {}


def register_message[MessageT](cls: type[MessageT]) -> type[MessageT]:
    """Decorator to register a chat-message variant under its ``TAG``."""
    tag = getattr(cls, "TAG", None)
    if not tag:
        raise ValueError(f"{cls.__name__} does not define a discriminator TAG")

    if tag in CHAT_MESSAGE_REGISTRY:
        logger.warning(f"Message variant already registered for '{tag}', overwriting")
    CHAT_MESSAGE_REGISTRY[tag] = cls
    return cls


def get_message_class(tag: object) -> type:
    message_class = CHAT_MESSAGE_REGISTRY.get(tag) if isinstance(tag, str) else None

    if message_class is None:
        raise UnknownVariantError(
            f"Unknown message variant '{tag}'. "
            f"Registered variants: {', '.join(sorted(CHAT_MESSAGE_REGISTRY))}"
        )

    return message_class


def list_registered_messages() -> dict[str, str]:
    """List registered discriminator tags with their variant names."""
    return {tag: cls.__name__ for tag, cls in CHAT_MESSAGE_REGISTRY.items()}


def _concrete_subclasses(base: type) -> list[type]:
    found: list[type] = []
    for subclass in base.__subclasses__():
        if getattr(subclass, "TAG", None):
            found.append(subclass)
        found.extend(_concrete_subclasses(subclass))
    return found


def validate_registry(
    base: type, registry: dict[str, type] | None = None
) -> None:
    """Check that every concrete subclass of *base* is registered under its tag.

    Raises:
        RuntimeError: If a variant is missing or registered under another tag
    """
    registry = CHAT_MESSAGE_REGISTRY if registry is None else registry

    missing = [
        cls.__name__
        for cls in _concrete_subclasses(base)
        if registry.get(cls.TAG) is not cls
    ]
    if missing:
        raise RuntimeError(
            f"Message variants missing from the discriminator registry: {', '.join(missing)}"
        )
