"""
colloquy - typed, immutable conversation messages for LLM prompts.

Structure:
    domain/          - message variants, registry, attachment and rendering services
    infrastructure/  - serialization, image encoding, provider rendering, persistence

Usage:
    from colloquy import SystemMessage, UserMessage, attach_images_to_user_message

    conversation = [SystemMessage("You describe images."), UserMessage("What is {{thing}}?")]
    conversation = attach_images_to_user_message(conversation, image_url="https://example.com/a.png")
"""

from colloquy.domain.entities.messages import (
    AIMessage,
    BaseChatMessage,
    BaseDataMessage,
    DataMessage,
    Message,
    MessageList,
    MetadataMessage,
    PromptInput,
    SystemMessage,
    UserMessage,
    UserMessageWithImages,
    is_system_message,
    is_user_message,
    message_fields,
)
from colloquy.domain.exceptions import (
    InvalidArgumentError,
    MessageError,
    PreconditionError,
    UnknownVariantError,
    UnsupportedOperationError,
)
from colloquy.domain.protocols import ImageEncoder
from colloquy.domain.services.attachments import attach_images_to_user_message
from colloquy.domain.services.rendering import PromptSchema, normalize_prompt, render
from colloquy.domain.services.variables import extract_handlebar_variables
from colloquy.infrastructure.serialization.codec import (
    dump_conversation,
    from_dict,
    from_json,
    load_conversation,
    to_dict,
    to_json,
)

__all__ = [
    # Messages
    "Message",
    "BaseChatMessage",
    "BaseDataMessage",
    "MetadataMessage",
    "SystemMessage",
    "UserMessage",
    "UserMessageWithImages",
    "AIMessage",
    "DataMessage",
    "MessageList",
    "PromptInput",
    "is_user_message",
    "is_system_message",
    "message_fields",
    # Errors
    "MessageError",
    "InvalidArgumentError",
    "UnsupportedOperationError",
    "PreconditionError",
    "UnknownVariantError",
    # Services
    "extract_handlebar_variables",
    "attach_images_to_user_message",
    "normalize_prompt",
    "render",
    "PromptSchema",
    "ImageEncoder",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    "dump_conversation",
    "load_conversation",
]
