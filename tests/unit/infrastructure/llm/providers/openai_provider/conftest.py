"""Shared fixtures for OpenAI provider tests."""

import pytest

from colloquy.domain.entities.messages import (
    AIMessage,
    MessageList,
    MetadataMessage,
    SystemMessage,
    UserMessage,
    UserMessageWithImages,
)


@pytest.fixture
def system_message() -> SystemMessage:
    return SystemMessage("You are {{persona}}.")


@pytest.fixture
def user_message() -> UserMessage:
    return UserMessage("Hello, {{name}}!")


@pytest.fixture
def image_message() -> UserMessageWithImages:
    return UserMessageWithImages(
        "What's in this image?",
        image_url=(
            "https://example.com/photo.jpg",
            "data:image/jpeg;base64,/9j/4AAQSkZJRg==",
        ),
    )


@pytest.fixture
def conversation_multimodal(system_message, image_message) -> MessageList:
    """Multimodal conversation with metadata and a model reply."""
    return [
        MetadataMessage("annotation template", version="2"),
        system_message,
        image_message,
        AIMessage("A lighthouse.", status=200, tokens=(100, 4), elapsed=0.8),
        UserMessage("Thanks {{name}}"),
    ]
