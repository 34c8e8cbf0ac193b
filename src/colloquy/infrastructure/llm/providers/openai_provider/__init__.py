"""OpenAI Responses API rendering of colloquy messages.

Translates domain message values into the provider's native ``input``
payload; no network calls are made here.
"""

from colloquy.infrastructure.llm.providers.openai_provider.translator import (
    OpenAISchema,
    messages_to_openai,
)

__all__ = [
    "OpenAISchema",
    "messages_to_openai",
]
