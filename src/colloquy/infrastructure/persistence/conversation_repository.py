"""File-backed storage of serialized conversations."""

from collections.abc import Iterable
from pathlib import Path
from typing import Self, final

from structlog import get_logger

from colloquy.config import AppConfig
from colloquy.domain.entities.messages import Message
from colloquy.infrastructure.serialization.codec import (
    dump_conversation,
    load_conversation,
)
from colloquy.shared.logger import Logger

logger: Logger = get_logger(__name__)


@final
class ConversationRepository:
    """Saves and loads conversations as JSON files under a root directory.

    Each conversation is stored as ``<root>/<name>.json`` holding an array
    of tagged message records.
    """

    def __init__(self, storage_root: Path):
        self.storage_root = storage_root

    @classmethod
    def from_config(cls, app_config: AppConfig) -> Self:
        return cls(storage_root=app_config.conversations_dir)

    def _construct_full_path(self, name: str) -> Path:
        return self.storage_root / f"{name}.json"

    def save(self, name: str, messages: Iterable[Message]) -> Path:
        full_path = self._construct_full_path(name)
        full_path.parent.mkdir(parents=True, exist_ok=True)

        full_path.write_text(dump_conversation(messages, indent=2), encoding="utf-8")
        logger.info("conversation_saved", path=str(full_path))
        return full_path

    def load(self, name: str) -> list[Message]:
        full_path = self._construct_full_path(name)

        try:
            text = full_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.error("conversation_not_found", path=str(full_path))
            raise

        return load_conversation(text)

    def exists(self, name: str) -> bool:
        return self._construct_full_path(name).is_file()

    def list_names(self) -> list[str]:
        if not self.storage_root.is_dir():
            return []
        return sorted(path.stem for path in self.storage_root.glob("*.json"))
