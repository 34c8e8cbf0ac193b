"""Shared fixtures for domain tests."""

from pathlib import Path

import pytest

from colloquy.domain.protocols import ImageEncoder, PathSource


class FakeImageEncoder:
    """Encoder double that records the paths it was asked to encode."""

    def __init__(self):
        self.calls: list[PathSource] = []

    def __call__(self, image_path: PathSource, /) -> tuple[str, ...]:
        self.calls.append(image_path)
        paths = [image_path] if isinstance(image_path, (str, Path)) else image_path
        return tuple(f"encoded:{Path(path).name}" for path in paths)


@pytest.fixture
def fake_encoder() -> ImageEncoder:
    return FakeImageEncoder()
