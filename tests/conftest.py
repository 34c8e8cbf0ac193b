from pathlib import Path

import pytest
from PIL import Image

from colloquy.config import get_app_config


@pytest.fixture(autouse=True)
def _fresh_app_config():
    """Re-read settings for every test so env overrides do not leak."""
    get_app_config.cache_clear()
    yield
    get_app_config.cache_clear()


@pytest.fixture
def sample_pil_image() -> Image.Image:
    """Generate a synthetic PIL image for testing instead of loading from file."""
    return Image.new("RGB", (16, 16), color=(200, 30, 30))


@pytest.fixture
def sample_image_path(tmp_path: Path, sample_pil_image: Image.Image) -> Path:
    """Write the synthetic image to disk and return its path."""
    path = tmp_path / "sample.png"
    sample_pil_image.save(path, format="PNG")
    return path


@pytest.fixture
def second_image_path(tmp_path: Path) -> Path:
    path = tmp_path / "second.png"
    Image.new("RGB", (8, 8), color=(10, 10, 200)).save(path, format="PNG")
    return path
