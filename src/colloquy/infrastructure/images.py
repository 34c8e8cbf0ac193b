"""Encoding of local image files into data URLs."""

import base64
from collections.abc import Sequence
from io import BytesIO
from pathlib import Path
from typing import Literal

from PIL import Image
from PIL.Image import Image as PILImage
from structlog import get_logger

from colloquy.config import get_app_config
from colloquy.shared.logger import Logger

logger: Logger = get_logger(__name__)

ImageFormat = Literal["JPEG", "PNG"]

MIME_TYPES: dict[str, str] = {
    "JPEG": "image/jpeg",
    "PNG": "image/png",
}


def encode_image_to_base64(pil_image: PILImage, image_format: ImageFormat = "JPEG") -> str:
    """Convert PIL image to base64 string."""
    buffer = BytesIO()
    if image_format == "JPEG":
        pil_image = pil_image.convert("RGB")
    pil_image.save(buffer, format=image_format)
    return base64.b64encode(buffer.getvalue()).decode("utf-8")


def encode_local_image(
    image_path: str | Path, image_format: ImageFormat | None = None
) -> str:
    """Read an image from disk and return it as a ``data:`` URL.

    Args:
        image_path: Path to the image file
        image_format: Target encoding, defaults to ``AppConfig.image_format``

    Returns:
        Data URL such as ``data:image/jpeg;base64,...``

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = Path(image_path)
    if not path.is_file():
        raise FileNotFoundError(f"Image file '{path}' does not exist")

    image_format = image_format or get_app_config().image_format

    with Image.open(path) as pil_image:
        encoded = encode_image_to_base64(pil_image, image_format)

    logger.debug("local_image_encoded", path=str(path), format=image_format)
    return f"data:{MIME_TYPES[image_format]};base64,{encoded}"


def encode_local_images(
    image_path: str | Path | Sequence[str | Path],
    image_format: ImageFormat | None = None,
) -> tuple[str, ...]:
    """Encode one or more local images, preserving their order."""
    paths = [image_path] if isinstance(image_path, (str, Path)) else image_path
    return tuple(encode_local_image(path, image_format) for path in paths)
