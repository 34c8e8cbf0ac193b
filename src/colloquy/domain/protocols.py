from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

PathSource = str | Path | Sequence[str | Path]


@runtime_checkable
class ImageEncoder(Protocol):
    """Turns local image paths into transportable image references."""

    def __call__(self, image_path: PathSource, /) -> tuple[str, ...]: ...
