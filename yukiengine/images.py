"""In-memory RGBA-style images and solid colour fills."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import numpy as np
from PIL import Image as PILImage


class Image:
    """Pixel data stored row by row as an array of shape (height, width, channels)."""

    def __init__(self, data, width: int, height: int, channels: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("image dimensions must not be negative")
        if not 1 <= channels <= 4:
            raise ValueError(f"unsupported channel count: {channels}")
        if isinstance(data, (bytes, bytearray, memoryview)):
            array = np.frombuffer(bytes(data), dtype=np.uint8)
        else:
            array = np.asarray(data, dtype=np.uint8)
        self.data = array.reshape(height, width, channels).copy()
        self.width = width
        self.height = height
        self.channels = channels

    @classmethod
    def from_file(cls, path: str | Path, flip: bool = False) -> Image:
        """Load an image as four channels; rows are reversed unless ``flip`` is set."""
        with PILImage.open(path) as source:
            array = np.asarray(source.convert("RGBA"), dtype=np.uint8)
        if not flip:
            array = array[::-1]
        height, width = array.shape[:2]
        return cls(array, width, height, 4)

    def copy(self) -> Image:
        """An independent copy of this image."""
        return Image(self.data, self.width, self.height, self.channels)

    def tobytes(self) -> bytes:
        """The raw pixel bytes."""
        return self.data.tobytes()


def create_solid_color_image(
    color: float | Sequence[float], size: tuple[int, int] = (10, 10)
) -> Image:
    """An image of ``size`` (width, height) filled with ``color`` in [0, 1] per channel."""
    values = np.atleast_1d(np.asarray(color, dtype=np.float64))
    if values.ndim != 1 or not 1 <= values.size <= 4:
        raise ValueError("a colour needs between one and four components")
    pixel = np.clip(values * 255.0, 0.0, 255.0).astype(np.uint8)
    width, height = size
    data = np.broadcast_to(pixel, (height, width, values.size))
    return Image(data, width, height, values.size)