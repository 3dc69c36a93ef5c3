"""Image file decoding into bitmaps."""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod

from PIL import Image

from svision.bitmap import Bitmap
from svision.geometry import Size

logger = logging.getLogger(__name__)


class ImageDecoder(ABC):
    """Reads an image file into a bitmap."""

    @abstractmethod
    def decode(self, filename: str | os.PathLike[str], bitmap: Bitmap) -> bool:
        """Fill ``bitmap`` from ``filename``; return False if it cannot be decoded."""


class PillowImageDecoder(ImageDecoder):
    """Decoder backed by Pillow; pixels are stored with red in the lowest byte."""

    def decode(self, filename: str | os.PathLike[str], bitmap: Bitmap) -> bool:
        try:
            with Image.open(filename) as image:
                rgba = image.convert("RGBA")
        except (OSError, ValueError):
            logger.error("Failed to decode %s using Pillow decoder", filename)
            return False

        logger.info("Decoding %s using Pillow decoder...", filename)
        data = rgba.tobytes()
        bitmap.size = Size(*rgba.size)
        bitmap.buffer = [
            int.from_bytes(data[offset : offset + 4], "little")
            for offset in range(0, len(data), 4)
        ]
        return True


class ImageLoader:
    """Tries each registered decoder in turn until one succeeds."""

    def __init__(self) -> None:
        self._decoders: list[ImageDecoder] = [PillowImageDecoder()]

    def register_decoder(self, decoder: ImageDecoder) -> None:
        self._decoders.append(decoder)

    def load_file(self, filename: str | os.PathLike[str], bitmap: Bitmap) -> bool:
        return any(decoder.decode(filename, bitmap) for decoder in self._decoders)