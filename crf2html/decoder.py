"""
Decoder - Turn entry bytes into a decoded pixel buffer.
"""

import io
from dataclasses import dataclass
from functools import cached_property
from typing import Tuple

from PIL import Image

from .classifier import ClassifiedEntry, DecoderKind
from .errors import DecodeError

ALPHA_MODES = ('RGBA', 'LA', 'PA', 'RGBa', 'La')


@dataclass(frozen=True)
class DecodedImage:
    """
    A decoded image.

    Attributes:
        image: Pillow image with its pixel data loaded
    """
    image: Image.Image

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def size(self) -> Tuple[int, int]:
        return self.image.size

    @property
    def mode(self) -> str:
        return self.image.mode

    @property
    def supports_alpha(self) -> bool:
        """True if the colour model can carry partial transparency."""
        return self.image.mode in ALPHA_MODES or 'transparency' in self.image.info

    @cached_property
    def _rgba(self) -> Image.Image:
        return self.image.convert('RGBA')

    def getpixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        """Return the (r, g, b, a) colour of one pixel."""
        return self._rgba.getpixel((x, y))


def decode(entry: ClassifiedEntry, data: bytes) -> DecodedImage:
    """
    Decode an entry's bytes.

    PCX and TGA are read with their dedicated Pillow plugins; other formats
    are identified from the file header.

    Raises:
        DecodeError: If the bytes are not a readable image
    """
    try:
        if entry.format.decoder in (DecoderKind.PALETTE, DecoderKind.RUN_LENGTH):
            img = Image.open(io.BytesIO(data), formats=[entry.format.pillow_format])
        else:
            img = Image.open(io.BytesIO(data))
        img.load()
    except (OSError, SyntaxError, ValueError, EOFError, Image.DecompressionBombError) as e:
        raise DecodeError(entry.path, e) from e

    if img.width < 1 or img.height < 1:
        raise DecodeError(entry.path, ValueError(f"empty image {img.width}x{img.height}"))

    return DecodedImage(img)
