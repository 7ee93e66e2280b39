"""
Normalizer - Resize decoded textures into thumbnails on an opaque background.
"""

from typing import Tuple

from PIL import Image

from .decoder import DecodedImage
from .settings import ProgramSettings


def thumbnail_dimensions(width: int, height: int, size: int) -> Tuple[int, int]:
    """
    Fit (width, height) into a size x size box, preserving aspect ratio.

    The longer side becomes exactly size; the shorter side is scaled and
    rounded down, but never below 1.
    """
    if width > height:
        return size, max(1, (size * height) // width)
    return max(1, (size * width) // height), size


def normalize(decoded: DecodedImage, settings: ProgramSettings) -> DecodedImage:
    """
    Produce the thumbnail for a decoded texture.

    Palette and greyscale images are expanded to RGB (or RGBA when they
    carry transparency) so the bilinear filter applies. Transparent images
    are flattened onto settings.background_color.
    """
    img = _convert_color_mode(decoded)

    new_size = thumbnail_dimensions(img.width, img.height, settings.thumbnail_size)
    img = img.resize(new_size, Image.Resampling.BILINEAR)

    if img.mode == 'RGBA':
        img = _flatten(img, settings.background_color)

    return DecodedImage(img)


def _convert_color_mode(decoded: DecodedImage) -> Image.Image:
    """Convert to RGBA if the source can be transparent, RGB otherwise."""
    img = decoded.image
    target = 'RGBA' if decoded.supports_alpha else 'RGB'
    if img.mode == target:
        return img.copy()
    return img.convert(target)


def _flatten(img: Image.Image, color: Tuple[int, int, int, int]) -> Image.Image:
    background = Image.new('RGB', img.size, color[:3])
    background.paste(img, mask=img.split()[-1])
    return background
