"""
TextureEncoder - Compress thumbnails and wrap them as HTML fragments.
"""

import base64
import html
import io
import logging
from dataclasses import dataclass
from typing import Optional

from .classifier import ClassifiedEntry
from .decoder import DecodedImage
from .errors import EncodeError
from .settings import DEFAULT_QUALITY

CONTENT_TYPE = 'image/jpeg'

TEXTURE_TEMPLATE = (
    "<div class='texture'>"
    "<div class='image'><img src='{uri}'></div>"
    "<div class='caption'>"
    "<span class='filename'>{name}</span> "
    "<span class='info'>{info}</span>"
    "</div>"
    "</div>"
)


@dataclass(frozen=True)
class Texture:
    """
    One rendered texture.

    Attributes:
        name: Lower-cased filename without extension
        width: Embedded thumbnail width
        height: Embedded thumbnail height
        format_label: Original file extension, without the dot
        data_uri: Base64 data URI of the JPEG thumbnail
        html: Rendered HTML fragment
    """
    name: str
    width: int
    height: int
    format_label: str
    data_uri: str
    html: str

    @property
    def dimensions(self) -> str:
        return f"{self.width}x{self.height}"

    @property
    def info(self) -> str:
        return f"{self.dimensions} ({self.format_label})"

    @property
    def caption(self) -> str:
        """Caption text, e.g. 'oak 128x64 (png)'. Textures sort by this."""
        return f"{self.name} {self.info}"

    @property
    def encoded_size(self) -> int:
        """Length of the data URI in bytes."""
        return len(self.data_uri)


class TextureEncoder:
    """
    Encodes normalized thumbnails as inline JPEG textures.
    """

    def __init__(self, quality: int = DEFAULT_QUALITY, logger: Optional[logging.Logger] = None):
        """
        Initialize texture encoder.

        Args:
            quality: JPEG quality (default: 100)
            logger: Optional logger instance
        """
        self.quality = quality
        self.logger = logger or logging.getLogger(__name__)

    def encode(self, thumbnail: DecodedImage, entry: ClassifiedEntry) -> Texture:
        """
        Build the texture for a normalized thumbnail.

        The caption reports the thumbnail's own dimensions, not the original's.

        Raises:
            EncodeError: If JPEG compression fails
        """
        jpeg_data = self.compress(thumbnail, entry.path)
        uri = self.data_uri(jpeg_data)

        name = entry.stem
        info = f"{thumbnail.width}x{thumbnail.height} ({entry.format_label})"

        return Texture(
            name=name,
            width=thumbnail.width,
            height=thumbnail.height,
            format_label=entry.format_label,
            data_uri=uri,
            html=TEXTURE_TEMPLATE.format(
                uri=uri,
                name=html.escape(name),
                info=html.escape(info),
            ),
        )

    def compress(self, thumbnail: DecodedImage, path: str) -> bytes:
        """Compress a thumbnail to JPEG bytes."""
        output = io.BytesIO()
        try:
            img = thumbnail.image
            if img.mode not in ('RGB', 'L'):
                img = img.convert('RGB')
            img.save(output, format='JPEG', quality=self.quality)
        except (OSError, ValueError, KeyError) as e:
            self.logger.error(f"Error encoding thumbnail for {path}: {e}")
            raise EncodeError(path, e) from e
        return output.getvalue()

    @staticmethod
    def data_uri(data: bytes) -> str:
        """Wrap bytes as a base64 data URI."""
        encoded = base64.b64encode(data).decode('ascii')
        return f"data:{CONTENT_TYPE};base64,{encoded}"
