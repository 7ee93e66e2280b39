"""
Classifier - Decide which entries are textures and which decoder reads them.
"""

import posixpath
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .errors import SkippableClassification
from .settings import ProgramSettings


class DecoderKind(Enum):
    """How the bytes of a format are decoded."""
    PALETTE = 'palette'
    RUN_LENGTH = 'run_length'
    GENERIC = 'generic'


class TextureFormat(Enum):
    """
    Supported texture formats.

    Each member carries its file extensions, the Pillow format name used
    to force a decoder, and the decoder kind.
    """
    PCX = (('.pcx',), 'PCX', DecoderKind.PALETTE)
    TGA = (('.tga',), 'TGA', DecoderKind.RUN_LENGTH)
    GIF = (('.gif',), 'GIF', DecoderKind.GENERIC)
    PNG = (('.png',), 'PNG', DecoderKind.GENERIC)
    JPEG = (('.jpg', '.jpeg'), 'JPEG', DecoderKind.GENERIC)

    def __init__(self, extensions: Tuple[str, ...], pillow_format: str, decoder: DecoderKind):
        self.extensions = extensions
        self.pillow_format = pillow_format
        self.decoder = decoder

    @classmethod
    def from_extension(cls, extension: str) -> Optional['TextureFormat']:
        """Look up a format by extension ('.png'), or None if unsupported."""
        ext_lower = extension.lower()
        for fmt in cls:
            if ext_lower in fmt.extensions:
                return fmt
        return None


@dataclass(frozen=True)
class ClassifiedEntry:
    """
    An entry accepted as a texture.

    Attributes:
        path: Original entry path
        family: Lower-cased parent directory name
        filename: Lower-cased filename
        extension: Lower-cased extension including the dot
        format: Texture format used for decoding
    """
    path: str
    family: str
    filename: str
    extension: str
    format: TextureFormat

    @property
    def stem(self) -> str:
        """Filename without its extension."""
        return self.filename[:-len(self.extension)] if self.extension else self.filename

    @property
    def format_label(self) -> str:
        """Extension without the dot, as shown in captions."""
        return self.extension.lstrip('.')


def classify(path: str, settings: ProgramSettings) -> ClassifiedEntry:
    """
    Classify an entry path.

    The second-to-last path segment is the family and the last is the
    filename. Deeper nesting is allowed; only the immediate parent counts.

    Raises:
        SkippableClassification: If the entry is not a supported texture
    """
    lowered = path.lower().replace('\\', '/')
    parts = [part for part in lowered.split('/') if part]

    if len(parts) < 2:
        raise SkippableClassification(path, "no family directory")

    family, filename = parts[-2], parts[-1]
    extension = posixpath.splitext(filename)[1]

    if filename in settings.reserved_filenames:
        raise SkippableClassification(path, "reserved filename")

    texture_format = TextureFormat.from_extension(extension)
    if extension not in settings.extensions or texture_format is None:
        raise SkippableClassification(path, f"unsupported extension {extension or '(none)'}")

    return ClassifiedEntry(
        path=path,
        family=family,
        filename=filename,
        extension=extension,
        format=texture_format,
    )

