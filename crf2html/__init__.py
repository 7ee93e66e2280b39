"""
crf2html - Texture gallery builder

Reads legacy game textures (PCX, TGA, GIF, PNG, JPEG) from a directory tree
or a CRF/ZIP archive and writes a single HTML page with every texture
embedded as a base64 JPEG thumbnail, grouped by family directory.
"""

__version__ = "1.0.0"

from .settings import ProgramSettings
from .errors import (
    Crf2HtmlError,
    InvalidConfiguration,
    SourceUnavailable,
    SkippableClassification,
    DecodeError,
    EncodeError,
    WriteError,
)
from .source import SourceEntry, DirectorySource, ArchiveSource, open_source
from .classifier import TextureFormat, ClassifiedEntry, classify
from .decoder import DecodedImage, decode
from .normalizer import normalize, thumbnail_dimensions
from .encoder import Texture, TextureEncoder
from .aggregator import FamilyAggregator
from .page import render_page, write_page
from .gallery_stats import GalleryStats
from .progress import GalleryProgress
from .builder import GalleryBuilder, build_gallery

__all__ = [
    "ProgramSettings",
    "Crf2HtmlError",
    "InvalidConfiguration",
    "SourceUnavailable",
    "SkippableClassification",
    "DecodeError",
    "EncodeError",
    "WriteError",
    "SourceEntry",
    "DirectorySource",
    "ArchiveSource",
    "open_source",
    "TextureFormat",
    "ClassifiedEntry",
    "classify",
    "DecodedImage",
    "decode",
    "normalize",
    "thumbnail_dimensions",
    "Texture",
    "TextureEncoder",
    "FamilyAggregator",
    "render_page",
    "write_page",
    "GalleryStats",
    "GalleryProgress",
    "GalleryBuilder",
    "build_gallery",
]
