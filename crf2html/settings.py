"""
ProgramSettings - Configuration for one gallery build.
"""

import os
import re
from dataclasses import dataclass, field, replace
from typing import FrozenSet, List, Optional, Tuple

DEFAULT_TITLE = "Textures"
DEFAULT_THUMBNAIL_SIZE = 128
DEFAULT_BACKGROUND = (255, 255, 255, 255)
DEFAULT_QUALITY = 100

HEX_COLOR_PATTERN = re.compile(r'^#?([0-9a-fA-F]{6})$')


def parse_color(value: str) -> Tuple[int, int, int, int]:
    """
    Parse an '#rrggbb' string into an opaque RGBA tuple.

    Raises:
        ValueError: If the string is not a six digit hex colour
    """
    match = HEX_COLOR_PATTERN.match(value.strip())
    if not match:
        raise ValueError(f"invalid colour: {value!r} (expected #rrggbb)")
    digits = match.group(1)
    return (
        int(digits[0:2], 16),
        int(digits[2:4], 16),
        int(digits[4:6], 16),
        255,
    )


@dataclass(frozen=True)
class ProgramSettings:
    """
    Settings for a single run, built once and passed read-only to every stage.

    Attributes:
        source_path: Directory or archive holding the textures
        output_path: HTML file to write
        title: Page title
        thumbnail_size: Length in pixels of a thumbnail's longer side
        background_color: RGBA fill used behind transparent textures
        jpeg_quality: Quality of the embedded JPEG thumbnails
        skip_errors: Skip undecodable entries instead of aborting the run
        extensions: Supported file extensions (lower-case, with dot)
        reserved_filenames: Filenames that are never textures
    """
    source_path: str
    output_path: str
    title: str = DEFAULT_TITLE
    thumbnail_size: int = DEFAULT_THUMBNAIL_SIZE
    background_color: Tuple[int, int, int, int] = DEFAULT_BACKGROUND
    jpeg_quality: int = DEFAULT_QUALITY
    skip_errors: bool = False
    extensions: FrozenSet[str] = field(
        default_factory=lambda: frozenset({'.pcx', '.tga', '.gif', '.png', '.jpg', '.jpeg'})
    )
    reserved_filenames: FrozenSet[str] = field(
        default_factory=lambda: frozenset({'full.pcx'})
    )

    @classmethod
    def from_env(
        cls,
        source_path: str,
        output_path: str,
        environ: Optional[dict] = None
    ) -> 'ProgramSettings':
        """
        Create settings with defaults taken from the environment.

        Reads CRF2HTML_TITLE and CRF2HTML_SIZE. A malformed size is kept
        as 0 so that validate() reports it.
        """
        env = os.environ if environ is None else environ
        title = env.get('CRF2HTML_TITLE') or DEFAULT_TITLE

        size_value = env.get('CRF2HTML_SIZE')
        if size_value:
            try:
                size = int(size_value)
            except ValueError:
                size = 0
        else:
            size = DEFAULT_THUMBNAIL_SIZE

        return cls(
            source_path=source_path,
            output_path=output_path,
            title=title,
            thumbnail_size=size,
        )

    def with_overrides(self, **changes) -> 'ProgramSettings':
        """Return a copy with the non-None values in changes applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    def validate(self) -> List[str]:
        """Validate configuration, returning a list of error messages."""
        errors = []

        if not self.source_path:
            errors.append("Source path is required")
        if not self.output_path:
            errors.append("Output path is required")
        if not isinstance(self.thumbnail_size, int) or self.thumbnail_size < 1:
            errors.append(f"Thumbnail size must be a positive integer: {self.thumbnail_size!r}")
        if not 1 <= self.jpeg_quality <= 100:
            errors.append(f"JPEG quality must be between 1 and 100: {self.jpeg_quality}")
        if len(self.background_color) != 4 or any(
            not 0 <= c <= 255 for c in self.background_color
        ):
            errors.append(f"Invalid background colour: {self.background_color!r}")

        return errors
