"""
GalleryBuilder - Runs the full source-to-page pipeline.
"""

import logging
import zipfile
import zlib
from typing import Optional

from .aggregator import FamilyAggregator
from .classifier import classify
from .decoder import decode
from .encoder import TextureEncoder
from .errors import (
    DecodeError,
    EncodeError,
    InvalidConfiguration,
    SkippableClassification,
)
from .gallery_stats import GalleryStats
from .normalizer import normalize
from .page import render_page, write_page
from .progress import GalleryProgress
from .settings import ProgramSettings
from .source import ByteSource, SourceEntry, open_source


class GalleryBuilder:
    """
    Builds a gallery page from a texture directory or archive.

    Entries are processed one at a time. The page is only written once
    every entry has been handled, so a fatal error leaves no output behind.
    """

    def __init__(
        self,
        settings: ProgramSettings,
        encoder: Optional[TextureEncoder] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize builder.

        Args:
            settings: Program settings
            encoder: Optional texture encoder (default uses settings.jpeg_quality)
            logger: Optional logger instance

        Raises:
            InvalidConfiguration: If the settings do not validate
        """
        errors = settings.validate()
        if errors:
            raise InvalidConfiguration(errors)

        self.settings = settings
        self.logger = logger or logging.getLogger(__name__)
        self.encoder = encoder or TextureEncoder(settings.jpeg_quality, logger=self.logger)
        self.stats = GalleryStats()

    def build(self, progress: Optional[GalleryProgress] = None) -> GalleryStats:
        """
        Build and write the gallery page.

        Args:
            progress: Optional progress tracker

        Returns:
            GalleryStats with results

        Raises:
            SourceUnavailable: If the source cannot be opened
            DecodeError: If an entry cannot be decoded (unless skip_errors)
            EncodeError: If a thumbnail cannot be compressed (unless skip_errors)
            WriteError: If the page cannot be written
        """
        self.stats = GalleryStats()
        document = self.render(progress)

        self.logger.debug(f"Writing: {self.settings.output_path}")
        self.stats.bytes_written = write_page(self.settings.output_path, document)

        self.logger.info(
            f"Gallery complete: {self.stats.processed} textures in {self.stats.families} families, "
            f"{self.stats.skipped} skipped, {self.stats.errors} errors "
            f"({self.stats.elapsed_seconds:.1f}s)"
        )
        return self.stats

    def render(self, progress: Optional[GalleryProgress] = None) -> str:
        """Process every entry of the source and return the page without writing it."""
        aggregator = FamilyAggregator()

        with open_source(self.settings.source_path, self.logger) as source:
            self.logger.info(f"Reading {source.kind}: {self.settings.source_path}")
            self._process_source(source, aggregator, progress)

        self.stats.families = len(aggregator)
        for family, count in sorted(aggregator.family_counts.items()):
            self.logger.debug(f"Family {family}: {count} textures")
        return render_page(aggregator.sorted_families(), self.settings)

    def _process_source(
        self,
        source: ByteSource,
        aggregator: FamilyAggregator,
        progress: Optional[GalleryProgress]
    ) -> None:
        for entry in source.entries():
            self.stats.entries_seen += 1
            self._process_entry(entry, aggregator, progress)
            if progress:
                progress.on_progress_update(self.stats)

    def _process_entry(
        self,
        entry: SourceEntry,
        aggregator: FamilyAggregator,
        progress: Optional[GalleryProgress]
    ) -> bool:
        """Process a single entry, returning True if it was embedded."""
        try:
            classified = classify(entry.path, self.settings)
        except SkippableClassification as e:
            self.logger.warning(f"skipping {e.path}: {e.reason}")
            self.stats.skipped += 1
            if progress:
                progress.on_skipped(entry.path, e.reason)
            return False

        try:
            self.logger.debug(f"Decoding: {entry.path}")
            decoded = decode(classified, self._read(entry))
            thumbnail = normalize(decoded, self.settings)
            texture = self.encoder.encode(thumbnail, classified)
        except (DecodeError, EncodeError) as e:
            if not self.settings.skip_errors:
                raise
            error_msg = str(e)
            self.logger.error(error_msg)
            self.stats.errors += 1
            self.stats.error_details.append(error_msg)
            if progress:
                progress.on_error(entry.path, error_msg)
            return False

        aggregator.add(classified.family, texture)
        self.stats.processed += 1
        self.stats.bytes_embedded += texture.encoded_size

        if progress:
            progress.on_texture(entry.path, classified.family, texture)
        return True

    @staticmethod
    def _read(entry: SourceEntry) -> bytes:
        try:
            return entry.read()
        except (OSError, RuntimeError, NotImplementedError, zipfile.BadZipFile, zlib.error) as e:
            raise DecodeError(entry.path, e) from e


def build_gallery(
    settings: ProgramSettings,
    progress: Optional[GalleryProgress] = None,
    logger: Optional[logging.Logger] = None
) -> GalleryStats:
    """Build the gallery described by settings."""
    return GalleryBuilder(settings, logger=logger).build(progress)
