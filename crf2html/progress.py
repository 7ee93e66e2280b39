"""
GalleryProgress - Tracks and displays build progress.
"""

import logging
from typing import Optional

from .encoder import Texture
from .gallery_stats import GalleryStats


class GalleryProgress:
    """
    Tracks and displays build progress with optional per-file output.
    """

    def __init__(
        self,
        show_files: bool = False,
        log_interval: int = 100,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize progress tracker.

        Args:
            show_files: If True, print each entry as it's processed
            log_interval: Log summary progress every N entries (when not show_files)
            logger: Optional logger instance
        """
        self.show_files = show_files
        self.log_interval = log_interval
        self.logger = logger or logging.getLogger(__name__)
        self.last_logged = 0

    def on_texture(self, path: str, family: str, texture: Texture) -> None:
        """Called when an entry has been embedded."""
        if self.show_files:
            print(f"  [OK] {path} -> {family}/{texture.caption}")

    def on_skipped(self, path: str, reason: str) -> None:
        """Called when an entry is not a texture."""
        if self.show_files:
            print(f"  [SKIP] {path} -> {reason}")

    def on_error(self, path: str, error: str) -> None:
        """Called when an entry fails to decode or encode."""
        if self.show_files:
            print(f"  [ERROR] {path} -> {error}")

    def on_progress_update(self, stats: GalleryStats) -> None:
        """
        Called after each entry to report overall progress.

        Args:
            stats: Current build statistics
        """
        total_done = stats.completed_count

        if not self.show_files and total_done - self.last_logged >= self.log_interval:
            self.last_logged = total_done
            self.logger.info(
                f"Progress: {stats.processed} textures, {stats.skipped} skipped, "
                f"{stats.errors} errors ({stats.rate_per_second:.1f}/s)"
            )
