"""
GalleryStats - Statistics for a gallery build.
"""

import time
from dataclasses import dataclass, field
from typing import List


@dataclass
class GalleryStats:
    """
    Statistics for a gallery build.

    Attributes:
        entries_seen: Entries enumerated from the source
        processed: Textures embedded in the page
        skipped: Entries that were not textures
        errors: Textures that failed to decode or encode
        families: Number of families on the page
        bytes_embedded: Total size of the embedded data URIs
        bytes_written: Size of the written page
        start_time: Start timestamp
        error_details: List of error messages
    """
    entries_seen: int = 0
    processed: int = 0
    skipped: int = 0
    errors: int = 0
    families: int = 0
    bytes_embedded: int = 0
    bytes_written: int = 0
    start_time: float = field(default_factory=time.time)
    error_details: List[str] = field(default_factory=list)

    @property
    def elapsed_seconds(self) -> float:
        """Elapsed time in seconds."""
        return time.time() - self.start_time

    @property
    def rate_per_second(self) -> float:
        """Textures processed per second."""
        if self.elapsed_seconds > 0:
            return self.processed / self.elapsed_seconds
        return 0.0

    @property
    def completed_count(self) -> int:
        """Total entries handled (processed + skipped + errors)."""
        return self.processed + self.skipped + self.errors
