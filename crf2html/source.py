"""
Sources - Enumerate candidate texture files from a directory or an archive.
"""

import logging
import os
import zipfile
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Union

from .errors import SourceUnavailable


@dataclass(frozen=True)
class SourceEntry:
    """
    One candidate file.

    Attributes:
        path: POSIX-style path relative to the source root
        opener: Callable returning the entry's raw bytes
    """
    path: str
    opener: Callable[[], bytes]

    def read(self) -> bytes:
        """Read the entry's raw bytes."""
        return self.opener()


class DirectorySource:
    """
    Byte source backed by a directory tree.
    """

    kind = 'directory'

    def __init__(self, root_path: str, logger: Optional[logging.Logger] = None):
        self.root_path = root_path
        self.logger = logger or logging.getLogger(__name__)
        self.logger.debug(f"Opened directory: {root_path}")

    def entries(self) -> Iterator[SourceEntry]:
        """
        Yield every regular file below the root, in walk order.

        Raises:
            SourceUnavailable: If a directory below the root cannot be listed
        """
        for dirpath, _dirnames, filenames in os.walk(self.root_path, onerror=self._walk_error):
            for filename in filenames:
                full_path = os.path.join(dirpath, filename)
                if not os.path.isfile(full_path):
                    continue
                rel_path = os.path.relpath(full_path, self.root_path)
                path = rel_path.replace(os.sep, '/')
                yield SourceEntry(path=path, opener=self._opener(path))

    def read(self, path: str) -> bytes:
        """Read a file given its path relative to the root."""
        with open(os.path.join(self.root_path, *path.split('/')), 'rb') as f:
            return f.read()

    def _walk_error(self, error: OSError) -> None:
        path = error.filename or self.root_path
        raise SourceUnavailable(path, f"cannot list directory ({error.strerror or error})") from error

    def _opener(self, path: str) -> Callable[[], bytes]:
        return lambda: self.read(path)

    def close(self) -> None:
        pass

    def __enter__(self) -> 'DirectorySource':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class ArchiveSource:
    """
    Byte source backed by a ZIP-compatible archive (.zip, .crf).

    The archive stays open until close() is called.
    """

    kind = 'archive'

    def __init__(self, archive_path: str, logger: Optional[logging.Logger] = None):
        self.archive_path = archive_path
        self.logger = logger or logging.getLogger(__name__)
        try:
            self._archive = zipfile.ZipFile(archive_path)
        except (zipfile.BadZipFile, OSError) as e:
            raise SourceUnavailable(archive_path, f"not a valid archive ({e})") from e
        self.logger.debug(f"Opened archive: {archive_path} ({len(self._archive.infolist())} members)")

    def entries(self) -> Iterator[SourceEntry]:
        """Yield one entry per archive member, skipping directories."""
        for info in self._archive.infolist():
            if info.is_dir():
                continue
            yield SourceEntry(path=info.filename, opener=self._opener(info.filename))

    def read(self, path: str) -> bytes:
        """Extract a member's bytes."""
        return self._archive.read(path)

    def _opener(self, path: str) -> Callable[[], bytes]:
        return lambda: self.read(path)

    def close(self) -> None:
        self._archive.close()

    def __enter__(self) -> 'ArchiveSource':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


ByteSource = Union[DirectorySource, ArchiveSource]


def open_source(path: str, logger: Optional[logging.Logger] = None) -> ByteSource:
    """
    Open a directory or archive as a byte source.

    Raises:
        SourceUnavailable: If path is neither a directory nor a valid archive
    """
    if os.path.isdir(path):
        if not os.access(path, os.R_OK | os.X_OK):
            raise SourceUnavailable(path, "directory is not readable")
        return DirectorySource(path, logger)

    if not os.path.isfile(path):
        raise SourceUnavailable(path, "no such file or directory")

    if not zipfile.is_zipfile(path):
        raise SourceUnavailable(path, "not a directory or a valid archive")

    return ArchiveSource(path, logger)
