"""
Exceptions raised while building a texture gallery.
"""


class Crf2HtmlError(Exception):
    """Base class for all gallery build errors."""


class InvalidConfiguration(Crf2HtmlError):
    """Settings failed validation before any I/O was attempted."""

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class SourceUnavailable(Crf2HtmlError):
    """Source path is neither a readable directory nor a valid archive."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class SkippableClassification(Crf2HtmlError):
    """Entry is not a texture; it is reported and left out of the page."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class DecodeError(Crf2HtmlError):
    """Entry bytes could not be decoded as an image."""

    def __init__(self, path: str, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"cannot decode {path}: {cause}")


class EncodeError(Crf2HtmlError):
    """Thumbnail could not be compressed."""

    def __init__(self, path: str, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"cannot encode {path}: {cause}")


class WriteError(Crf2HtmlError):
    """Output page could not be written."""

    def __init__(self, path: str, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"cannot write {path}: {cause}")
