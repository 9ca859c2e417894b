"""
Exceptions raised by MarkdownImageLocalizer.
"""

from typing import Optional


class LocalizerError(RuntimeError):
    """Base class for all errors raised while localizing a document."""


class InputReadFailure(LocalizerError):
    """The input markdown file does not exist or cannot be read."""

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        super().__init__(f"Error reading input file {path}: {cause}")


class DownloadFailure(LocalizerError):
    """A single image could not be retrieved or saved."""

    def __init__(self, url: str, cause: object = None):
        self.url = url
        self.cause = cause
        super().__init__(f"Failed to download {url}: {cause}")


class OutputWriteFailure(LocalizerError):
    """The rewritten markdown file could not be written."""

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        super().__init__(f"Error writing output file {path}: {cause}")
