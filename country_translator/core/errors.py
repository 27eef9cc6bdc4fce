"""Errors raised by the translation core."""

from typing import Optional


class ResourceLoadError(Exception):
    """Raised when a code table or translation resource cannot be loaded.

    Attributes:
        source: path or description of the resource that failed
    """

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.source = source
