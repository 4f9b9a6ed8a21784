"""Error types raised by the snapshot pipeline."""

from __future__ import annotations

from typing import Any


class StyleSnapError(Exception):
    """Base class for all stylesnap errors."""


class MarkerTypeError(StyleSnapError):
    """Raised when a style marker's real type is neither a tag nor a named component."""

    def __init__(self, message: str, node: Any = None):
        self.node = node
        super().__init__(message)


class TreeFormatError(StyleSnapError):
    """Raised when tree data cannot be ingested into nodes."""

    def __init__(self, message: str, path: str = ""):
        self.path = path
        super().__init__(message)
