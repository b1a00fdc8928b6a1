"""Custom exceptions for media catalog."""

from typing import Optional


class MediaCatalogError(Exception):
    """Base exception for media catalog errors."""
    pass


class ValidationError(MediaCatalogError, ValueError):
    """Raised when a field invariant of a media item is violated."""
    pass


class ParseError(MediaCatalogError, ValueError):
    """Raised when a persisted line cannot be decoded into a media item."""

    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None):
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class CatalogIOError(MediaCatalogError, OSError):
    """Raised when the catalog file cannot be opened, read or written."""
    pass


class InputError(MediaCatalogError):
    """Raised when operator input is rejected by the front end."""
    pass


class ConfigurationError(MediaCatalogError):
    """Raised when there's an error in configuration."""
    pass
