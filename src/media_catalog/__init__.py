"""Media Catalog

A console catalog manager for books, magazines and audio/video media.
"""

__version__ = "0.1.0"

from .domain import (
    CatalogStore,
    MediaItem,
    MediaType,
    parse_persisted_line,
    to_display_text,
    to_persisted_line,
)
from .exceptions import (
    MediaCatalogError,
    ValidationError,
    ParseError,
    CatalogIOError,
)

__all__ = [
    # Core components
    "CatalogStore",
    "MediaItem",
    "MediaType",

    # Codec
    "parse_persisted_line",
    "to_display_text",
    "to_persisted_line",

    # Errors
    "MediaCatalogError",
    "ValidationError",
    "ParseError",
    "CatalogIOError",
]
