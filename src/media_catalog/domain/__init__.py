"""
Domain layer for Media Catalog.

This package contains the media item entity, the media type enumeration,
the record codec for the catalog file format and the catalog store.
"""

from .value_objects import MediaType, type_display_name
from .entities import MediaItem
from .codec import (
    to_display_text,
    to_persisted_line,
    parse_persisted_line,
    check_persistable,
    is_integer_token,
    format_items,
)
from .catalog import CatalogStore

__all__ = [
    # Entities and value objects
    "MediaItem",
    "MediaType",
    "type_display_name",

    # Codec
    "to_display_text",
    "to_persisted_line",
    "parse_persisted_line",
    "check_persistable",
    "is_integer_token",
    "format_items",

    # Store
    "CatalogStore",
]
