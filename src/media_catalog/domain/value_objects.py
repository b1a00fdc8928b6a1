"""
Domain value objects for Media Catalog.

Media types carry a fixed 1-based ordinal, which is what the persisted
catalog file stores, and a human-readable name used in display output.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Union


UNKNOWN_TYPE_NAME = "Unknown"


class MediaType(IntEnum):
    """Kinds of physical media held in the catalog."""
    BOOK = 1
    MAGAZINE = 2
    AUDIO_CD = 3
    CD_ROM = 4
    CASSETTE = 5
    VIDEO_CASSETTE = 6

    @property
    def display_name(self) -> str:
        """Get the human-readable name of this media type."""
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_ordinal(cls, ordinal: int) -> Union[MediaType, int]:
        """
        Map a persisted ordinal to a MediaType.

        Ordinals outside the table are returned unchanged so they can be
        written back verbatim.
        """
        try:
            return cls(ordinal)
        except ValueError:
            return ordinal

    @classmethod
    def choices_text(cls) -> str:
        """Get the prompt text listing every media type with its ordinal."""
        return ", ".join(f"{t.value}-{t.display_name}" for t in cls)


_DISPLAY_NAMES = {
    MediaType.BOOK: "Book",
    MediaType.MAGAZINE: "Magazine",
    MediaType.AUDIO_CD: "Audio CD",
    MediaType.CD_ROM: "CD-ROM",
    MediaType.CASSETTE: "Cassette",
    MediaType.VIDEO_CASSETTE: "Video Cassette",
}


def type_display_name(category: Union[MediaType, int]) -> str:
    """Get the display name for a category, or "Unknown" for unmapped ordinals."""
    if isinstance(category, MediaType):
        return category.display_name
    try:
        return MediaType(category).display_name
    except ValueError:
        return UNKNOWN_TYPE_NAME
