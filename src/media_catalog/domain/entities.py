"""
Domain entities for Media Catalog.

A MediaItem is one physical item in the catalog. It has no identity of its
own: the catalog store orders items and two items with equal fields are
interchangeable.
"""

from dataclasses import dataclass
from typing import Any, Union

from .value_objects import MediaType, type_display_name
from ..exceptions import ValidationError


YEAR_ERROR_MESSAGE = "Year must be a positive number."


@dataclass
class MediaItem:
    """
    A book, magazine or audio/video medium held in the catalog.

    The year of publication must stay positive. The check runs on every
    assignment, so it applies to construction and to later updates alike,
    and a rejected assignment leaves the previous value in place.
    """

    category: Union[MediaType, int] = MediaType.BOOK
    author: str = ""
    title: str = ""
    year: int = 1
    available: bool = True

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "year" and value <= 0:
            raise ValidationError(YEAR_ERROR_MESSAGE)
        super().__setattr__(name, value)

    @property
    def type_name(self) -> str:
        """Get the display name of the item's media type."""
        return type_display_name(self.category)

    @property
    def is_available(self) -> bool:
        return self.available

    @property
    def is_borrowed(self) -> bool:
        return not self.available
