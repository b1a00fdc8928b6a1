"""
Record codec for the catalog file format.

Each media item is persisted as one line of five whitespace-separated
tokens::

    <type ordinal> <author> <title> <year> <1 if available else 0>

Author and title are read as single tokens, so values containing
whitespace do not survive a save/load cycle.
"""

import re
from typing import Iterable

from .entities import MediaItem
from .value_objects import MediaType
from ..exceptions import ParseError, ValidationError


FIELD_COUNT = 5

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def to_display_text(item: MediaItem) -> str:
    """Render the five-line human-readable block for an item."""
    status = "Available" if item.available else "Borrowed"
    return (
        f"Type: {item.type_name}\n"
        f"Author: {item.author}\n"
        f"Title: {item.title}\n"
        f"Year of publication: {item.year}\n"
        f"Status: {status}\n"
    )


def to_persisted_line(item: MediaItem) -> str:
    """Encode an item as one newline-terminated catalog line."""
    return f"{int(item.category)} {item.author} {item.title} {item.year} {int(bool(item.available))}\n"


def check_persistable(item: MediaItem) -> None:
    """
    Make sure an item encodes to a line that decodes again.

    Raises:
        ValidationError: If author or title is empty or contains whitespace,
            so the encoded line would not hold exactly five tokens.
    """
    for label, value in (("Author", item.author), ("Title", item.title)):
        if len(value.split()) != 1 or value.split()[0] != value:
            raise ValidationError(
                f"{label} {value!r} cannot be saved: it must be a single word without spaces."
            )


def is_integer_token(token: str) -> bool:
    """Check for an optionally signed run of ASCII digits."""
    return INTEGER_PATTERN.fullmatch(token) is not None


def parse_persisted_line(line: str) -> MediaItem:
    """
    Decode one catalog line into a MediaItem.

    Tokens past the fifth are ignored.

    Raises:
        ParseError: If the line has fewer than five tokens, the ordinal or
            year is not an integer, the year is not positive, or the status
            token is not 0 or 1.
    """
    tokens = line.split()
    if len(tokens) < FIELD_COUNT:
        raise ParseError(f"expected {FIELD_COUNT} fields, found {len(tokens)}", line=line)

    ordinal_token, author, title, year_token, status_token = tokens[:FIELD_COUNT]

    ordinal = _parse_int(ordinal_token, "type", line)
    year = _parse_int(year_token, "year", line)
    available = _parse_status(status_token, line)

    try:
        return MediaItem(
            category=MediaType.from_ordinal(ordinal),
            author=author,
            title=title,
            year=year,
            available=available,
        )
    except ValidationError as e:
        raise ParseError(str(e), line=line) from e


def _parse_int(token: str, field_name: str, line: str) -> int:
    if not is_integer_token(token):
        raise ParseError(f"{field_name} is not an integer: {token!r}", line=line)
    return int(token)


def _parse_status(token: str, line: str) -> bool:
    if token == "1":
        return True
    if token == "0":
        return False
    raise ParseError(f"status must be 0 or 1: {token!r}", line=line)


def format_items(items: Iterable[MediaItem]) -> str:
    """Join the display blocks of several items, separated by blank lines."""
    return "\n".join(to_display_text(item) for item in items)
