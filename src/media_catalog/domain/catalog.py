"""
Catalog store.

The store owns the ordered sequence of media items for the running process.
Text formatting is left to the record codec; the store only decides which
items are written and when the loaded sequence replaces the current one.
"""

import logging
from pathlib import Path
from typing import IO, Iterable, Iterator, List, Union

from .codec import check_persistable, parse_persisted_line, to_persisted_line
from .entities import MediaItem
from ..exceptions import CatalogIOError, ParseError

logger = logging.getLogger(__name__)

PathOrStream = Union[str, Path, IO[str]]


class CatalogStore:
    """In-memory catalog of media items, kept in insertion order."""

    def __init__(self, items: Iterable[MediaItem] = (), encoding: str = "utf-8"):
        self._items: List[MediaItem] = list(items)
        self.encoding = encoding

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[MediaItem]:
        return self.list_all()

    def add(self, item: MediaItem) -> None:
        """Append an item to the end of the catalog."""
        self._items.append(item)
        logger.debug(f"Added {item.type_name} '{item.title}' ({len(self._items)} items)")

    def list_all(self) -> Iterator[MediaItem]:
        """Iterate over every item in catalog order."""
        for item in self._items:
            yield item

    def list_available(self) -> Iterator[MediaItem]:
        """Iterate over the items that are available, in catalog order."""
        return (item for item in self._items if item.available)

    def list_borrowed(self) -> Iterator[MediaItem]:
        """Iterate over the items that are borrowed, in catalog order."""
        return (item for item in self._items if not item.available)

    def count_available(self) -> int:
        return sum(1 for _ in self.list_available())

    def count_borrowed(self) -> int:
        return sum(1 for _ in self.list_borrowed())

    def replace_all(self, items: Iterable[MediaItem]) -> None:
        """Discard the current items and install ``items`` in their given order."""
        self._items = list(items)

    def save_to(self, sink: PathOrStream) -> None:
        """
        Write every item, one line each, to a file path or text stream.

        A path is opened just before writing and closed before returning,
        whether or not the write succeeds.

        Every item is checked before the sink is touched, so a rejected
        save leaves both the store and an existing file unchanged.

        Raises:
            ValidationError: If an item has an empty or multi-word author or
                title, which the line format cannot read back.
            CatalogIOError: If the sink cannot be opened or written.
        """
        for item in self._items:
            check_persistable(item)
        lines = [to_persisted_line(item) for item in self._items]
        try:
            if isinstance(sink, (str, Path)):
                with open(sink, "w", encoding=self.encoding) as f:
                    f.writelines(lines)
            else:
                sink.writelines(lines)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to save catalog to {_describe(sink)}: {e}")
            raise CatalogIOError(f"Failed to write the catalog file: {e}") from e

        logger.info(f"Saved {len(lines)} items to {_describe(sink)}")

    def load_from(self, source: PathOrStream) -> None:
        """
        Replace the catalog with the items read from a file path or text stream.

        Blank lines are skipped. The catalog is only replaced once every line
        has been parsed; on any failure the current items are kept.

        Raises:
            CatalogIOError: If the source cannot be opened or read.
            ParseError: If any line is malformed. ``line_number`` holds the
                1-based number of the offending line.
        """
        try:
            if isinstance(source, (str, Path)):
                with open(source, "r", encoding=self.encoding) as f:
                    lines = f.readlines()
            else:
                lines = source.readlines()
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load catalog from {_describe(source)}: {e}")
            raise CatalogIOError(f"Failed to read the catalog file: {e}") from e

        loaded = []
        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                loaded.append(parse_persisted_line(line))
            except ParseError as e:
                logger.error(f"Malformed line {line_number} in {_describe(source)}: {e}")
                raise ParseError(str(e), line_number=line_number, line=line.rstrip("\n")) from e

        self.replace_all(loaded)
        logger.info(f"Loaded {len(loaded)} items from {_describe(source)}")


def _describe(target: PathOrStream) -> str:
    if isinstance(target, (str, Path)):
        return str(target)
    return str(getattr(target, "name", "<stream>"))
