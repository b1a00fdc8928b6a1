"""Interactive front end for the media catalog.

The application owns one CatalogStore for the lifetime of the process. It
collects field values from the operator, rejects out-of-range input before
anything reaches the store, and reports every failure at this boundary so
the menu loop keeps running.
"""

import logging
from enum import IntEnum
from typing import Callable, Dict, Iterable, Optional

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from .domain import CatalogStore, MediaItem, MediaType, format_items, is_integer_token
from .exceptions import InputError, MediaCatalogError
from .models.config import Config

logger = logging.getLogger(__name__)


class MenuChoice(IntEnum):
    """Entries of the main menu."""
    EXIT = 0
    ADD = 1
    DISPLAY_ALL = 2
    DISPLAY_AVAILABLE = 3
    DISPLAY_BORROWED = 4
    SAVE = 5
    LOAD = 6


MENU_TEXT = (
    "1. Add new media item\n"
    "2. Display all media items\n"
    "3. Display available media items\n"
    "4. Display borrowed media items\n"
    "5. Save data to file\n"
    "6. Load data from file\n"
    "0. Exit"
)


def parse_media_type(text: str) -> MediaType:
    """Parse a media type ordinal typed by the operator."""
    value = text.strip()
    if is_integer_token(value) and int(value) in {t.value for t in MediaType}:
        return MediaType(int(value))
    raise InputError(
        f"Invalid media type. Please enter a number between 1 and {len(MediaType)}."
    )


def parse_token(text: str, label: str) -> str:
    """Accept a non-empty value without whitespace."""
    value = text.strip()
    if not value:
        raise InputError(f"{label} must not be empty.")
    if len(value.split()) > 1:
        raise InputError(f"{label} must be a single word without spaces.")
    return value


def parse_year(text: str, max_year: int) -> int:
    """Accept a positive year below ``max_year``."""
    value = text.strip()
    if not is_integer_token(value):
        raise InputError("Invalid year.")
    year = int(value)
    if year <= 0 or year >= max_year:
        raise InputError("Invalid year.")
    return year


def parse_status(text: str) -> bool:
    """Accept 1 for available and 0 for borrowed."""
    value = text.strip()
    if value == "1":
        return True
    if value == "0":
        return False
    raise InputError("Invalid status. Please enter a 1-Available or 0-Borrowed.")


def build_item(media_type: str, author: str, title: str, year: str, status: str,
               max_year: int) -> MediaItem:
    """Validate raw operator input and build a MediaItem from it."""
    return MediaItem(
        category=parse_media_type(media_type),
        author=parse_token(author, "Author"),
        title=parse_token(title, "Title"),
        year=parse_year(year, max_year),
        available=parse_status(status),
    )


class CatalogApp:
    """Menu-driven front end around a single CatalogStore."""

    def __init__(self, config: Config, store: Optional[CatalogStore] = None,
                 console: Optional[Console] = None):
        self.config = config
        self.store = store if store is not None else CatalogStore(encoding=config.encoding)
        self.console = console or Console()
        self._actions: Dict[MenuChoice, Callable[[], None]] = {
            MenuChoice.ADD: self.add_media_interactive,
            MenuChoice.DISPLAY_ALL: lambda: self.display(self.store.list_all()),
            MenuChoice.DISPLAY_AVAILABLE: lambda: self.display(self.store.list_available()),
            MenuChoice.DISPLAY_BORROWED: lambda: self.display(self.store.list_borrowed()),
            MenuChoice.SAVE: self.save,
            MenuChoice.LOAD: self.load,
        }

    def add_media(self, media_type: str, author: str, title: str, year: str, status: str) -> MediaItem:
        """Validate the given field values and add the resulting item."""
        item = build_item(media_type, author, title, year, status, self.config.max_year)
        self.store.add(item)
        return item

    def add_media_interactive(self) -> None:
        """Prompt for every field of a new item and add it."""
        try:
            media_type = self._ask(f"Media type ({MediaType.choices_text()})")
            parse_media_type(media_type)
            author = self._ask("Author")
            title = self._ask("Title")
            year = self._ask("Year of publication")
            status = self._ask("Status (1-Available, 0-Borrowed)")
            self.add_media(media_type, author, title, year, status)
            self.console.print("[green]The media item has been successfully added.[/green]")
        except MediaCatalogError as e:
            logger.warning(f"Rejected new media item: {e}")
            self.console.print(f"[red]Error adding media: {escape(str(e))}[/red]")

    def display(self, items: Iterable[MediaItem]) -> None:
        """Print the display block of each item followed by a blank line."""
        text = format_items(items)
        if text:
            self.console.out(text, highlight=False)

    def save(self) -> bool:
        """Save the catalog to the configured data file."""
        try:
            self.store.save_to(self.config.data_file)
        except MediaCatalogError as e:
            self.console.print(f"[red]Error saving to file: {escape(str(e))}[/red]")
            return False
        self.console.print("[green]Data has been successfully saved to the file.[/green]")
        return True

    def load(self) -> bool:
        """Replace the catalog with the contents of the configured data file."""
        try:
            self.store.load_from(self.config.data_file)
        except MediaCatalogError as e:
            self.console.print(f"[red]Error loading from file: {escape(str(e))}[/red]")
            return False
        self.console.print("[green]Data has been successfully loaded from the file.[/green]")
        return True

    def run(self) -> None:
        """Run the menu loop until the operator chooses to exit."""
        while True:
            self.console.print(MENU_TEXT, markup=False, highlight=False)
            try:
                choice_text = self._ask("Choice")
            except EOFError:
                self.console.print("\nExiting the application.")
                return

            value = choice_text.strip()
            if not is_integer_token(value):
                self.console.print("[red]Error: Invalid input. Please enter a valid number.[/red]")
                continue
            try:
                choice = MenuChoice(int(value))
            except ValueError:
                self.console.print("Invalid choice.")
                continue

            if choice is MenuChoice.EXIT:
                self.console.print("Exiting the application.")
                return

            try:
                self._actions[choice]()
            except EOFError:
                self.console.print("\nExiting the application.")
                return
            except MediaCatalogError as e:
                logger.error(f"Menu action {choice.name} failed: {e}")
                self.console.print(f"[red]Error: {escape(str(e))}[/red]")

    def _ask(self, prompt: str) -> str:
        return Prompt.ask(prompt, console=self.console)
