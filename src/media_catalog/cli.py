"""Command line interface for media catalog."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .app import CatalogApp
from .domain import MediaType
from .exceptions import MediaCatalogError
from .models.config import Config, load_config, create_default_config

console = Console()


def _build_app(config_path: Optional[Path], data_file: Optional[Path]) -> CatalogApp:
    """Create the application and its catalog store from the command line options."""
    cfg = load_config(config_path) if config_path else Config.default()
    if data_file:
        cfg.data_file = data_file
    return CatalogApp(cfg, console=console)


def _load_existing(app: CatalogApp) -> None:
    """Load the data file into the store when it exists."""
    if Path(app.config.data_file).exists():
        app.store.load_from(app.config.data_file)


@click.group()
@click.version_option(version=__version__)
@click.option(
    '--data-file',
    type=click.Path(dir_okay=False, path_type=Path),
    help='Catalog data file (default: library_data.txt)'
)
@click.option(
    '--config',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Configuration file path'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug logging'
)
@click.pass_context
def cli(ctx: click.Context, data_file: Optional[Path], config: Optional[Path], debug: bool):
    """Keep a catalog of books, magazines and audio/video media."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        ctx.obj = _build_app(config, data_file)
    except MediaCatalogError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)


@cli.command()
@click.pass_obj
def shell(app: CatalogApp):
    """Run the interactive catalog menu."""
    app.run()


@cli.command()
@click.option(
    '--type', 'media_type',
    required=True,
    help=f'Media type ({MediaType.choices_text()})'
)
@click.option('--author', required=True, help='Author, a single word')
@click.option('--title', required=True, help='Title, a single word')
@click.option('--year', required=True, help='Year of publication')
@click.option(
    '--status',
    default='1',
    show_default=True,
    help='1 for available, 0 for borrowed'
)
@click.pass_obj
def add(app: CatalogApp, media_type: str, author: str, title: str, year: str, status: str):
    """Add a media item to the data file."""
    try:
        _load_existing(app)
        item = app.add_media(media_type, author, title, year, status)
        app.store.save_to(app.config.data_file)
    except MediaCatalogError as e:
        console.print(f"[red]Error adding media: {escape(str(e))}[/red]")
        sys.exit(1)

    console.print(f"[green]Added {item.type_name} '{escape(item.title)}' ({len(app.store)} items)[/green]")


@cli.command(name='list')
@click.option('--available', 'status', flag_value='available', help='Only available items')
@click.option('--borrowed', 'status', flag_value='borrowed', help='Only borrowed items')
@click.pass_obj
def list_items(app: CatalogApp, status: Optional[str]):
    """Display the media items in the data file."""
    try:
        _load_existing(app)
    except MediaCatalogError as e:
        console.print(f"[red]Error loading from file: {escape(str(e))}[/red]")
        sys.exit(1)

    if status == 'available':
        items = app.store.list_available()
    elif status == 'borrowed':
        items = app.store.list_borrowed()
    else:
        items = app.store.list_all()

    app.display(items)


@cli.command()
@click.pass_obj
def summary(app: CatalogApp):
    """Show item counts by status."""
    try:
        _load_existing(app)
    except MediaCatalogError as e:
        console.print(f"[red]Error loading from file: {escape(str(e))}[/red]")
        sys.exit(1)

    table = Table(title="Catalog")
    table.add_column("Status", style="cyan")
    table.add_column("Count", justify="right")
    table.add_row("Available", str(app.store.count_available()))
    table.add_row("Borrowed", str(app.store.count_borrowed()))
    table.add_row("Total", str(len(app.store)))
    console.print(table)


@cli.command(name='init-config')
@click.argument('config_path', type=click.Path(dir_okay=False, path_type=Path))
def init_config(config_path: Path):
    """Write a default configuration file to CONFIG_PATH."""
    try:
        create_default_config(config_path)
    except OSError as e:
        console.print(f"[red]Error writing configuration: {escape(str(e))}[/red]")
        sys.exit(1)
    console.print(f"[green]Wrote default configuration to {escape(str(config_path))}[/green]")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == '__main__':
    main()
