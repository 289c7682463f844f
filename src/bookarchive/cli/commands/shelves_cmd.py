# ABOUTME: The `bookarchive shelves` command listing recognised shelf locations.
# ABOUTME: Shows the letter each shelf contributes to CopyIDs.

import click
from rich.console import Console
from rich.table import Table

from bookarchive.archive.shelves import shelf_letters

console = Console()


@click.command("shelves")
def shelves() -> None:
    """List shelf locations and their CopyID letters."""
    table = Table()
    table.add_column("Location")
    table.add_column("Letter", style="cyan", justify="center")
    for name, letter in shelf_letters().items():
        table.add_row(name, letter)
    console.print(table)
    console.print("[dim]Any other location uses the Default letter.[/dim]")
