# ABOUTME: The `bookarchive ls` command for listing current holdings.
# ABOUTME: Displays a Rich table with one row per copy, grouped by book.

from pathlib import Path

import click
from rich.console import Console

from bookarchive.cli.options import db_option, open_service
from bookarchive.render.terminal import render_table
from bookarchive.render.view import EMPTY_MESSAGE, build_holdings_view

console = Console()


@click.command("ls")
@db_option
def ls(db_path: Path | None) -> None:
    """List every book and copy in the archive."""
    with open_service(db_path) as service:
        view = build_holdings_view(service.catalog)

    if view.is_empty:
        console.print(f"[yellow]{EMPTY_MESSAGE}[/yellow]")
        return

    console.print(render_table(view))
    console.print(f"\n[dim]{len(view.blocks)} book(s), {view.copy_count} copies[/dim]")
