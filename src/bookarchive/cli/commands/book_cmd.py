# ABOUTME: Book-level commands: `bookarchive add`, `rm`, `edit`, and `info`.
# ABOUTME: Each mutation goes through ArchiveService and is saved on success.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bookarchive.cli.options import db_option, open_service, report

console = Console()


@click.command("add")
@click.argument("title")
@click.argument("author")
@click.option("-n", "--copies", "copy_count", default="1", show_default=True,
              help="Number of copies to register.")
@click.option("-l", "--location", default="", help="Shelf location, e.g. 'Shelf 1'.")
@db_option
def add(title: str, author: str, copy_count: str, location: str, db_path: Path | None) -> None:
    """Add a book with one or more copies."""
    with open_service(db_path) as service:
        result = service.add_book(title, author, copy_count, location)
        if result.ok:
            book = result.value
            console.print(
                f"Added [bold]{escape(book.title)}[/bold] as [cyan]{escape(book.id)}[/cyan] "
                f"({len(book.copies)} copies)."
            )
        report(console, result)


@click.command("rm")
@click.argument("book_id")
@db_option
def rm(book_id: str, db_path: Path | None) -> None:
    """Remove a book and all of its copies."""
    with open_service(db_path) as service:
        report(console, service.remove_book(book_id))


@click.command("edit")
@click.argument("book_id")
@click.option("--title", default="", help="New title (blank leaves it unchanged).")
@click.option("--author", default="", help="New author (blank leaves it unchanged).")
@click.option("--location", default="",
              help="New location; renumbers every copy with the new shelf letter.")
@db_option
def edit(book_id: str, title: str, author: str, location: str, db_path: Path | None) -> None:
    """Edit a book's title, author, or location."""
    with open_service(db_path) as service:
        report(console, service.edit_book(book_id, title, author, location))


@click.command("info")
@click.argument("book_id")
@db_option
def info(book_id: str, db_path: Path | None) -> None:
    """Show a book and each of its copies."""
    with open_service(db_path) as service:
        book = service.catalog.get_book(book_id)

    if book is None:
        console.print("[red]Book ID not found.[/red]")
        raise SystemExit(1)

    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=10)
    table.add_column("Value")
    table.add_row("ID", escape(book.id))
    table.add_row("Title", escape(book.title))
    table.add_row("Author", escape(book.author))
    table.add_row("Location", escape(book.location) or "—")
    table.add_row("Copies", str(len(book.copies)))
    console.print(table)

    for copy in book.copies:
        status = "green" if copy.is_available else "red"
        console.print(
            f"  [cyan]{escape(copy.copy_id)}[/cyan]  {escape(copy.location) or '—'}  "
            f"[{status}]{escape(copy.status)}[/{status}]"
        )
