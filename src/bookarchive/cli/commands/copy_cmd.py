# ABOUTME: Copy-level commands: `bookarchive add-copies`, `rm-copy`, and `rm-copies`.
# ABOUTME: Copies are addressed by book ID plus CopyID.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from bookarchive.cli.options import db_option, open_service, report

console = Console()


@click.command("add-copies")
@click.argument("book_id")
@click.argument("count")
@db_option
def add_copies(book_id: str, count: str, db_path: Path | None) -> None:
    """Append COUNT copies to a book."""
    with open_service(db_path) as service:
        result = service.add_copies(book_id, count)
        if result.ok:
            console.print("New copies: " + escape(", ".join(copy.copy_id for copy in result.value)))
        report(console, result)


@click.command("rm-copy")
@click.argument("book_id")
@click.argument("copy_id")
@db_option
def rm_copy(book_id: str, copy_id: str, db_path: Path | None) -> None:
    """Remove a single copy. Remaining copies keep their IDs."""
    with open_service(db_path) as service:
        report(console, service.delete_copy(book_id, copy_id))


@click.command("rm-copies")
@click.argument("book_id")
@click.argument("copy_ids")
@db_option
def rm_copies(book_id: str, copy_ids: str, db_path: Path | None) -> None:
    """Remove several copies given as a comma-separated list, e.g. "001A,003A"."""
    with open_service(db_path) as service:
        result = service.delete_copies(book_id, copy_ids)
        if result.ok:
            console.print(f"Removed {len(result.value)} copies.")
        report(console, result)
