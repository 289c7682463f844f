# ABOUTME: Shared Click options and helpers for Bookarchive CLI commands.
# ABOUTME: Provides the --db flag, a store-backed service context, and result reporting.

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from bookarchive.core.service import ArchiveService, OperationResult
from bookarchive.db.connection import DEFAULT_DB_PATH, open_store

db_option = click.option(
    "--db",
    "db_path",
    type=click.Path(path_type=Path),
    default=None,
    help=f"Path to archive database (default: {DEFAULT_DB_PATH})",
)


@contextmanager
def open_service(db_path: Path | None) -> Iterator[ArchiveService]:
    """Load the archive from the database and close the store afterwards."""
    store = open_store(db_path or DEFAULT_DB_PATH)
    try:
        yield ArchiveService(store)
    finally:
        store.close()


def report(console: Console, result: OperationResult) -> None:
    """Print an operation's outcome; exit with status 1 if it failed."""
    if not result.ok:
        console.print(f"[red]{escape(result.message)}[/red]")
        raise SystemExit(1)
    console.print(f"[green]{escape(result.message)}[/green]")
