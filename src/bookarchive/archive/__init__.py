# ABOUTME: In-memory archive model: books, copies, shelf letters, and identifiers.
# ABOUTME: Exports the catalog store, its error types, and the core dataclasses.

from bookarchive.archive.catalog import (
    ArchiveCatalog,
    ArchiveError,
    BookNotFoundError,
    CopyNotFoundError,
    NoMatchError,
    ValidationError,
    parse_copy_ids,
)
from bookarchive.archive.ids import BookIdAllocator, format_copy_id, number_copies
from bookarchive.archive.shelves import DEFAULT_SHELF, SHELF_NAMES, resolve_shelf_letter
from bookarchive.archive.types import AVAILABLE, Book, Copy

__all__ = [
    "AVAILABLE",
    "DEFAULT_SHELF",
    "SHELF_NAMES",
    "ArchiveCatalog",
    "ArchiveError",
    "Book",
    "BookIdAllocator",
    "BookNotFoundError",
    "Copy",
    "CopyNotFoundError",
    "NoMatchError",
    "ValidationError",
    "format_copy_id",
    "number_copies",
    "parse_copy_ids",
    "resolve_shelf_letter",
]
