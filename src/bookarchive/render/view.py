# ABOUTME: Builds a display-only view model of the catalog's current holdings.
# ABOUTME: One block per book, one row per copy, capped history, two status categories.

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from bookarchive.archive.types import AVAILABLE, Book, Copy

HISTORY_LIMIT = 5
LOCATION_PLACEHOLDER = "—"
EMPTY_MESSAGE = "No books in archive."


class StatusCategory(Enum):
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"


def classify_status(status: str | None) -> StatusCategory:
    """Available only on a case-insensitive exact match; anything else is unavailable."""
    if status is not None and status.lower() == AVAILABLE.lower():
        return StatusCategory.AVAILABLE
    return StatusCategory.UNAVAILABLE


@dataclass(frozen=True)
class CopyRow:
    copy_id: str
    location: str
    history: tuple[str, ...]
    status: str
    category: StatusCategory


@dataclass(frozen=True)
class BookBlock:
    """A book's details cell, spanning all of its copy rows."""

    title: str
    author: str
    book_id: str
    rows: tuple[CopyRow, ...] = ()

    @property
    def row_span(self) -> int:
        return len(self.rows)


@dataclass(frozen=True)
class HoldingsView:
    blocks: tuple[BookBlock, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.blocks

    @property
    def copy_count(self) -> int:
        return sum(block.row_span for block in self.blocks)


def _copy_row(copy: Copy) -> CopyRow:
    return CopyRow(
        copy_id=copy.copy_id,
        location=copy.location or LOCATION_PLACEHOLDER,
        history=tuple(copy.history[:HISTORY_LIMIT]),
        status=copy.status,
        category=classify_status(copy.status),
    )


def build_holdings_view(books: Iterable[Book]) -> HoldingsView:
    """Derive the holdings view from the catalog (or any iterable of books).

    Pure: the books are only read.
    """
    return HoldingsView(
        blocks=tuple(
            BookBlock(
                title=book.title,
                author=book.author,
                book_id=book.id,
                rows=tuple(_copy_row(copy) for copy in book.copies),
            )
            for book in books
        )
    )
