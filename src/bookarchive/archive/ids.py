# ABOUTME: Identifier allocation for books and positional CopyID generation.
# ABOUTME: Book IDs come from a persisted counter; CopyIDs are derived from list position.

from bookarchive.archive.types import Copy

DEFAULT_FIRST_BOOK_NUMBER = 1000


class BookIdAllocator:
    """Issues strictly increasing book IDs of the form "B<number>".

    Numbers are never recycled, even after the book they named is removed.
    """

    def __init__(self, next_number: int = DEFAULT_FIRST_BOOK_NUMBER) -> None:
        self.next_number = next_number

    def allocate(self) -> str:
        """Return the next book ID and advance the counter."""
        number = self.next_number
        self.next_number += 1
        return f"B{number}"


def format_copy_id(index: int, shelf_letter: str) -> str:
    """Build a CopyID from a 1-based position and a shelf letter, e.g. 001A."""
    return f"{index:03d}{shelf_letter}"


def number_copies(copies: list[Copy], shelf_letter: str) -> None:
    """Renumber copies positionally as 001..N with the given shelf letter."""
    for index, copy in enumerate(copies, start=1):
        copy.copy_id = format_copy_id(index, shelf_letter)
