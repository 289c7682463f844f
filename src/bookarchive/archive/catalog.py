# ABOUTME: In-memory catalog of books and copies with validated mutation operations.
# ABOUTME: Add, remove, edit books; add, delete, and bulk-delete copies.

import logging
from collections.abc import Iterator

from bookarchive.archive.ids import BookIdAllocator, format_copy_id, number_copies
from bookarchive.archive.shelves import DEFAULT_SHELF, resolve_shelf_letter
from bookarchive.archive.types import Book, Copy

logger = logging.getLogger(__name__)


class ArchiveError(ValueError):
    """Base class for rejected catalog operations. Nothing is mutated when raised."""


class ValidationError(ArchiveError):
    """Raised when a required field is empty or a count is not a positive integer."""


class BookNotFoundError(ArchiveError):
    """Raised when no book matches the requested ID."""

    def __init__(self, book_id: str) -> None:
        super().__init__("Book ID not found.")
        self.book_id = book_id


class CopyNotFoundError(ArchiveError):
    """Raised when a book has no copy with the requested CopyID."""

    def __init__(self, book_id: str, copy_id: str) -> None:
        super().__init__("Copy ID not found.")
        self.book_id = book_id
        self.copy_id = copy_id


class NoMatchError(ArchiveError):
    """Raised when a well-formed request matched zero copies."""


def parse_copy_ids(text: str | None) -> list[str]:
    """Split a comma-separated CopyID list, trimming entries and dropping empties."""
    if not text:
        return []
    return [part.strip() for part in text.split(",") if part.strip()]


def _positive_count(value: int | str | None) -> int:
    """Coerce a copy count to a positive int or raise ValidationError."""
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValidationError("Copy count must be a positive whole number.")
    try:
        count = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise ValidationError("Copy count must be a positive whole number.") from exc
    if count <= 0:
        raise ValidationError("Copy count must be a positive whole number.")
    return count


def _clean(value: str | None) -> str:
    return value.strip() if value else ""


class ArchiveCatalog:
    """Ordered, in-memory collection of books plus the book-ID counter.

    Every successful mutation bumps ``version`` so observers (persistence,
    views) can tell that state changed. Failed operations raise an
    ArchiveError subclass and leave the catalog untouched.
    """

    def __init__(
        self,
        books: list[Book] | None = None,
        allocator: BookIdAllocator | None = None,
    ) -> None:
        self._books: list[Book] = list(books) if books else []
        self.allocator = allocator or BookIdAllocator()
        self.version = 0

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[Book]:
        return iter(self._books)

    @property
    def next_book_number(self) -> int:
        """The number the next allocated book ID will carry."""
        return self.allocator.next_number

    def list_books(self) -> list[Book]:
        """Return the books in catalog order."""
        return list(self._books)

    def get_book(self, book_id: str) -> Book | None:
        """Retrieve a book by its ID (surrounding whitespace ignored)."""
        book_id = _clean(book_id)
        for book in self._books:
            if book.id == book_id:
                return book
        return None

    def _require_book(self, book_id: str) -> Book:
        book = self.get_book(book_id)
        if book is None:
            raise BookNotFoundError(_clean(book_id))
        return book

    def _touch(self) -> None:
        self.version += 1

    def add_book(
        self,
        title: str,
        author: str,
        copy_count: int | str,
        location: str = "",
    ) -> Book:
        """Add a new book with ``copy_count`` available copies.

        Copies are numbered 001..N with the shelf letter resolved from
        ``location``.

        Raises:
            ValidationError: If title or author is blank, or the count is not
                a positive integer.
        """
        title = _clean(title)
        author = _clean(author)
        location = _clean(location)
        if not title or not author:
            raise ValidationError("Please provide valid book details.")
        try:
            count = _positive_count(copy_count)
        except ValidationError as exc:
            raise ValidationError("Please provide valid book details.") from exc

        letter = resolve_shelf_letter(location)
        copies = [
            Copy(copy_id=format_copy_id(i, letter), location=location)
            for i in range(1, count + 1)
        ]
        book = Book(
            title=title,
            author=author,
            id=self.allocator.allocate(),
            location=location,
            copies=copies,
        )
        self._books.append(book)
        self._touch()
        logger.debug("Added book %s with %d copies on shelf %s", book.id, count, letter)
        return book

    def remove_book(self, book_id: str) -> Book:
        """Remove a book and all of its copies.

        Raises:
            BookNotFoundError: If no book has this ID.
        """
        book = self._require_book(book_id)
        self._books.remove(book)
        self._touch()
        logger.debug("Removed book %s", book.id)
        return book

    def delete_copy(self, book_id: str, copy_id: str) -> Copy:
        """Remove a single copy from a book. Remaining copies keep their IDs.

        Raises:
            BookNotFoundError: If no book has this ID.
            CopyNotFoundError: If the book has no copy with this CopyID.
        """
        book = self._require_book(book_id)
        copy_id = _clean(copy_id)
        copy = book.find_copy(copy_id)
        if copy is None:
            raise CopyNotFoundError(book.id, copy_id)
        book.copies.remove(copy)
        self._touch()
        logger.debug("Deleted copy %s from book %s", copy_id, book.id)
        return copy

    def delete_copies(self, book_id: str, copy_ids: str | list[str]) -> list[Copy]:
        """Remove every copy of a book whose CopyID is in ``copy_ids``.

        ``copy_ids`` may be a comma-separated string or a list. The list is
        checked before the book lookup.

        Raises:
            ValidationError: If no CopyIDs remain after parsing.
            BookNotFoundError: If no book has this ID.
            NoMatchError: If none of the book's copies matched.
        """
        if isinstance(copy_ids, str):
            wanted = set(parse_copy_ids(copy_ids))
        else:
            wanted = {cid.strip() for cid in copy_ids if cid and cid.strip()}
        if not wanted:
            raise ValidationError("Please enter at least one Copy ID.")

        book = self._require_book(book_id)
        removed = [copy for copy in book.copies if copy.copy_id in wanted]
        if not removed:
            raise NoMatchError("No matching Copy IDs found.")

        book.copies = [copy for copy in book.copies if copy.copy_id not in wanted]
        self._touch()
        logger.debug("Deleted %d copies from book %s", len(removed), book.id)
        return removed

    def add_copies(self, book_id: str, count: int | str) -> list[Copy]:
        """Append ``count`` available copies to a book.

        New copies take the location of the book's first copy, or the default
        shelf when the book has none, and are numbered after the existing ones
        without renumbering them.

        Raises:
            BookNotFoundError: If no book has this ID.
            ValidationError: If the count is not a positive integer.
        """
        book = self._require_book(book_id)
        count = _positive_count(count)

        location = (book.copies[0].location if book.copies else "") or DEFAULT_SHELF
        letter = resolve_shelf_letter(location)
        start = len(book.copies)
        added = [
            Copy(copy_id=format_copy_id(start + i, letter), location=location)
            for i in range(1, count + 1)
        ]
        book.copies.extend(added)
        self._touch()
        logger.debug("Added %d copies to book %s", count, book.id)
        return added

    def edit_book(
        self,
        book_id: str,
        title: str | None = None,
        author: str | None = None,
        location: str | None = None,
    ) -> Book:
        """Update a book's title, author, and/or location.

        Blank replacements leave the field unchanged. A new location is written
        to the book and every copy, and all CopyIDs are renumbered 001..N with
        the new shelf letter.

        Raises:
            BookNotFoundError: If no book has this ID.
        """
        book = self._require_book(book_id)
        title = _clean(title)
        author = _clean(author)
        location = _clean(location)

        if title:
            book.title = title
        if author:
            book.author = author
        if location:
            book.location = location
            for copy in book.copies:
                copy.location = location
            number_copies(book.copies, resolve_shelf_letter(location))

        self._touch()
        logger.debug("Edited book %s", book.id)
        return book
