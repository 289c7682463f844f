# ABOUTME: Unit tests for ArchiveCatalog mutation operations.
# ABOUTME: Validates add, remove, edit, add-copies, and single/bulk copy deletion.

import copy as copylib

import pytest

from bookarchive.archive.catalog import (
    ArchiveCatalog,
    ArchiveError,
    BookNotFoundError,
    CopyNotFoundError,
    NoMatchError,
    ValidationError,
    parse_copy_ids,
)
from bookarchive.archive.ids import BookIdAllocator


def _copy_ids(catalog: ArchiveCatalog, book_id: str) -> list[str]:
    book = catalog.get_book(book_id)
    assert book is not None
    return [c.copy_id for c in book.copies]


class TestAddBook:
    """Tests for ArchiveCatalog.add_book."""

    @pytest.mark.parametrize("count", [1, 2, 5])
    def test_creates_numbered_available_copies(self, catalog: ArchiveCatalog, count: int) -> None:
        """N copies are numbered 001..N with the shelf letter, all available, no history."""
        book = catalog.add_book("Dune", "Frank Herbert", count, "Shelf 2")

        assert [c.copy_id for c in book.copies] == [f"{i:03d}B" for i in range(1, count + 1)]
        assert all(c.status == "Available" for c in book.copies)
        assert all(c.history == [] for c in book.copies)
        assert all(c.location == "Shelf 2" for c in book.copies)

    def test_fields_are_trimmed(self, catalog: ArchiveCatalog) -> None:
        book = catalog.add_book("  Dune ", " Frank Herbert ", 1, " Shelf 4 ")
        assert book.title == "Dune"
        assert book.author == "Frank Herbert"
        assert book.location == "Shelf 4"
        assert book.copies[0].copy_id == "001D"

    def test_unknown_location_uses_default_letter(self, catalog: ArchiveCatalog) -> None:
        book = catalog.add_book("Dune", "Frank Herbert", 2, "Garage")
        assert [c.copy_id for c in book.copies] == ["001X", "002X"]
        assert book.location == "Garage"

    def test_count_may_be_numeric_text(self, catalog: ArchiveCatalog) -> None:
        book = catalog.add_book("Dune", "Frank Herbert", "3")
        assert len(book.copies) == 3

    def test_first_id_is_b1000(self, catalog: ArchiveCatalog) -> None:
        assert catalog.add_book("Dune", "Frank Herbert", 1).id == "B1000"

    @pytest.mark.parametrize(
        ("title", "author", "count"),
        [
            ("", "Frank Herbert", 1),
            ("   ", "Frank Herbert", 1),
            ("Dune", "", 1),
            ("Dune", "Frank Herbert", 0),
            ("Dune", "Frank Herbert", -2),
            ("Dune", "Frank Herbert", "many"),
            ("Dune", "Frank Herbert", ""),
            ("Dune", "Frank Herbert", None),
            ("Dune", "Frank Herbert", 2.7),
            ("Dune", "Frank Herbert", 3.0),
        ],
    )
    def test_invalid_input_rejected_without_mutation(
        self, catalog: ArchiveCatalog, title: str, author: str, count: object
    ) -> None:
        """Invalid details raise ValidationError and leave catalog and counter alone."""
        with pytest.raises(ValidationError, match="valid book details"):
            catalog.add_book(title, author, count)  # type: ignore[arg-type]

        assert len(catalog) == 0
        assert catalog.version == 0
        assert catalog.next_book_number == 1000

    def test_bumps_version(self, catalog: ArchiveCatalog) -> None:
        catalog.add_book("Dune", "Frank Herbert", 1)
        assert catalog.version == 1


class TestBookIds:
    """Book IDs are strictly increasing and never reused."""

    def test_ids_increase_across_removals(self, catalog: ArchiveCatalog) -> None:
        issued = []
        for n in range(6):
            issued.append(catalog.add_book(f"Book {n}", "Author", 1).id)
            if n % 2 == 0:
                catalog.remove_book(issued[-1])

        numbers = [int(book_id[1:]) for book_id in issued]
        assert numbers == sorted(numbers)
        assert len(set(numbers)) == len(numbers)
        assert numbers == list(range(1000, 1006))

    def test_custom_allocator(self) -> None:
        catalog = ArchiveCatalog(allocator=BookIdAllocator(2000))
        assert catalog.add_book("Dune", "Frank Herbert", 1).id == "B2000"


class TestRemoveBook:
    """Tests for ArchiveCatalog.remove_book."""

    def test_removed_book_is_not_found_afterwards(self, stocked_catalog: ArchiveCatalog) -> None:
        stocked_catalog.remove_book("B1000")

        assert stocked_catalog.get_book("B1000") is None
        with pytest.raises(BookNotFoundError):
            stocked_catalog.remove_book("B1000")

    def test_other_books_untouched(self, stocked_catalog: ArchiveCatalog) -> None:
        before = copylib.deepcopy(stocked_catalog.get_book("B1001"))
        stocked_catalog.remove_book("B1000")
        assert stocked_catalog.list_books() == [before]

    def test_id_is_trimmed(self, stocked_catalog: ArchiveCatalog) -> None:
        removed = stocked_catalog.remove_book("  B1001 ")
        assert removed.title == "Dune"

    def test_unknown_id(self, stocked_catalog: ArchiveCatalog) -> None:
        with pytest.raises(BookNotFoundError, match="Book ID not found"):
            stocked_catalog.remove_book("B9999")
        assert len(stocked_catalog) == 2


class TestDeleteCopy:
    """Tests for ArchiveCatalog.delete_copy."""

    def test_removes_exactly_one_without_renumbering(self, stocked_catalog: ArchiveCatalog) -> None:
        removed = stocked_catalog.delete_copy("B1000", "002A")

        assert removed.copy_id == "002A"
        assert _copy_ids(stocked_catalog, "B1000") == ["001A", "003A"]

    def test_unknown_book(self, stocked_catalog: ArchiveCatalog) -> None:
        with pytest.raises(BookNotFoundError):
            stocked_catalog.delete_copy("B9999", "001A")

    def test_unknown_copy(self, stocked_catalog: ArchiveCatalog) -> None:
        version = stocked_catalog.version
        with pytest.raises(CopyNotFoundError, match="Copy ID not found"):
            stocked_catalog.delete_copy("B1000", "001C")
        assert _copy_ids(stocked_catalog, "B1000") == ["001A", "002A", "003A"]
        assert stocked_catalog.version == version


class TestDeleteCopies:
    """Tests for ArchiveCatalog.delete_copies."""

    def test_removes_all_listed(self, stocked_catalog: ArchiveCatalog) -> None:
        removed = stocked_catalog.delete_copies("B1000", " 001A, ,003A ,")
        assert [c.copy_id for c in removed] == ["001A", "003A"]
        assert _copy_ids(stocked_catalog, "B1000") == ["002A"]

    def test_accepts_a_list(self, stocked_catalog: ArchiveCatalog) -> None:
        stocked_catalog.delete_copies("B1001", ["002C"])
        assert _copy_ids(stocked_catalog, "B1001") == ["001C"]

    def test_partial_match_removes_matching_only(self, stocked_catalog: ArchiveCatalog) -> None:
        removed = stocked_catalog.delete_copies("B1000", "002A,999Z")
        assert len(removed) == 1
        assert _copy_ids(stocked_catalog, "B1000") == ["001A", "003A"]

    def test_no_match_leaves_copies_identical(self, stocked_catalog: ArchiveCatalog) -> None:
        book = stocked_catalog.get_book("B1000")
        assert book is not None
        before = copylib.deepcopy(book.copies)
        version = stocked_catalog.version

        with pytest.raises(NoMatchError):
            stocked_catalog.delete_copies("B1000", "001C,002C")

        assert book.copies == before
        assert stocked_catalog.version == version

    @pytest.mark.parametrize("copy_ids", ["", "   ", " , ,", []])
    def test_empty_list_rejected(self, stocked_catalog: ArchiveCatalog, copy_ids: object) -> None:
        with pytest.raises(ValidationError, match="at least one Copy ID"):
            stocked_catalog.delete_copies("B1000", copy_ids)  # type: ignore[arg-type]

    def test_empty_list_checked_before_book(self, stocked_catalog: ArchiveCatalog) -> None:
        """An empty list is reported even when the book does not exist."""
        with pytest.raises(ValidationError):
            stocked_catalog.delete_copies("B9999", "")

    def test_unknown_book(self, stocked_catalog: ArchiveCatalog) -> None:
        with pytest.raises(BookNotFoundError):
            stocked_catalog.delete_copies("B9999", "001A")

    def test_may_empty_a_book(self, stocked_catalog: ArchiveCatalog) -> None:
        stocked_catalog.delete_copies("B1001", "001C,002C")
        book = stocked_catalog.get_book("B1001")
        assert book is not None
        assert book.copies == []


class TestAddCopies:
    """Tests for ArchiveCatalog.add_copies."""

    def test_continues_numbering_from_count(self, stocked_catalog: ArchiveCatalog) -> None:
        added = stocked_catalog.add_copies("B1001", 2)
        assert [c.copy_id for c in added] == ["003C", "004C"]
        assert all(c.location == "Shelf 3" and c.status == "Available" for c in added)

    def test_existing_copies_keep_their_ids(self, stocked_catalog: ArchiveCatalog) -> None:
        """After a deletion, new copies continue from the count, not the highest ID."""
        stocked_catalog.delete_copy("B1000", "001A")
        stocked_catalog.add_copies("B1000", 1)
        assert _copy_ids(stocked_catalog, "B1000") == ["002A", "003A", "003A"]

    def test_uses_first_copy_location(self, stocked_catalog: ArchiveCatalog) -> None:
        book = stocked_catalog.get_book("B1000")
        assert book is not None
        book.copies[0].location = "Shelf 5"
        added = stocked_catalog.add_copies("B1000", 1)
        assert added[0].copy_id == "004E"
        assert added[0].location == "Shelf 5"

    def test_book_without_copies_uses_default(self, stocked_catalog: ArchiveCatalog) -> None:
        stocked_catalog.delete_copies("B1001", "001C,002C")
        added = stocked_catalog.add_copies("B1001", 2)
        assert [c.copy_id for c in added] == ["001X", "002X"]
        assert added[0].location == "Default"

    def test_unknown_book(self, stocked_catalog: ArchiveCatalog) -> None:
        with pytest.raises(BookNotFoundError):
            stocked_catalog.add_copies("B9999", 1)

    @pytest.mark.parametrize("count", [0, -1, "x", "", "2.7", 2.7, None])
    def test_invalid_count(self, stocked_catalog: ArchiveCatalog, count: object) -> None:
        with pytest.raises(ValidationError):
            stocked_catalog.add_copies("B1000", count)  # type: ignore[arg-type]
        assert len(_copy_ids(stocked_catalog, "B1000")) == 3


class TestEditBook:
    """Tests for ArchiveCatalog.edit_book."""

    def test_blank_fields_are_a_no_op(self, stocked_catalog: ArchiveCatalog) -> None:
        before = copylib.deepcopy(stocked_catalog.get_book("B1000"))
        book = stocked_catalog.edit_book("B1000", "", "  ", None)
        assert book == before

    def test_blank_edit_still_counts_as_success(self, stocked_catalog: ArchiveCatalog) -> None:
        version = stocked_catalog.version
        stocked_catalog.edit_book("B1000")
        assert stocked_catalog.version == version + 1

    def test_updates_title_and_author_only(self, stocked_catalog: ArchiveCatalog) -> None:
        book = stocked_catalog.edit_book("B1000", title=" Il nome della rosa ", author="U. Eco")
        assert book.title == "Il nome della rosa"
        assert book.author == "U. Eco"
        assert [c.copy_id for c in book.copies] == ["001A", "002A", "003A"]
        assert book.location == "Shelf 1"

    def test_new_location_renumbers_positionally(self, stocked_catalog: ArchiveCatalog) -> None:
        """Gaps left by deletions are closed; every copy moves to the new location."""
        stocked_catalog.delete_copy("B1000", "001A")
        book = stocked_catalog.edit_book("B1000", location="Shelf 5")

        assert book.location == "Shelf 5"
        assert [c.copy_id for c in book.copies] == ["001E", "002E"]
        assert all(c.location == "Shelf 5" for c in book.copies)

    def test_unknown_location_uses_default_letter(self, stocked_catalog: ArchiveCatalog) -> None:
        book = stocked_catalog.edit_book("B1001", location="Attic")
        assert [c.copy_id for c in book.copies] == ["001X", "002X"]
        assert book.copies[0].location == "Attic"

    def test_unknown_book(self, stocked_catalog: ArchiveCatalog) -> None:
        with pytest.raises(BookNotFoundError):
            stocked_catalog.edit_book("B9999", title="x")


class TestQueries:
    """Tests for lookups and iteration."""

    def test_iteration_keeps_insertion_order(self, stocked_catalog: ArchiveCatalog) -> None:
        assert [b.id for b in stocked_catalog] == ["B1000", "B1001"]

    def test_list_books_is_a_copy(self, stocked_catalog: ArchiveCatalog) -> None:
        stocked_catalog.list_books().clear()
        assert len(stocked_catalog) == 2

    def test_errors_share_a_base(self) -> None:
        for exc_type in (ValidationError, BookNotFoundError, CopyNotFoundError, NoMatchError):
            assert issubclass(exc_type, ArchiveError)
            assert issubclass(exc_type, ValueError)


class TestParseCopyIds:
    """Tests for parse_copy_ids."""

    def test_splits_trims_and_filters(self) -> None:
        assert parse_copy_ids(" 001A ,,002B, ") == ["001A", "002B"]

    def test_none_and_empty(self) -> None:
        assert parse_copy_ids(None) == []
        assert parse_copy_ids("") == []
