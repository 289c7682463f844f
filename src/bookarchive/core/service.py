# ABOUTME: Operation boundary between the UI and the archive catalog.
# ABOUTME: Runs one mutation, persists on success, and reports an OperationResult.

import copy
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from bookarchive.archive.catalog import ArchiveCatalog, ArchiveError
from bookarchive.db.bridge import load_catalog, save_catalog
from bookarchive.db.store import KeyValueStore, StoreError

logger = logging.getLogger(__name__)


@dataclass
class OperationResult:
    """Outcome of one user-facing archive operation.

    ``changed`` is True only when the catalog was mutated and saved; the view
    layer should refresh when it sees it.
    """

    ok: bool
    message: str
    changed: bool = False
    value: Any = None


class ArchiveService:
    """Application context owning the catalog and the store it persists to.

    Domain failures and failed saves never escape an operation: they come
    back as a failed OperationResult with a human-readable message, and the
    in-memory catalog is left as it was before the call.
    """

    def __init__(self, store: KeyValueStore, catalog: ArchiveCatalog | None = None) -> None:
        self.store = store
        self.catalog = catalog if catalog is not None else load_catalog(store)

    @property
    def version(self) -> int:
        return self.catalog.version

    def _run(self, name: str, action: Callable[[], Any], message: str) -> OperationResult:
        snapshot = copy.deepcopy(self.catalog)
        try:
            value = action()
        except ArchiveError as exc:
            logger.warning("%s rejected: %s", name, exc)
            return OperationResult(ok=False, message=str(exc))

        try:
            save_catalog(self.store, self.catalog)
        except StoreError as exc:
            logger.error("%s could not be saved, change discarded: %s", name, exc)
            self.catalog = snapshot
            return OperationResult(ok=False, message=f"Could not save the archive: {exc}")

        logger.info("%s succeeded (catalog version %d)", name, self.catalog.version)
        return OperationResult(ok=True, message=message, changed=True, value=value)

    def add_book(
        self, title: str, author: str, copy_count: int | str, location: str = ""
    ) -> OperationResult:
        """Add a book with its initial copies."""
        return self._run(
            "add_book",
            lambda: self.catalog.add_book(title, author, copy_count, location),
            "Book added!",
        )

    def remove_book(self, book_id: str) -> OperationResult:
        """Remove a book and all of its copies."""
        return self._run(
            "remove_book", lambda: self.catalog.remove_book(book_id), "Book removed."
        )

    def edit_book(
        self,
        book_id: str,
        title: str | None = None,
        author: str | None = None,
        location: str | None = None,
    ) -> OperationResult:
        """Edit a book's title, author, and/or location."""
        return self._run(
            "edit_book",
            lambda: self.catalog.edit_book(book_id, title, author, location),
            "Book updated successfully!",
        )

    def add_copies(self, book_id: str, count: int | str) -> OperationResult:
        """Append copies to an existing book."""
        return self._run(
            "add_copies", lambda: self.catalog.add_copies(book_id, count), "Copies added!"
        )

    def delete_copy(self, book_id: str, copy_id: str) -> OperationResult:
        """Remove one copy from a book."""
        return self._run(
            "delete_copy", lambda: self.catalog.delete_copy(book_id, copy_id), "Copy removed."
        )

    def delete_copies(self, book_id: str, copy_ids: str | list[str]) -> OperationResult:
        """Remove every listed copy from a book in one pass."""
        return self._run(
            "delete_copies",
            lambda: self.catalog.delete_copies(book_id, copy_ids),
            "Copies removed.",
        )
