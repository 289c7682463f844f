# ABOUTME: Shared pytest fixtures for Bookarchive tests.
# ABOUTME: Provides empty and pre-populated catalogs, stores, and database paths.

from pathlib import Path

import pytest

from bookarchive.archive.catalog import ArchiveCatalog
from bookarchive.core.service import ArchiveService
from bookarchive.db.store import MemoryKeyValueStore


@pytest.fixture()
def catalog() -> ArchiveCatalog:
    """An empty catalog with the default book counter."""
    return ArchiveCatalog()


@pytest.fixture()
def stocked_catalog() -> ArchiveCatalog:
    """A catalog with two books on different shelves.

    B1000: "The Name of the Rose", 3 copies on Shelf 1 (001A..003A)
    B1001: "Dune", 2 copies on Shelf 3 (001C..002C)
    """
    catalog = ArchiveCatalog()
    catalog.add_book("The Name of the Rose", "Umberto Eco", 3, "Shelf 1")
    catalog.add_book("Dune", "Frank Herbert", 2, "Shelf 3")
    return catalog


@pytest.fixture()
def memory_store() -> MemoryKeyValueStore:
    """An empty in-memory key-value store."""
    return MemoryKeyValueStore()


@pytest.fixture()
def service(memory_store: MemoryKeyValueStore) -> ArchiveService:
    """An ArchiveService over an empty in-memory store."""
    return ArchiveService(memory_store)


@pytest.fixture()
def db_path(tmp_path: Path) -> Path:
    """Provide a temporary database path."""
    return tmp_path / "archive.db"
