# ABOUTME: Public API for the Bookarchive persistence layer.
# ABOUTME: Exports the key-value stores and the catalog load/save bridge.

from bookarchive.db.bridge import ARCHIVE_KEY, COUNTER_KEY, load_catalog, save_catalog
from bookarchive.db.connection import DEFAULT_DB_PATH, open_store
from bookarchive.db.mapping import book_to_dict, dict_to_book
from bookarchive.db.store import (
    KeyValueStore,
    MemoryKeyValueStore,
    SqliteKeyValueStore,
    StoreError,
)

__all__ = [
    "ARCHIVE_KEY",
    "COUNTER_KEY",
    "DEFAULT_DB_PATH",
    "KeyValueStore",
    "MemoryKeyValueStore",
    "SqliteKeyValueStore",
    "StoreError",
    "book_to_dict",
    "dict_to_book",
    "load_catalog",
    "open_store",
    "save_catalog",
]
