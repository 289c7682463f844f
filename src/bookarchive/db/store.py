# ABOUTME: Key-value storage backends for persisted archive state.
# ABOUTME: A Protocol plus SQLite-backed and in-memory implementations.

import sqlite3
from collections.abc import Mapping
from typing import Protocol, runtime_checkable

_UPSERT = (
    "INSERT INTO kv (key, value) VALUES (?, ?) "
    "ON CONFLICT(key) DO UPDATE SET value = excluded.value, "
    "date_modified = strftime('%Y-%m-%dT%H:%M:%S', 'now')"
)


class StoreError(Exception):
    """Raised when the backing store cannot read or write an entry."""


@runtime_checkable
class KeyValueStore(Protocol):
    """Protocol for string-keyed storage of whole serialized entries."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def set_many(self, entries: Mapping[str, str]) -> None: ...


class SqliteKeyValueStore:
    """Stores entries in the ``kv`` table of an open archive database."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def get(self, key: str) -> str | None:
        try:
            cursor = self._conn.execute("SELECT value FROM kv WHERE key = ?", (key,))
        except sqlite3.Error as exc:
            raise StoreError(f"Could not read {key!r}: {exc}") from exc
        row = cursor.fetchone()
        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        """Insert or replace the entry for ``key``."""
        self.set_many({key: value})

    def set_many(self, entries: Mapping[str, str]) -> None:
        """Insert or replace several entries in one transaction.

        Either every entry is written or, on error, none of them are.

        Raises:
            StoreError: If the write fails; the transaction is rolled back.
        """
        try:
            with self._conn:
                self._conn.executemany(_UPSERT, list(entries.items()))
        except sqlite3.Error as exc:
            raise StoreError(f"Could not write {', '.join(entries)}: {exc}") from exc

    def close(self) -> None:
        self._conn.close()


class MemoryKeyValueStore:
    """Dict-backed store for tests and embedding."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial) if initial else {}

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def set_many(self, entries: Mapping[str, str]) -> None:
        self.data.update(entries)
