# ABOUTME: SQLite database connection management for the Bookarchive store.
# ABOUTME: Opens or creates the database, applies schema, and wraps it as a key-value store.

import sqlite3
from pathlib import Path

from bookarchive.db.schema import MIGRATIONS, SCHEMA_V1
from bookarchive.db.store import SqliteKeyValueStore

DEFAULT_DB_PATH = Path.home() / ".bookarchive" / "archive.db"


def _schema_exists(conn: sqlite3.Connection) -> bool:
    """Check if the schema has already been applied."""
    cursor = conn.execute(
        "SELECT name FROM sqlite_master WHERE type='table' AND name='schema_version'"
    )
    return cursor.fetchone() is not None


def _get_schema_version(conn: sqlite3.Connection) -> int:
    """Read the current schema version from the database."""
    cursor = conn.execute("SELECT version FROM schema_version ORDER BY version DESC LIMIT 1")
    row = cursor.fetchone()
    return row[0] if row else 0


def _apply_migrations(conn: sqlite3.Connection) -> None:
    """Apply pending schema migrations with a version above the current one."""
    current = _get_schema_version(conn)
    for version, sql in MIGRATIONS:
        if version > current:
            conn.executescript(sql)


def open_connection(path: Path | None = None) -> sqlite3.Connection:
    """Open or create the archive database and bring its schema up to date.

    Creates the database file and parent directories if they don't exist.

    Args:
        path: Path to the database file. Defaults to ~/.bookarchive/archive.db.

    Returns:
        A configured sqlite3.Connection.
    """
    db_path = path or DEFAULT_DB_PATH
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")

    if not _schema_exists(conn):
        conn.executescript(SCHEMA_V1)

    _apply_migrations(conn)

    return conn


def open_store(path: Path | None = None) -> SqliteKeyValueStore:
    """Open the archive database as a key-value store."""
    return SqliteKeyValueStore(open_connection(path))
