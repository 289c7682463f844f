# ABOUTME: SQL DDL statements for the Bookarchive key-value database.
# ABOUTME: A single string-keyed table holds whole serialized entries.

SCHEMA_V1 = """
-- Whole-document entries, replaced on every save
CREATE TABLE kv (
    key           TEXT PRIMARY KEY,
    value         TEXT NOT NULL,
    date_modified TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now'))
);

-- Schema versioning for future migrations
CREATE TABLE schema_version (
    version    INTEGER NOT NULL,
    applied_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now'))
);

INSERT INTO schema_version (version) VALUES (1);
"""

# Ordered list of (version, sql) migrations applied after SCHEMA_V1.
MIGRATIONS: list[tuple[int, str]] = []
