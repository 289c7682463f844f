# ABOUTME: Converts between Book/Copy dataclasses and their stored dictionary form.
# ABOUTME: Stored keys keep the archive's capitalized field names (Title, CopyID, ...).

from typing import Any

from bookarchive.archive.types import AVAILABLE, Book, Copy


def copy_to_dict(copy: Copy) -> dict[str, Any]:
    """Convert a Copy to a JSON-ready dict."""
    return {
        "CopyID": copy.copy_id,
        "Location": copy.location,
        "History": list(copy.history),
        "Status": copy.status,
    }


def book_to_dict(book: Book) -> dict[str, Any]:
    """Convert a Book and its copies to a JSON-ready dict."""
    return {
        "Title": book.title,
        "Author": book.author,
        "ID": book.id,
        "Location": book.location,
        "Copies": [copy_to_dict(copy) for copy in book.copies],
    }


def _text(data: dict[str, Any], key: str, default: str | None = None) -> str:
    """Read a string field. Optional fields fall back to ``default`` when null or absent."""
    value = data.get(key) if default is not None else data[key]
    if value is None and default is not None:
        return default
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {type(value).__name__}")
    return value


def _list(data: dict[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"{key} must be a list, got {type(value).__name__}")
    return value


def _require_dict(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise TypeError(f"{what} must be an object, got {type(data).__name__}")
    return data


def dict_to_copy(data: dict[str, Any]) -> Copy:
    """Build a Copy from its stored form. Missing optional keys get defaults.

    Raises:
        KeyError: If CopyID is missing.
        TypeError: If a field has the wrong type.
    """
    data = _require_dict(data, "Copy")
    history = _list(data, "History")
    if not all(isinstance(entry, str) for entry in history):
        raise TypeError("History entries must be strings")
    return Copy(
        copy_id=_text(data, "CopyID"),
        location=_text(data, "Location", ""),
        history=list(history),
        status=_text(data, "Status", AVAILABLE) or AVAILABLE,
    )


def dict_to_book(data: dict[str, Any]) -> Book:
    """Build a Book from its stored form.

    Raises:
        KeyError: If Title, Author, ID, or a copy's CopyID is missing.
        TypeError: If a field has the wrong type.
    """
    data = _require_dict(data, "Book")
    return Book(
        title=_text(data, "Title"),
        author=_text(data, "Author"),
        id=_text(data, "ID"),
        location=_text(data, "Location", ""),
        copies=[dict_to_copy(copy) for copy in _list(data, "Copies")],
    )
