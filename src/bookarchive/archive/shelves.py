# ABOUTME: Maps free-text shelf locations to the single-letter codes used in CopyIDs.
# ABOUTME: Resolution is total: unknown or empty locations fall back to the default shelf.

DEFAULT_SHELF = "Default"

_SHELF_LETTERS = {
    "Shelf 1": "A",
    "Shelf 2": "B",
    "Shelf 3": "C",
    "Shelf 4": "D",
    "Shelf 5": "E",
    DEFAULT_SHELF: "X",
}

SHELF_NAMES = tuple(_SHELF_LETTERS)


def resolve_shelf_letter(location: str | None) -> str:
    """Return the shelf letter for a location string.

    Surrounding whitespace is ignored. Anything that is not an exact shelf
    name, including None and the empty string, maps to the default letter.
    """
    if not location:
        return _SHELF_LETTERS[DEFAULT_SHELF]
    return _SHELF_LETTERS.get(location.strip(), _SHELF_LETTERS[DEFAULT_SHELF])


def shelf_letters() -> dict[str, str]:
    """Return a copy of the shelf name to letter table."""
    return dict(_SHELF_LETTERS)
