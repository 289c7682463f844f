# ABOUTME: Loads and saves the whole archive catalog through a key-value store.
# ABOUTME: The book list and the book-ID counter are two entries written together.

import json
import logging
import re

from bookarchive.archive.catalog import ArchiveCatalog
from bookarchive.archive.ids import DEFAULT_FIRST_BOOK_NUMBER, BookIdAllocator
from bookarchive.archive.types import Book
from bookarchive.db.mapping import book_to_dict, dict_to_book
from bookarchive.db.store import KeyValueStore

logger = logging.getLogger(__name__)

ARCHIVE_KEY = "archive"
COUNTER_KEY = "bookID_Number"

_BOOK_ID_RE = re.compile(r"B(\d+)")


def _load_counter(store: KeyValueStore) -> int:
    raw = store.get(COUNTER_KEY)
    if raw is None:
        return DEFAULT_FIRST_BOOK_NUMBER
    try:
        number = int(raw.strip())
    except ValueError:
        logger.warning("Unparseable book counter %r, using %d", raw, DEFAULT_FIRST_BOOK_NUMBER)
        return DEFAULT_FIRST_BOOK_NUMBER
    # A zero counter reads as missing, the same as an unset one.
    return number or DEFAULT_FIRST_BOOK_NUMBER


def _next_free_number(books: list[Book], counter: int) -> int:
    """Return ``counter`` raised above every stored B<n> ID, if needed."""
    numbers = [int(m.group(1)) for m in (_BOOK_ID_RE.fullmatch(b.id) for b in books) if m]
    if numbers and max(numbers) >= counter:
        logger.warning(
            "Book counter %d is behind stored ID B%d, advancing it", counter, max(numbers)
        )
        return max(numbers) + 1
    return counter


def load_catalog(store: KeyValueStore) -> ArchiveCatalog:
    """Read the catalog and counter from the store.

    Missing entries give an empty catalog and the default counter. A catalog
    entry that is not valid JSON, not a list of books, or holds fields of the
    wrong type is logged and treated as empty. The counter never starts at or
    below a book ID that is already stored.
    """
    books: list[Book] = []
    raw = store.get(ARCHIVE_KEY)
    if raw:
        try:
            data = json.loads(raw)
            if isinstance(data, list):
                books = [dict_to_book(item) for item in data]
            else:
                logger.warning("Stored archive is not a list, starting empty")
        except (json.JSONDecodeError, KeyError, TypeError) as exc:
            logger.warning("Stored archive could not be read, starting empty: %s", exc)
            books = []

    counter = _next_free_number(books, _load_counter(store))
    catalog = ArchiveCatalog(books, BookIdAllocator(counter))
    logger.debug("Loaded %d books, next book number %d", len(catalog), catalog.next_book_number)
    return catalog


def save_catalog(store: KeyValueStore, catalog: ArchiveCatalog) -> None:
    """Overwrite both stored entries with the catalog's current state.

    Both entries go to the store in a single write, so the book list and the
    counter are never saved out of step.
    """
    payload = json.dumps([book_to_dict(book) for book in catalog], ensure_ascii=False)
    store.set_many({ARCHIVE_KEY: payload, COUNTER_KEY: str(catalog.next_book_number)})
    logger.debug("Saved %d books (version %d)", len(catalog), catalog.version)
