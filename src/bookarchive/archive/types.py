# ABOUTME: Core data structures for the archive: a Book and its physical Copies.
# ABOUTME: These dataclasses flow between the catalog, persistence, and rendering layers.

from dataclasses import dataclass, field

AVAILABLE = "Available"


@dataclass
class Copy:
    """One physical copy of a book.

    History is kept newest first. Any status other than "Available" means the
    copy is currently unavailable.
    """

    copy_id: str
    location: str = ""
    history: list[str] = field(default_factory=list)
    status: str = AVAILABLE

    @property
    def is_available(self) -> bool:
        """Whether the copy's status reads as available (case-insensitive)."""
        return self.status.lower() == AVAILABLE.lower()


@dataclass
class Book:
    """A cataloged title and the copies that belong to it."""

    title: str
    author: str
    id: str
    location: str = ""
    copies: list[Copy] = field(default_factory=list)

    def find_copy(self, copy_id: str) -> Copy | None:
        """Return the first copy with the given CopyID, if any."""
        for copy in self.copies:
            if copy.copy_id == copy_id:
                return copy
        return None
