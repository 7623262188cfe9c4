"""
In-memory catalog store for library-archive.
"""

import logging
from pathlib import Path

from .models import Book, CatalogItem
from .storage import ArchiveStorage

logger = logging.getLogger(__name__)


class CatalogArchive:
    """
    Ordered collection of catalog items.

    Items keep their insertion order and duplicate ISBNs are allowed.
    Every lookup is a linear scan with exact, case-sensitive matching.
    """

    def __init__(self) -> None:
        self._items: list[CatalogItem] = []

    def __len__(self) -> int:
        return len(self._items)

    def add(self, item: CatalogItem) -> None:
        """Append an item to the end of the catalog."""
        self._items.append(item)
        logger.debug(f"Added {item.kind.value} {item.isbn}")

    def remove_by_isbn(self, isbn: str) -> None:
        """Remove every item with this ISBN. Does nothing if none match."""
        before = len(self._items)
        self._items = [item for item in self._items if item.isbn != isbn]
        logger.debug(f"Removed {before - len(self._items)} item(s) with isbn {isbn}")

    def find_by_isbn(self, isbn: str) -> CatalogItem | None:
        """Return the first item with this ISBN, or None."""
        for item in self._items:
            if item.isbn == isbn:
                return item
        return None

    def find_by_publication_year(self, year: int) -> list[CatalogItem]:
        return [item for item in self._items if item.publication_year == year]

    def find_by_author(self, author: str) -> list[Book]:
        """Return books (never magazines) written by exactly this author."""
        return [
            item
            for item in self._items
            if isinstance(item, Book) and item.author == author
        ]

    def items(self) -> list[CatalogItem]:
        """Return a copy of all items in insertion order."""
        return list(self._items)

    def save_to_disk(self, path: Path) -> None:
        """Write the whole catalog to an archive file."""
        ArchiveStorage(path).save(self._items)

    def load_from_disk(self, path: Path) -> None:
        """
        Replace the catalog with the contents of an archive file.

        The catalog is only replaced once the whole file has been read, so
        a PersistenceError leaves the current items untouched.
        """
        items = ArchiveStorage(path).load()
        self._items = items
