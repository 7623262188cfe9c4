"""
Catalog item models for library-archive.

Books and magazines share identity fields and are tagged with an
``ItemKind`` discriminant so storage can rebuild the right variant.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar


def _typed(data: dict[str, Any], name: str, expected: type) -> Any:
    """Get a field from an item dictionary, rejecting values of the wrong type."""
    value = data[name]
    # bool is an int subclass but never a valid count or year
    if not isinstance(value, expected) or isinstance(value, bool):
        raise ValueError(f"{name} must be {expected.__name__}, got {value!r}")
    return value


class ItemKind(str, Enum):
    """Discriminant for catalog item variants."""

    BOOK = "book"
    MAGAZINE = "magazine"


class Periodicity(str, Enum):
    """How often a magazine is issued."""

    WEEKLY = "weekly"
    MONTHLY = "monthly"
    SEMIANNUAL = "semiannual"


@dataclass(frozen=True)
class CatalogItem:
    """Fields shared by every item in the catalog."""

    kind: ClassVar[ItemKind]

    isbn: str
    title: str
    publication_year: int

    def __post_init__(self) -> None:
        if type(self) is CatalogItem:
            raise TypeError("CatalogItem is abstract, create a Book or Magazine")
        if not self.isbn:
            raise ValueError("isbn cannot be empty")

    def to_dict(self) -> dict[str, Any]:
        """Convert to a flat dictionary, tagged with the item kind."""
        return {
            "kind": self.kind.value,
            "isbn": self.isbn,
            "title": self.title,
            "publication_year": self.publication_year,
        }


@dataclass(frozen=True)
class Book(CatalogItem):
    """A book in the catalog."""

    kind: ClassVar[ItemKind] = ItemKind.BOOK

    author: str
    genre: str
    num_pages: int

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["author"] = self.author
        result["genre"] = self.genre
        result["num_pages"] = self.num_pages
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Book":
        """Create from dictionary."""
        return cls(
            isbn=_typed(data, "isbn", str),
            title=_typed(data, "title", str),
            publication_year=_typed(data, "publication_year", int),
            author=_typed(data, "author", str),
            genre=_typed(data, "genre", str),
            num_pages=_typed(data, "num_pages", int),
        )


@dataclass(frozen=True)
class Magazine(CatalogItem):
    """A magazine issue in the catalog."""

    kind: ClassVar[ItemKind] = ItemKind.MAGAZINE

    issue_number: int
    periodicity: Periodicity

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["issue_number"] = self.issue_number
        result["periodicity"] = self.periodicity.value
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Magazine":
        """Create from dictionary."""
        return cls(
            isbn=_typed(data, "isbn", str),
            title=_typed(data, "title", str),
            publication_year=_typed(data, "publication_year", int),
            issue_number=_typed(data, "issue_number", int),
            periodicity=Periodicity(data["periodicity"]),
        )


ITEM_TYPES: dict[ItemKind, type[Book] | type[Magazine]] = {
    ItemKind.BOOK: Book,
    ItemKind.MAGAZINE: Magazine,
}


def item_from_dict(data: dict[str, Any]) -> Book | Magazine:
    """
    Rebuild a catalog item from its dictionary form.

    Dispatches on the ``kind`` key. Raises ValueError for an unknown kind or
    periodicity or a field of the wrong type, and KeyError for a missing field.
    """
    kind = ItemKind(data["kind"])
    return ITEM_TYPES[kind].from_dict(data)
