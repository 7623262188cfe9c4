"""
Members and loans for library-archive.
"""

from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import Enum

from .models import Book, CatalogItem

LOAN_PERIOD = timedelta(days=30)


class LoanStatus(str, Enum):
    """Lifecycle state of a loan. OVERDUE is derived, never stored."""

    ACTIVE = "active"
    OVERDUE = "overdue"
    RETURNED = "returned"


@dataclass(frozen=True)
class User:
    """A library member."""

    first_name: str
    last_name: str
    birth_date: date
    membership_id: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class Loan:
    """
    A book lent to a member.

    The member and the book are recorded by key (membership id and ISBN),
    so a loan stays valid even if either is later removed elsewhere.

    There is no way to record a return yet: ``return_date`` is not a
    constructor argument and the dataclass is frozen, so every loan is
    either ACTIVE or OVERDUE.
    """

    membership_id: str
    isbn: str
    start_date: date
    return_date: date | None = field(default=None, init=False)

    @property
    def due_date(self) -> date:
        return self.start_date + LOAN_PERIOD

    @classmethod
    def for_book(cls, user: User, book: CatalogItem, start_date: date) -> "Loan":
        """Create a loan of ``book`` to ``user`` starting on ``start_date``."""
        if not isinstance(book, Book):
            raise TypeError(f"Only books can be lent, got {type(book).__name__}")
        return cls(
            membership_id=user.membership_id,
            isbn=book.isbn,
            start_date=start_date,
        )

    def is_overdue(self, on: date | None = None) -> bool:
        """True if not returned and ``on`` (default today) is past the due date."""
        on = on or date.today()
        return self.return_date is None and on > self.due_date

    def status(self, on: date | None = None) -> LoanStatus:
        if self.return_date is not None:
            return LoanStatus.RETURNED
        if self.is_overdue(on):
            return LoanStatus.OVERDUE
        return LoanStatus.ACTIVE
