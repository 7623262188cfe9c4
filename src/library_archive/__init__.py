"""
library-archive: catalog and loan management for a small library.

Keeps an in-memory catalog of books and magazines that can be saved to and
restored from an archive file, plus a ledger of loans with overdue checks.
"""

from .archive import CatalogArchive
from .errors import MalformedArchiveError, PersistenceError
from .ledger import LoanLedger
from .lending import LOAN_PERIOD, Loan, LoanStatus, User
from .models import Book, CatalogItem, ItemKind, Magazine, Periodicity, item_from_dict
from .storage import ArchiveStorage, load_archive, save_archive

__version__ = "0.1.0"

__all__ = [
    # models
    "Book",
    "CatalogItem",
    "ItemKind",
    "Magazine",
    "Periodicity",
    "item_from_dict",
    # catalog
    "CatalogArchive",
    # storage
    "ArchiveStorage",
    "load_archive",
    "save_archive",
    "MalformedArchiveError",
    "PersistenceError",
    # lending
    "LOAN_PERIOD",
    "Loan",
    "LoanLedger",
    "LoanStatus",
    "User",
]
