"""
Loan ledger for library-archive.
"""

import logging
from datetime import date

from .lending import Loan

logger = logging.getLogger(__name__)


class LoanLedger:
    """Append-only record of loans, kept in insertion order."""

    def __init__(self) -> None:
        self._loans: list[Loan] = []

    def __len__(self) -> int:
        return len(self._loans)

    def add_loan(self, loan: Loan) -> None:
        """Record a loan. The same book may appear in several active loans."""
        self._loans.append(loan)
        logger.debug(
            f"Loan of {loan.isbn} to {loan.membership_id} recorded, due {loan.due_date}"
        )

    def find_by_member(self, membership_id: str) -> list[Loan]:
        return [loan for loan in self._loans if loan.membership_id == membership_id]

    def find_overdue(self, on: date | None = None) -> list[Loan]:
        """
        Get loans that are overdue as of ``on``.

        ``on`` defaults to today, evaluated on every call, so results change
        as time passes.
        """
        on = on or date.today()
        return [loan for loan in self._loans if loan.is_overdue(on)]

    def loans(self) -> list[Loan]:
        """Return a copy of all loans in insertion order."""
        return list(self._loans)
