"""AccountingEntryRepository protocol.

Port for loading the fees, expenses and payments of a case. Lists are
fetched per case, summarized, and discarded; nothing is written back.
"""

from typing import Protocol

from src.domain.entities.case_expense import CaseExpense
from src.domain.entities.case_fee import CaseFee
from src.domain.entities.fee_payment import FeePayment


class AccountingEntryRepository(Protocol):
    """Accounting entry source (port).

    Methods:
        find_fees_by_case: Fees billed on a case
        find_expenses_by_case: Expenses recorded on a case
        find_payments_by_case: Payments made against the case's fees

    Implementations may raise on transport failure; query handlers turn
    that into a Failure.
    """

    async def find_fees_by_case(self, case_id: int) -> list[CaseFee]:
        """Find all (non-deleted) fees for a case.

        Args:
            case_id: Case identifier.

        Returns:
            List of fees (empty if none).
        """
        ...

    async def find_expenses_by_case(self, case_id: int) -> list[CaseExpense]:
        """Find all (non-deleted) expenses for a case.

        Args:
            case_id: Case identifier.

        Returns:
            List of expenses (empty if none).
        """
        ...

    async def find_payments_by_case(self, case_id: int) -> list[FeePayment]:
        """Find all (non-deleted) payments for a case.

        Args:
            case_id: Case identifier.

        Returns:
            List of payments (empty if none).
        """
        ...
