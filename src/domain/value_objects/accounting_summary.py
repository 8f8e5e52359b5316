"""Accounting summary value object.

Result of folding a case's fees, expenses and payments together. Totals are
Decimal; the payment percentage is a whole number.

Sign Convention:
    balance = total_due - total_payments, kept signed. A negative balance
    means the client overpaid. Views that show "remaining" use the
    ``remaining`` property, which clamps at zero.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True, slots=True, kw_only=True)
class AccountingSummary:
    """Totals, balance and payment percentage for one case (or all cases).

    Attributes:
        total_fees: Sum of fee amounts.
        total_expenses: Sum of expense amounts.
        total_payments: Sum of payment amounts.
        total_due: total_fees + total_expenses.
        balance: total_due - total_payments (signed).
        payment_percentage: Share of total_due already paid, rounded half
            away from zero to a whole percent; 0 when nothing is due.
    """

    total_fees: Decimal
    total_expenses: Decimal
    total_payments: Decimal
    total_due: Decimal
    balance: Decimal
    payment_percentage: int

    @property
    def remaining(self) -> Decimal:
        """Amount still owed, never negative."""
        return max(self.balance, Decimal("0"))

    @property
    def net_amount(self) -> Decimal:
        """Fees minus expenses, as shown on the case accounting details."""
        return self.total_fees - self.total_expenses

    @property
    def is_overpaid(self) -> bool:
        """True when payments exceed what is due."""
        return self.balance < 0

    @property
    def is_settled(self) -> bool:
        """True when nothing remains to be paid."""
        return self.balance <= 0
