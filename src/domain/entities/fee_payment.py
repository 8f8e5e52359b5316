"""FeePayment domain entity."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from src.domain.enums.fee_payment_status import FeePaymentStatus, PaymentMethod


@dataclass(frozen=True, slots=True, kw_only=True)
class FeePayment:
    """Payment made against a case fee.

    Every payment counts toward the paid total regardless of status; the
    status is the backend's bookkeeping label.

    Attributes:
        amount: Amount paid.
        status: Unpaid, Paid or Overdue.
        id: Backend identifier.
        case_fee_id: Fee this payment settles.
        title: Free text.
        payment_date: When the payment was made.
        payment_method: How it was paid.
        due_date: When it was due.
        created_at: Record creation timestamp.
    """

    amount: Decimal
    status: FeePaymentStatus = FeePaymentStatus.UNPAID
    id: int | None = None
    case_fee_id: int | None = None
    title: str | None = None
    payment_date: datetime | None = None
    payment_method: PaymentMethod | None = None
    due_date: datetime | None = None
    created_at: datetime | None = None
