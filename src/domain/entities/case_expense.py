"""CaseExpense domain entity."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True, slots=True, kw_only=True)
class CaseExpense:
    """Expense incurred on a case and recharged to the client.

    Attributes:
        amount: Expense amount.
        expense_date: When the expense was incurred.
        id: Backend identifier.
        case_id: Case the expense belongs to.
        created_at: Record creation timestamp.
    """

    amount: Decimal
    expense_date: datetime
    id: int | None = None
    case_id: int | None = None
    created_at: datetime | None = None
