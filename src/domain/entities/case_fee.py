"""CaseFee domain entity.

A fee billed to a client for a case, due on a given date.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from decimal import Decimal


@dataclass(frozen=True, slots=True, kw_only=True)
class CaseFee:
    """Fee owed on a case.

    Amounts are trusted as received; aggregation does not validate them.

    Attributes:
        amount: Fee amount.
        due_date: When the fee is to be paid.
        id: Backend identifier.
        case_id: Case the fee belongs to.
        client_id: Client billed.
        description: Free text.
        created_at: Record creation timestamp.
    """

    amount: Decimal
    due_date: datetime
    id: int | None = None
    case_id: int | None = None
    client_id: int | None = None
    description: str | None = None
    created_at: datetime | None = None

    def is_overdue(self, now: datetime) -> bool:
        """Check whether the fee is past due at ``now``.

        Point-in-time comparison, recomputed on every call. A fee due exactly
        at ``now`` is not overdue. Naive datetimes on either side are taken
        as UTC.

        Args:
            now: Evaluation time.

        Returns:
            bool: True if due_date < now.
        """
        return _as_utc(self.due_date) < _as_utc(now)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
