"""Accounting queries (CQRS read operations).

Queries are immutable dataclasses with question-like names. They carry
the request only; handlers do the fetching and folding.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, kw_only=True)
class GetCaseAccountingSummary:
    """Get fee, expense and payment totals for one case.

    Attributes:
        case_id: Case to summarize.
        now: Point in time used for overdue checks. None means "now" at
            handling time.

    Example:
        >>> query = GetCaseAccountingSummary(case_id=42)
        >>> result = await handler.handle(query)
    """

    case_id: int
    now: datetime | None = None
