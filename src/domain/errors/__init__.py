"""Domain errors package.

Usage:
    from src.domain.errors import UnknownResourceOrActionError, AccountingError
"""

from src.domain.errors.accounting_error import AccountingError
from src.domain.errors.authorization_error import (
    PermissionProfileError,
    UnknownResourceOrActionError,
)

__all__ = [
    "AccountingError",
    "PermissionProfileError",
    "UnknownResourceOrActionError",
]
