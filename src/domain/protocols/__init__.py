"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import LoggerProtocol, PermissionProfileProvider
"""

from src.domain.protocols.accounting_entry_repository import (
    AccountingEntryRepository,
)
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.permission_profile_provider import (
    PermissionProfileProvider,
)

__all__ = [
    "AccountingEntryRepository",
    "LoggerProtocol",
    "PermissionProfileProvider",
]
