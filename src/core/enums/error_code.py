"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Resource errors (*_NOT_FOUND)
- Authorization errors (PERMISSION_*, UNKNOWN_*)
- Accounting errors (ACCOUNTING_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Resource errors
    PERMISSION_PROFILE_NOT_FOUND = "permission_profile_not_found"

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"
    UNKNOWN_RESOURCE_OR_ACTION = "unknown_resource_or_action"

    # Accounting errors
    ACCOUNTING_ENTRIES_UNAVAILABLE = "accounting_entries_unavailable"
