"""Domain value objects.

Immutable values with no identity: the permission mask codecs and the
accounting summary.
"""

from src.domain.value_objects.accounting_summary import AccountingSummary
from src.domain.value_objects.dml_permission_code import (
    DML_PERMISSION_LOOKUP,
    DmlFlag,
    DmlPermissionBits,
    DmlPermissionCode,
)
from src.domain.value_objects.permission_code import (
    MAX_PERMISSION_VALUE,
    MIN_PERMISSION_VALUE,
    PERMISSION_LOOKUP,
    MaskCodec,
    PermissionBits,
    PermissionCode,
    PermissionFlag,
)

__all__ = [
    "AccountingSummary",
    "DML_PERMISSION_LOOKUP",
    "DmlFlag",
    "DmlPermissionBits",
    "DmlPermissionCode",
    "MAX_PERMISSION_VALUE",
    "MIN_PERMISSION_VALUE",
    "MaskCodec",
    "PERMISSION_LOOKUP",
    "PermissionBits",
    "PermissionCode",
    "PermissionFlag",
]
