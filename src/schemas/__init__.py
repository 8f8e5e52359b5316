"""Request/response schemas.

Pydantic models for validating backend payloads and user-submitted forms,
and for serializing query results. Schemas are kept separate from domain
entities and convert to them explicitly (to_entity / from_dto).

Usage:
    from src.schemas import PermissionProfileSchema, CaseFeeSchema
"""

from src.schemas.accounting_schemas import (
    CaseAccountingSummaryResponse,
    CaseExpenseSchema,
    CaseFeeSchema,
    FeePaymentSchema,
)
from src.schemas.permission_schemas import (
    PermissionProfileSchema,
    PermissionSetRequest,
    SubjectCapabilitiesResponse,
)

__all__ = [
    # Accounting
    "CaseAccountingSummaryResponse",
    "CaseExpenseSchema",
    "CaseFeeSchema",
    "FeePaymentSchema",
    # Permissions
    "PermissionProfileSchema",
    "PermissionSetRequest",
    "SubjectCapabilitiesResponse",
]
