"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.case_expense import CaseExpense
from src.domain.entities.case_fee import CaseFee
from src.domain.entities.fee_payment import FeePayment
from src.domain.entities.permission_profile import PermissionProfile
from src.domain.entities.permission_set import PermissionSet
from src.domain.entities.subject import Subject

__all__ = [
    "CaseExpense",
    "CaseFee",
    "FeePayment",
    "PermissionProfile",
    "PermissionSet",
    "Subject",
]
