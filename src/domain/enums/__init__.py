"""Domain enums for business logic.

This package contains enumerations used throughout the domain layer.

Available Enums:
    - Resource: Resources governed by a permission profile
    - Action: Actions on resources (view, create, update, delete)
    - UserRole: Roles known to the authorization core
    - ViewLevel: Case/task view field levels (0-3)
    - FeePaymentStatus: Unpaid, Paid, Overdue
    - PaymentMethod: Cash, CreditCard, BankTransfer, MobilePayment, Check
"""

from src.domain.enums.fee_payment_status import FeePaymentStatus, PaymentMethod
from src.domain.enums.permission import Action, Resource
from src.domain.enums.user_role import UserRole
from src.domain.enums.view_level import ViewLevel

__all__ = [
    "Action",
    "FeePaymentStatus",
    "PaymentMethod",
    "Resource",
    "UserRole",
    "ViewLevel",
]
