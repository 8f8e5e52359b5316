"""Fee payment status and payment method enums.

Values match the backend's PascalCase strings.
"""

from enum import Enum


class FeePaymentStatus(str, Enum):
    """Settlement state of a fee payment as recorded by the backend."""

    UNPAID = "Unpaid"
    PAID = "Paid"
    OVERDUE = "Overdue"


class PaymentMethod(str, Enum):
    """How a fee payment or office expense was paid."""

    CASH = "Cash"
    CREDIT_CARD = "CreditCard"
    BANK_TRANSFER = "BankTransfer"
    MOBILE_PAYMENT = "MobilePayment"
    CHECK = "Check"
