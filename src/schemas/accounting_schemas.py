"""Accounting schemas.

Pydantic schemas that parse the backend's case fee, case expense and fee
payment DTOs (camelCase JSON) into domain entities, and serialize the case
accounting summary.
"""

from datetime import UTC, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.application.queries.handlers.get_case_accounting_summary_handler import (
    CaseAccountingResult,
)
from src.domain.entities.case_expense import CaseExpense
from src.domain.entities.case_fee import CaseFee
from src.domain.entities.fee_payment import FeePayment
from src.domain.enums.fee_payment_status import FeePaymentStatus, PaymentMethod

_BACKEND_CONFIG = ConfigDict(populate_by_name=True, extra="ignore")


def ensure_utc(v: datetime | None) -> datetime | None:
    """Ensure a backend timestamp is timezone-aware (UTC).

    The backend sends ISO strings without an offset; those are UTC.
    """
    if v is None:
        return None
    if v.tzinfo is None:
        return v.replace(tzinfo=UTC)
    return v.astimezone(UTC)


# =============================================================================
# Backend DTOs
# =============================================================================


class CaseFeeSchema(BaseModel):
    """Case fee as returned by GET /api/CaseFees."""

    id: int | None = Field(None, description="Fee identifier")
    amount: Decimal = Field(..., description="Fee amount")
    case_id: int | None = Field(None, alias="caseId", description="Case FK")
    client_id: int | None = Field(None, alias="clientId", description="Client FK")
    description: str | None = Field(None, description="Free text")
    to_be_paid_at: datetime = Field(
        ..., alias="toBePaidAt", description="Due date of the fee"
    )
    created_at: datetime | None = Field(
        None, alias="createdAt", description="Creation timestamp"
    )

    model_config = _BACKEND_CONFIG

    ensure_timezone_aware = field_validator("to_be_paid_at", "created_at")(ensure_utc)

    def to_entity(self) -> CaseFee:
        """Convert to the domain entity."""
        return CaseFee(
            amount=self.amount,
            due_date=self.to_be_paid_at,
            id=self.id,
            case_id=self.case_id,
            client_id=self.client_id,
            description=self.description,
            created_at=self.created_at,
        )


class CaseExpenseSchema(BaseModel):
    """Case expense as returned by GET /api/CaseExpenses."""

    id: int | None = Field(None, description="Expense identifier")
    amount: Decimal = Field(..., description="Expense amount")
    case_id: int | None = Field(None, alias="caseId", description="Case FK")
    expense_date: datetime = Field(
        ..., alias="expenseDate", description="When the expense was incurred"
    )
    created_at: datetime | None = Field(
        None, alias="createdAt", description="Creation timestamp"
    )

    model_config = _BACKEND_CONFIG

    ensure_timezone_aware = field_validator("expense_date", "created_at")(ensure_utc)

    def to_entity(self) -> CaseExpense:
        """Convert to the domain entity."""
        return CaseExpense(
            amount=self.amount,
            expense_date=self.expense_date,
            id=self.id,
            case_id=self.case_id,
            created_at=self.created_at,
        )


class FeePaymentSchema(BaseModel):
    """Fee payment as returned by GET /api/FeePayments."""

    id: int | None = Field(None, description="Payment identifier")
    case_fee_id: int | None = Field(None, alias="caseFeeId", description="Fee FK")
    title: str | None = Field(None, description="Free text")
    amount: Decimal = Field(..., description="Amount paid")
    payment_date: datetime | None = Field(
        None, alias="paymentDate", description="When the payment was made"
    )
    payment_method: PaymentMethod | None = Field(
        None, alias="paymentMethod", description="How it was paid"
    )
    due_date: datetime | None = Field(None, alias="dueDate", description="Due date")
    status: FeePaymentStatus = Field(
        FeePaymentStatus.UNPAID, description="Backend bookkeeping status"
    )
    created_at: datetime | None = Field(
        None, alias="createdAt", description="Creation timestamp"
    )

    model_config = _BACKEND_CONFIG

    ensure_timezone_aware = field_validator(
        "payment_date", "due_date", "created_at"
    )(ensure_utc)

    def to_entity(self) -> FeePayment:
        """Convert to the domain entity."""
        return FeePayment(
            amount=self.amount,
            status=self.status,
            id=self.id,
            case_fee_id=self.case_fee_id,
            title=self.title,
            payment_date=self.payment_date,
            payment_method=self.payment_method,
            due_date=self.due_date,
            created_at=self.created_at,
        )


# =============================================================================
# Response Schemas
# =============================================================================


class CaseAccountingSummaryResponse(BaseModel):
    """Case accounting totals.

    Decimal amounts are serialized as strings to avoid float rounding.
    """

    case_id: int = Field(..., description="Case identifier")
    total_fees: Decimal = Field(..., description="Sum of fees")
    total_expenses: Decimal = Field(..., description="Sum of expenses")
    total_payments: Decimal = Field(..., description="Sum of payments")
    total_due: Decimal = Field(..., description="Fees plus expenses")
    balance: Decimal = Field(..., description="Due minus paid (negative if overpaid)")
    remaining: Decimal = Field(..., description="Balance clamped at zero")
    net_amount: Decimal = Field(..., description="Fees minus expenses")
    payment_percentage: int = Field(
        ..., description="Share of due already paid", examples=[35]
    )
    overdue_fee_count: int = Field(..., description="Fees past due")
    overdue_amount: Decimal = Field(..., description="Sum of fees past due")

    @classmethod
    def from_dto(cls, dto: CaseAccountingResult) -> "CaseAccountingSummaryResponse":
        """Convert application DTO to response schema.

        Args:
            dto: CaseAccountingResult from handler.

        Returns:
            CaseAccountingSummaryResponse.
        """
        summary = dto.summary
        return cls(
            case_id=dto.case_id,
            total_fees=summary.total_fees,
            total_expenses=summary.total_expenses,
            total_payments=summary.total_payments,
            total_due=summary.total_due,
            balance=summary.balance,
            remaining=summary.remaining,
            net_amount=summary.net_amount,
            payment_percentage=summary.payment_percentage,
            overdue_fee_count=dto.overdue_fee_count,
            overdue_amount=dto.overdue_amount,
        )
