"""GetCaseAccountingSummary query handler.

Loads a case's fees, expenses and payments and folds them into the totals
shown on the case accounting tab.

Architecture:
- Application layer handler (orchestrates data retrieval)
- Returns Result[DTO, DomainError] (explicit error handling)
- Repository failures become Failure, never an exception
"""

from dataclasses import dataclass
from decimal import Decimal

from src.application.queries.accounting_queries import GetCaseAccountingSummary
from src.application.services.financial_aggregator import FinancialAggregator
from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.errors.accounting_error import AccountingError
from src.domain.protocols.accounting_entry_repository import (
    AccountingEntryRepository,
)
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.value_objects.accounting_summary import AccountingSummary


@dataclass
class CaseAccountingResult:
    """Case accounting result DTO.

    Attributes:
        case_id: Case summarized.
        summary: Totals, balance and payment percentage.
        fee_count: Number of fees on the case.
        expense_count: Number of expenses on the case.
        payment_count: Number of payments on the case.
        overdue_fee_count: Fees past due at evaluation time.
        overdue_amount: Sum of the overdue fees.
    """

    case_id: int
    summary: AccountingSummary
    fee_count: int
    expense_count: int
    payment_count: int
    overdue_fee_count: int
    overdue_amount: Decimal


class GetCaseAccountingSummaryError:
    """GetCaseAccountingSummary-specific errors."""

    ENTRIES_UNAVAILABLE = AccountingError.ENTRIES_UNAVAILABLE


class GetCaseAccountingSummaryHandler:
    """Handler for GetCaseAccountingSummary query.

    Dependencies (injected via constructor):
        - AccountingEntryRepository: Fee, expense and payment lists
        - FinancialAggregator: Totals and overdue checks
        - LoggerProtocol: Failure logging
    """

    def __init__(
        self,
        accounting_repo: AccountingEntryRepository,
        aggregator: FinancialAggregator,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            accounting_repo: Source of accounting entries.
            aggregator: Service computing totals.
            logger: Structured logger.
        """
        self._accounting_repo = accounting_repo
        self._aggregator = aggregator
        self._logger = logger

    async def handle(
        self, query: GetCaseAccountingSummary
    ) -> Result[CaseAccountingResult, DomainError]:
        """Handle GetCaseAccountingSummary query.

        Args:
            query: Case to summarize and optional evaluation time.

        Returns:
            Success(CaseAccountingResult): Totals computed (all zero when the
                case has no entries).
            Failure(DomainError): An entry list could not be loaded
                (ACCOUNTING_ENTRIES_UNAVAILABLE).
        """
        try:
            fees = await self._accounting_repo.find_fees_by_case(query.case_id)
            expenses = await self._accounting_repo.find_expenses_by_case(
                query.case_id
            )
            payments = await self._accounting_repo.find_payments_by_case(
                query.case_id
            )
        except Exception as e:
            self._logger.error(
                "case_accounting_load_failed",
                error=e,
                case_id=query.case_id,
            )
            return Failure(
                error=DomainError(
                    code=ErrorCode.ACCOUNTING_ENTRIES_UNAVAILABLE,
                    message=GetCaseAccountingSummaryError.ENTRIES_UNAVAILABLE,
                    details={"case_id": str(query.case_id), "reason": str(e)},
                )
            )

        summary = self._aggregator.summarize(fees, expenses, payments)
        at = query.now if query.now is not None else self._aggregator.now()
        overdue = self._aggregator.overdue_fees(fees, at)

        dto = CaseAccountingResult(
            case_id=query.case_id,
            summary=summary,
            fee_count=len(fees),
            expense_count=len(expenses),
            payment_count=len(payments),
            overdue_fee_count=len(overdue),
            overdue_amount=self._aggregator.overdue_total(overdue, at),
        )

        return Success(value=dto)
