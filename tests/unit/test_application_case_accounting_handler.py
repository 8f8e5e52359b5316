"""Unit tests for GetCaseAccountingSummaryHandler.

Tests the case accounting query handler with a mocked repository and a
real aggregator.
"""

from datetime import datetime, timedelta
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.application.queries.accounting_queries import GetCaseAccountingSummary
from src.application.queries.handlers.get_case_accounting_summary_handler import (
    CaseAccountingResult,
    GetCaseAccountingSummaryError,
    GetCaseAccountingSummaryHandler,
)
from src.application.services.financial_aggregator import FinancialAggregator
from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Success
from src.domain.entities import CaseExpense, CaseFee, FeePayment
from src.domain.protocols.accounting_entry_repository import (
    AccountingEntryRepository,
)
from src.schemas import CaseFeeSchema


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def mock_accounting_repo() -> AsyncMock:
    """Mock AccountingEntryRepository with an empty case."""
    repo = AsyncMock(spec=AccountingEntryRepository)
    repo.find_fees_by_case.return_value = []
    repo.find_expenses_by_case.return_value = []
    repo.find_payments_by_case.return_value = []
    return repo


@pytest.fixture
def handler(
    mock_accounting_repo: AsyncMock, mock_logger: MagicMock, fixed_now: datetime
) -> GetCaseAccountingSummaryHandler:
    """Handler with mocked repository and fixed-clock aggregator."""
    return GetCaseAccountingSummaryHandler(
        accounting_repo=mock_accounting_repo,
        aggregator=FinancialAggregator(logger=mock_logger, clock=lambda: fixed_now),
        logger=mock_logger,
    )


# ============================================================================
# Success Cases
# ============================================================================


@pytest.mark.asyncio
async def test_case_without_entries_is_all_zero(
    handler: GetCaseAccountingSummaryHandler,
    mock_accounting_repo: AsyncMock,
) -> None:
    """Empty case returns Success with zero totals."""
    result = await handler.handle(GetCaseAccountingSummary(case_id=42))

    assert isinstance(result, Success)
    dto = result.value
    assert isinstance(dto, CaseAccountingResult)
    assert dto.case_id == 42
    assert dto.summary.total_due == Decimal("0")
    assert dto.summary.payment_percentage == 0
    assert dto.overdue_fee_count == 0
    assert dto.overdue_amount == Decimal("0")
    mock_accounting_repo.find_fees_by_case.assert_awaited_once_with(42)
    mock_accounting_repo.find_expenses_by_case.assert_awaited_once_with(42)
    mock_accounting_repo.find_payments_by_case.assert_awaited_once_with(42)


@pytest.mark.asyncio
async def test_case_totals_and_overdue(
    handler: GetCaseAccountingSummaryHandler,
    mock_accounting_repo: AsyncMock,
    fixed_now: datetime,
) -> None:
    """Totals, percentage and overdue counts are computed from the lists."""
    mock_accounting_repo.find_fees_by_case.return_value = [
        CaseFee(amount=Decimal("600"), due_date=fixed_now - timedelta(days=3)),
        CaseFee(amount=Decimal("400"), due_date=fixed_now + timedelta(days=3)),
    ]
    mock_accounting_repo.find_expenses_by_case.return_value = [
        CaseExpense(amount=Decimal("200"), expense_date=fixed_now),
    ]
    mock_accounting_repo.find_payments_by_case.return_value = [
        FeePayment(amount=Decimal("420")),
    ]

    result = await handler.handle(GetCaseAccountingSummary(case_id=7))

    assert isinstance(result, Success)
    dto = result.value
    assert dto.summary.balance == Decimal("780")
    assert dto.summary.payment_percentage == 35
    assert dto.fee_count == 2
    assert dto.expense_count == 1
    assert dto.payment_count == 1
    assert dto.overdue_fee_count == 1
    assert dto.overdue_amount == Decimal("600")


@pytest.mark.asyncio
async def test_query_time_overrides_clock(
    handler: GetCaseAccountingSummaryHandler,
    mock_accounting_repo: AsyncMock,
    fixed_now: datetime,
) -> None:
    """An explicit query time is used for overdue checks."""
    mock_accounting_repo.find_fees_by_case.return_value = [
        CaseFee(amount=Decimal("50"), due_date=fixed_now + timedelta(days=1)),
    ]

    result = await handler.handle(
        GetCaseAccountingSummary(case_id=7, now=fixed_now + timedelta(days=2))
    )

    assert isinstance(result, Success)
    assert result.value.overdue_fee_count == 1


@pytest.mark.asyncio
async def test_backend_dates_without_offset(
    mock_accounting_repo: AsyncMock,
    mock_logger: MagicMock,
) -> None:
    """Offset-less backend due dates work with the default UTC clock."""
    mock_accounting_repo.find_fees_by_case.return_value = [
        CaseFeeSchema.model_validate(
            {"amount": 100, "toBePaidAt": "2024-01-01T00:00:00"}
        ).to_entity(),
    ]
    handler = GetCaseAccountingSummaryHandler(
        accounting_repo=mock_accounting_repo,
        aggregator=FinancialAggregator(logger=mock_logger),
        logger=mock_logger,
    )

    result = await handler.handle(GetCaseAccountingSummary(case_id=7))

    assert isinstance(result, Success)
    assert result.value.overdue_fee_count == 1
    assert result.value.overdue_amount == Decimal("100")


# ============================================================================
# Failure Cases
# ============================================================================


@pytest.mark.asyncio
async def test_repository_error_returns_failure(
    handler: GetCaseAccountingSummaryHandler,
    mock_accounting_repo: AsyncMock,
    mock_logger: MagicMock,
) -> None:
    """A repository exception becomes Failure and is logged."""
    mock_accounting_repo.find_expenses_by_case.side_effect = ConnectionError(
        "backend unreachable"
    )

    result = await handler.handle(GetCaseAccountingSummary(case_id=9))

    assert isinstance(result, Failure)
    assert isinstance(result.error, DomainError)
    assert result.error.code is ErrorCode.ACCOUNTING_ENTRIES_UNAVAILABLE
    assert result.error.message == GetCaseAccountingSummaryError.ENTRIES_UNAVAILABLE
    assert result.error.details == {"case_id": "9", "reason": "backend unreachable"}
    mock_logger.error.assert_called_once()
    assert mock_logger.error.call_args.kwargs["case_id"] == 9
