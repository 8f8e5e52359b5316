"""Financial aggregation service.

Folds a case's fees, expenses and payments into the totals shown on the
case accounting screen and the finance dashboard.

Formulas:
    total_due          = total_fees + total_expenses
    balance            = total_due - total_payments   (signed)
    payment_percentage = round(total_payments / total_due * 100), or 0 when
                         nothing is due

Rounding is half away from zero (ROUND_HALF_UP on Decimal), so 12.5%
shows as 13% and 150% overpayment shows as 150, not capped.

Usage:
    aggregator = FinancialAggregator(logger=get_logger())
    summary = aggregator.summarize(fees, expenses, payments)
    summary.payment_percentage  # 35
"""

from collections.abc import Callable, Iterable
from datetime import UTC, datetime
from decimal import ROUND_HALF_UP, Decimal

from src.domain.entities.case_expense import CaseExpense
from src.domain.entities.case_fee import CaseFee
from src.domain.entities.fee_payment import FeePayment
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.value_objects.accounting_summary import AccountingSummary

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


def to_decimal(amount: Decimal | int | float | str) -> Decimal:
    """Convert an amount to Decimal through its string form.

    Going through ``str`` keeps ``0.1`` as ``Decimal("0.1")`` instead of the
    binary float expansion.
    """
    if isinstance(amount, Decimal):
        return amount
    return Decimal(str(amount))


def _sum(amounts: Iterable[Decimal | int | float]) -> Decimal:
    return sum((to_decimal(a) for a in amounts), _ZERO)


class FinancialAggregator:
    """Computes accounting totals and overdue state.

    Pure: no I/O apart from debug logging. ``now`` is injectable on every
    time-dependent call; the default clock returns the current UTC time.

    Dependencies (injected via constructor):
        - LoggerProtocol: Debug tracing of computed summaries
    """

    def __init__(
        self,
        logger: LoggerProtocol,
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize aggregator.

        Args:
            logger: Structured logger.
            clock: Source of "now" when a call omits it. Defaults to UTC now.
        """
        self._logger = logger
        self._clock = clock or (lambda: datetime.now(UTC))

    def now(self) -> datetime:
        """Current time from the injected clock."""
        return self._clock()

    def summarize(
        self,
        fees: Iterable[CaseFee],
        expenses: Iterable[CaseExpense],
        payments: Iterable[FeePayment],
    ) -> AccountingSummary:
        """Compute totals, balance and payment percentage.

        Every payment counts toward the paid total regardless of its status.
        Amounts are not validated; negative values are summed as given.

        Args:
            fees: Fees billed on the case.
            expenses: Expenses recharged on the case.
            payments: Payments received.

        Returns:
            AccountingSummary: Computed totals. All zero for empty input.

        Example:
            >>> summary = aggregator.summarize(
            ...     [CaseFee(amount=Decimal("1000"), due_date=due)],
            ...     [CaseExpense(amount=Decimal("200"), expense_date=spent)],
            ...     [FeePayment(amount=Decimal("420"))],
            ... )
            >>> summary.balance, summary.payment_percentage
            (Decimal('780'), 35)
        """
        total_fees = _sum(fee.amount for fee in fees)
        total_expenses = _sum(expense.amount for expense in expenses)
        total_payments = _sum(payment.amount for payment in payments)

        total_due = total_fees + total_expenses
        balance = total_due - total_payments

        summary = AccountingSummary(
            total_fees=total_fees,
            total_expenses=total_expenses,
            total_payments=total_payments,
            total_due=total_due,
            balance=balance,
            payment_percentage=self.payment_percentage(total_payments, total_due),
        )

        self._logger.debug(
            "accounting_summarized",
            total_due=str(summary.total_due),
            total_payments=str(summary.total_payments),
            balance=str(summary.balance),
            payment_percentage=summary.payment_percentage,
        )
        return summary

    @staticmethod
    def payment_percentage(
        total_payments: Decimal | int | float, total_due: Decimal | int | float
    ) -> int:
        """Share of the amount due already paid, as a whole percent.

        Args:
            total_payments: Amount paid.
            total_due: Amount due.

        Returns:
            int: Rounded half away from zero; 0 when total_due is not
            positive or either amount is not finite. Values above 100 are
            returned as is.
        """
        paid = to_decimal(total_payments)
        due = to_decimal(total_due)
        if not (paid.is_finite() and due.is_finite()) or due <= _ZERO:
            return 0
        ratio = paid / due * _HUNDRED
        return int(ratio.to_integral_value(rounding=ROUND_HALF_UP))

    def is_overdue(self, fee: CaseFee, now: datetime | None = None) -> bool:
        """Check whether a fee is past due.

        Args:
            fee: Fee to check.
            now: Evaluation time. Defaults to the aggregator's clock.

        Returns:
            bool: True if ``fee.due_date < now``. Equal is not overdue.
        """
        return fee.is_overdue(now if now is not None else self._clock())

    def overdue_fees(
        self, fees: Iterable[CaseFee], now: datetime | None = None
    ) -> list[CaseFee]:
        """Select the fees past due at ``now``, in input order."""
        at = now if now is not None else self._clock()
        return [fee for fee in fees if fee.is_overdue(at)]

    def overdue_total(
        self, fees: Iterable[CaseFee], now: datetime | None = None
    ) -> Decimal:
        """Sum the amounts of the fees past due at ``now``."""
        return _sum(fee.amount for fee in self.overdue_fees(fees, now))
