"""Query handler dependency factories.

Handlers are cheap to build and receive their ports from the caller: the
transport that fetches profiles and accounting entries lives outside this
package.

Usage:
    handler = get_get_case_accounting_summary_handler(accounting_repo)
    result = await handler.handle(GetCaseAccountingSummary(case_id=42))
"""

from typing import TYPE_CHECKING

from src.core.container.authorization import (
    get_authorization_decider,
    get_financial_aggregator,
)
from src.core.container.infrastructure import get_logger

if TYPE_CHECKING:
    from src.application.queries.handlers.get_case_accounting_summary_handler import (
        GetCaseAccountingSummaryHandler,
    )
    from src.application.queries.handlers.get_subject_capabilities_handler import (
        GetSubjectCapabilitiesHandler,
    )
    from src.domain.protocols.accounting_entry_repository import (
        AccountingEntryRepository,
    )
    from src.domain.protocols.permission_profile_provider import (
        PermissionProfileProvider,
    )


# ============================================================================
# Query Handler Factories
# ============================================================================


def get_get_case_accounting_summary_handler(
    accounting_repo: "AccountingEntryRepository",
) -> "GetCaseAccountingSummaryHandler":
    """Get GetCaseAccountingSummary query handler.

    Args:
        accounting_repo: Source of the case's fees, expenses and payments.

    Returns:
        GetCaseAccountingSummaryHandler wired with the shared aggregator.
    """
    from src.application.queries.handlers.get_case_accounting_summary_handler import (
        GetCaseAccountingSummaryHandler,
    )

    return GetCaseAccountingSummaryHandler(
        accounting_repo=accounting_repo,
        aggregator=get_financial_aggregator(),
        logger=get_logger(),
    )


def get_get_subject_capabilities_handler(
    profile_provider: "PermissionProfileProvider",
) -> "GetSubjectCapabilitiesHandler":
    """Get GetSubjectCapabilities query handler.

    Args:
        profile_provider: Source of users' permission profiles.

    Returns:
        GetSubjectCapabilitiesHandler wired with the shared decider.
    """
    from src.application.queries.handlers.get_subject_capabilities_handler import (
        GetSubjectCapabilitiesHandler,
    )

    return GetSubjectCapabilitiesHandler(
        profile_provider=profile_provider,
        decider=get_authorization_decider(),
        logger=get_logger(),
    )
