"""Authorization dependency factories.

The permission decider is stateless, so one instance is shared by the whole
application. Its administrator role comes from settings.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import settings
from src.core.container.infrastructure import get_logger

if TYPE_CHECKING:
    from src.application.services.authorization_decider import AuthorizationDecider
    from src.application.services.financial_aggregator import FinancialAggregator


# ============================================================================
# Services (Singletons)
# ============================================================================


@lru_cache()
def get_authorization_decider() -> "AuthorizationDecider":
    """Get authorization decider singleton (app-scoped).

    Returns:
        AuthorizationDecider configured with settings.office_admin_role.

    Usage:
        decider = get_authorization_decider()
        if decider.can(subject, Resource.CASES, Action.VIEW):
            ...
    """
    from src.application.services.authorization_decider import (
        AuthorizationDecider,
    )

    return AuthorizationDecider(
        logger=get_logger(),
        admin_role=settings.office_admin_role,
    )


@lru_cache()
def get_financial_aggregator() -> "FinancialAggregator":
    """Get financial aggregator singleton (app-scoped).

    Returns:
        FinancialAggregator using the real UTC clock.
    """
    from src.application.services.financial_aggregator import FinancialAggregator

    return FinancialAggregator(logger=get_logger())
