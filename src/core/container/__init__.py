"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_authorization_decider

The container is organized into modules by concern:
- infrastructure: Logging
- authorization: Authorization decider and financial aggregator
- data_handlers: Query handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import get_logger

# Services
from src.core.container.authorization import (
    get_authorization_decider,
    get_financial_aggregator,
)

# Query handlers
from src.core.container.data_handlers import (
    get_get_case_accounting_summary_handler,
    get_get_subject_capabilities_handler,
)

__all__ = [
    # Infrastructure
    "get_logger",
    # Services
    "get_authorization_decider",
    "get_financial_aggregator",
    # Query handlers
    "get_get_case_accounting_summary_handler",
    "get_get_subject_capabilities_handler",
]
