"""Queries - Read operations that fetch data.

Queries represent a request for information. They are immutable dataclasses
with question-like names (GetCaseAccountingSummary, GetSubjectCapabilities).

Each query has a corresponding handler that fetches and returns the requested
data. Queries NEVER change state.
"""

from src.application.queries.accounting_queries import GetCaseAccountingSummary
from src.application.queries.permission_queries import GetSubjectCapabilities

__all__ = [
    "GetCaseAccountingSummary",
    "GetSubjectCapabilities",
]
