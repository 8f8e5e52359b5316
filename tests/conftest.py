"""Shared pytest fixtures.

Provides:
1. A logger double implementing LoggerProtocol (records calls)
2. Profile and subject factories
3. A fixed evaluation time for overdue checks
"""

from datetime import UTC, datetime
from unittest.mock import MagicMock

import pytest

from src.domain.entities.permission_profile import PermissionProfile
from src.domain.entities.subject import Subject
from src.domain.enums.user_role import UserRole
from src.domain.protocols.logger_protocol import LoggerProtocol


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double; assert on .debug/.error/... calls."""
    return MagicMock(spec=LoggerProtocol)


@pytest.fixture
def fixed_now() -> datetime:
    """Evaluation time used by overdue tests."""
    return datetime(2025, 6, 15, 12, 0, 0, tzinfo=UTC)


def create_profile(**overrides: int) -> PermissionProfile:
    """Helper to create a PermissionProfile for testing.

    Args:
        **overrides: Field values; everything else is 0.

    Usage:
        profile = create_profile(client_permissions=9)
    """
    return PermissionProfile(**overrides)


def create_subject(
    role: str = UserRole.EMPLOYEE.value,
    user_id: int | None = 7,
    **profile_fields: int,
) -> Subject:
    """Helper to create a Subject for testing.

    Args:
        role: Session role (default: Employee).
        user_id: Backend user id.
        **profile_fields: Profile field values; everything else is 0.

    Usage:
        admin = create_subject(role="OfficeAdmin")
        clerk = create_subject(view_case_permissions=1, dml_case_permissions=1)
    """
    return Subject(
        role=role,
        profile=create_profile(**profile_fields),
        user_id=user_id,
    )
