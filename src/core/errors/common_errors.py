"""Common error classes used across all domains and layers.

Error Types:
- NotFoundError: Something the caller needs could not be loaded
- AuthorizationError: The subject lacks a capability

Usage:
    from src.core.errors import AuthorizationError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(AuthorizationError(
        code=ErrorCode.PERMISSION_DENIED,
        message="Cannot delete cases",
        required_permission="cases:delete",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource (PermissionProfile, Case, etc.).
        resource_id: ID of the resource that was not found.
        details: Additional context.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure (no permission).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        required_permission: Permission that was required ("resource:action").
        details: Additional context.
    """

    required_permission: str | None = None
