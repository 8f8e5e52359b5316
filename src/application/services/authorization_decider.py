"""Authorization decision service.

The single authority answering "may subject S perform action A on resource
R?" for the office dashboard. Every protected button, menu entry and
outgoing mutation asks here first.

Decision Order:
    1. Office administrator: allowed, for every resource and action. Runs
       first and nothing overrides it.
    2. Resource and action are coerced to their enums. Anything outside the
       fixed sets raises UnknownResourceOrActionError.
    3. Cases and tasks: VIEW is a presence test on the view field
       (``> 0``); CREATE/UPDATE/DELETE read the DML mask.
    4. Clients, sessions, documents and finance: all four actions read the
       resource's 4-bit mask.

Advisory Only:
    A denial here hides an affordance. Enforcement belongs to the backend;
    never treat a True from this service as a security boundary.

Usage:
    decider = AuthorizationDecider(logger=get_logger())

    if decider.can(subject, Resource.CASES, Action.DELETE):
        show_delete_button()

    matrix = decider.capabilities(subject)
    matrix[Resource.FINANCE][Action.VIEW]
"""

from collections.abc import Callable
from enum import Enum

from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError
from src.core.result import Failure, Result, Success
from src.domain.entities.permission_profile import PermissionProfile
from src.domain.entities.subject import Subject
from src.domain.enums.permission import Action, Resource
from src.domain.enums.user_role import UserRole
from src.domain.errors.authorization_error import (
    PermissionProfileError,
    UnknownResourceOrActionError,
)
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.value_objects.dml_permission_code import DmlPermissionCode
from src.domain.value_objects.permission_code import PermissionCode

# Profile field holding the 4-bit mask of each mask-governed resource
_MASK_FIELDS: dict[Resource, Callable[[PermissionProfile], int]] = {
    Resource.CLIENTS: lambda p: p.client_permissions,
    Resource.SESSIONS: lambda p: p.session_permission,
    Resource.DOCUMENTS: lambda p: p.document_permissions,
    Resource.FINANCE: lambda p: p.finance_permission,
}

# (view field, DML field) of each resource split into view + DML
_SPLIT_FIELDS: dict[
    Resource,
    tuple[Callable[[PermissionProfile], int], Callable[[PermissionProfile], int]],
] = {
    Resource.CASES: (
        lambda p: p.view_case_permissions,
        lambda p: p.dml_case_permissions,
    ),
    Resource.TASKS: (
        lambda p: p.view_task_permissions,
        lambda p: p.dml_task_permissions,
    ),
}


class AuthorizationDecider:
    """Answers permission questions for a subject.

    Stateless apart from its configuration: no caching, no I/O beyond
    debug logging, and inputs are never mutated. Safe to share between
    concurrent callers.

    Dependencies (injected via constructor):
        - LoggerProtocol: Decision tracing at DEBUG level
    """

    def __init__(
        self,
        logger: LoggerProtocol,
        *,
        admin_role: str = UserRole.OFFICE_ADMIN.value,
    ) -> None:
        """Initialize decider.

        Args:
            logger: Structured logger.
            admin_role: Role name that bypasses every check.
        """
        self._logger = logger
        self._admin_role = admin_role

    @property
    def admin_role(self) -> str:
        """Role name that bypasses every check."""
        return self._admin_role

    def can(
        self,
        subject: Subject,
        resource: Resource | str,
        action: Action | str,
    ) -> bool:
        """Decide whether the subject may perform the action on the resource.

        Args:
            subject: Acting user (role + profile).
            resource: Resource member or its string value.
            action: Action member or its string value.

        Returns:
            bool: True if allowed.

        Raises:
            UnknownResourceOrActionError: If resource or action is not one of
                the fixed values and the subject is not the administrator.

        Example:
            >>> decider.can(Subject(role="OfficeAdmin"), "finance", "delete")
            True
        """
        if subject.is_office_admin(self._admin_role):
            self._logger.debug(
                "authorization_decided",
                resource=_raw(resource),
                action=_raw(action),
                allowed=True,
                admin_bypass=True,
            )
            return True

        resource_, action_ = self._coerce(resource, action)
        allowed = self._decide(subject.profile, resource_, action_)

        self._logger.debug(
            "authorization_decided",
            user_id=subject.user_id,
            resource=resource_.value,
            action=action_.value,
            allowed=allowed,
            admin_bypass=False,
        )
        return allowed

    def capabilities(self, subject: Subject) -> dict[Resource, dict[Action, bool]]:
        """Evaluate every (resource, action) pair for the subject.

        Useful for navigation menus and screens that toggle several
        affordances at once.

        Args:
            subject: Acting user.

        Returns:
            dict: resource -> action -> allowed, covering all 24 pairs.
        """
        return {
            resource: {action: self.can(subject, resource, action) for action in Action}
            for resource in Resource
        }

    def require(
        self,
        subject: Subject,
        resource: Resource | str,
        action: Action | str,
    ) -> Result[None, AuthorizationError]:
        """Gate a request on a permission.

        Args:
            subject: Acting user.
            resource: Resource member or its string value.
            action: Action member or its string value.

        Returns:
            Success(None): Allowed.
            Failure(AuthorizationError): Denied.

        Raises:
            UnknownResourceOrActionError: Same contract as can().
        """
        if self.can(subject, resource, action):
            return Success(value=None)

        resource_, action_ = self._coerce(resource, action)
        return Failure(
            error=AuthorizationError(
                code=ErrorCode.PERMISSION_DENIED,
                message=PermissionProfileError.ACCESS_DENIED,
                required_permission=f"{resource_.value}:{action_.value}",
            )
        )

    def _coerce(
        self, resource: Resource | str, action: Action | str
    ) -> tuple[Resource, Action]:
        try:
            return Resource(resource), Action(action)
        except ValueError as e:
            error = UnknownResourceOrActionError(resource, action)
            self._logger.error(
                "unknown_permission_check",
                error=error,
                resource=_raw(resource),
                action=_raw(action),
            )
            raise error from e

    @staticmethod
    def _decide(profile: PermissionProfile, resource: Resource, action: Action) -> bool:
        if resource in _SPLIT_FIELDS:
            view_field, dml_field = _SPLIT_FIELDS[resource]
            if action is Action.VIEW:
                return view_field(profile) > 0
            return DmlPermissionCode.has_capability(dml_field(profile), action)

        return PermissionCode.has_capability(_MASK_FIELDS[resource](profile), action)


def _raw(value: Enum | str) -> str:
    return value.value if isinstance(value, Enum) else str(value)
