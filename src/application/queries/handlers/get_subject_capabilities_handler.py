"""GetSubjectCapabilities query handler.

Loads a user's permission profile and evaluates the full capability matrix,
plus display labels for each profile field (settings and profile screens).

A profile that cannot be loaded is a Failure. The handler never falls back
to an empty profile silently, and never to a permissive one.
"""

from dataclasses import dataclass, field

from src.application.queries.permission_queries import GetSubjectCapabilities
from src.application.services.authorization_decider import AuthorizationDecider
from src.core.config import settings
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities.permission_profile import PermissionProfile
from src.domain.entities.subject import Subject
from src.domain.enums.view_level import ViewLevel
from src.domain.errors.authorization_error import PermissionProfileError
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.permission_profile_provider import (
    PermissionProfileProvider,
)
from src.domain.value_objects.dml_permission_code import DmlPermissionCode
from src.domain.value_objects.permission_code import PermissionCode


@dataclass
class SubjectCapabilitiesResult:
    """Capability matrix DTO.

    Attributes:
        user_id: User evaluated.
        role: Role evaluated.
        is_office_admin: Whether the role bypassed every check.
        capabilities: resource value -> action value -> allowed.
        labels: profile field name -> human-readable description.
    """

    user_id: int
    role: str
    is_office_admin: bool
    capabilities: dict[str, dict[str, bool]]
    labels: dict[str, str] = field(default_factory=dict)


class GetSubjectCapabilitiesHandler:
    """Handler for GetSubjectCapabilities query.

    Dependencies (injected via constructor):
        - PermissionProfileProvider: Current profile of the user
        - AuthorizationDecider: Per-pair decisions
        - LoggerProtocol: Missing-profile warnings
    """

    def __init__(
        self,
        profile_provider: PermissionProfileProvider,
        decider: AuthorizationDecider,
        logger: LoggerProtocol,
        *,
        none_label: str | None = None,
        separator: str | None = None,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            profile_provider: Source of permission profiles.
            decider: Authorization decider.
            logger: Structured logger.
            none_label: Label for values granting nothing. Defaults to
                settings.permission_none_label.
            separator: Label separator. Defaults to
                settings.permission_label_separator.
        """
        self._profile_provider = profile_provider
        self._decider = decider
        self._logger = logger
        self._none_label = none_label or settings.permission_none_label
        self._separator = separator or settings.permission_label_separator

    async def handle(
        self, query: GetSubjectCapabilities
    ) -> Result[SubjectCapabilitiesResult, NotFoundError]:
        """Handle GetSubjectCapabilities query.

        Args:
            query: User id and session role.

        Returns:
            Success(SubjectCapabilitiesResult): Matrix computed.
            Failure(NotFoundError): Provider returned no profile.
        """
        profile = await self._profile_provider.load_permission_profile(
            query.user_id
        )

        if profile is None:
            self._logger.warning(
                "permission_profile_missing",
                user_id=query.user_id,
                role=query.role,
            )
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.PERMISSION_PROFILE_NOT_FOUND,
                    message=PermissionProfileError.PROFILE_NOT_FOUND,
                    resource_type="PermissionProfile",
                    resource_id=str(query.user_id),
                )
            )

        subject = Subject(role=query.role, profile=profile, user_id=query.user_id)
        matrix = self._decider.capabilities(subject)

        dto = SubjectCapabilitiesResult(
            user_id=query.user_id,
            role=query.role,
            is_office_admin=subject.is_office_admin(self._decider.admin_role),
            capabilities={
                resource.value: {
                    action.value: allowed for action, allowed in actions.items()
                }
                for resource, actions in matrix.items()
            },
            labels=self._labels(profile),
        )

        return Success(value=dto)

    def _labels(self, profile: PermissionProfile) -> dict[str, str]:
        mask_label = {"none_label": self._none_label, "separator": self._separator}
        return {
            "document_permissions": PermissionCode.label(
                profile.document_permissions, **mask_label
            ),
            "client_permissions": PermissionCode.label(
                profile.client_permissions, **mask_label
            ),
            "session_permission": PermissionCode.label(
                profile.session_permission, **mask_label
            ),
            "finance_permission": PermissionCode.label(
                profile.finance_permission, **mask_label
            ),
            "view_case_permissions": ViewLevel.label_for(
                profile.view_case_permissions
            ),
            "dml_case_permissions": DmlPermissionCode.label(
                profile.dml_case_permissions, **mask_label
            ),
            "view_task_permissions": ViewLevel.label_for(
                profile.view_task_permissions
            ),
            "dml_task_permissions": DmlPermissionCode.label(
                profile.dml_task_permissions, **mask_label
            ),
        }
