"""Permission request and response schemas.

Pydantic schemas for the backend's permission payloads. Includes:
- Profile schema (camelCase backend keys, range validation)
- Permission set request schema (settings page create/update form)
- Capability matrix response schema

Unlike PermissionProfile.from_payload, which tolerates any integer and
leaves clamping to the codecs, these schemas reject out-of-range values.
They guard what a user submits, not what the backend sends back.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.application.queries.handlers.get_subject_capabilities_handler import (
    SubjectCapabilitiesResult,
)
from src.domain.entities.permission_profile import PermissionProfile
from src.domain.value_objects.dml_permission_code import DmlPermissionCode
from src.domain.value_objects.permission_code import PermissionCode

_MASK_MAX = PermissionCode.MAX_VALUE
_DML_MAX = DmlPermissionCode.MAX_VALUE
_VIEW_MAX = 3


# =============================================================================
# Profile
# =============================================================================


class PermissionProfileSchema(BaseModel):
    """The eight permission values of a profile.

    Accepts backend camelCase keys or Python field names. Missing fields
    default to 0 (no access).
    """

    document_permissions: int = Field(
        default=0,
        ge=0,
        le=_MASK_MAX,
        alias="documentPermissions",
        description="4-bit mask for documents (0-15)",
    )
    client_permissions: int = Field(
        default=0,
        ge=0,
        le=_MASK_MAX,
        alias="clientPermissions",
        description="4-bit mask for clients (0-15)",
    )
    session_permission: int = Field(
        default=0,
        ge=0,
        le=_MASK_MAX,
        alias="sessionPermission",
        description="4-bit mask for sessions (0-15)",
    )
    finance_permission: int = Field(
        default=0,
        ge=0,
        le=_MASK_MAX,
        alias="financePermission",
        description="4-bit mask for finance (0-15)",
    )
    view_case_permissions: int = Field(
        default=0,
        ge=0,
        le=_VIEW_MAX,
        alias="viewCasePermissions",
        description="Case view level (0-3)",
    )
    dml_case_permissions: int = Field(
        default=0,
        ge=0,
        le=_DML_MAX,
        alias="dmlCasePermissions",
        description="3-bit create/update/delete mask for cases (0-7)",
    )
    view_task_permissions: int = Field(
        default=0,
        ge=0,
        le=_VIEW_MAX,
        alias="viewTaskPermissions",
        description="Task view level (0-3)",
    )
    dml_task_permissions: int = Field(
        default=0,
        ge=0,
        le=_DML_MAX,
        alias="dmlTaskPermissions",
        description="3-bit create/update/delete mask for tasks (0-7)",
    )

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "documentPermissions": 15,
                "clientPermissions": 9,
                "sessionPermission": 8,
                "financePermission": 0,
                "viewCasePermissions": 2,
                "dmlCasePermissions": 3,
                "viewTaskPermissions": 1,
                "dmlTaskPermissions": 0,
            }
        },
    )

    def to_entity(self) -> PermissionProfile:
        """Convert to the domain profile.

        Returns:
            PermissionProfile with the validated values.
        """
        return PermissionProfile(
            document_permissions=self.document_permissions,
            client_permissions=self.client_permissions,
            session_permission=self.session_permission,
            finance_permission=self.finance_permission,
            view_case_permissions=self.view_case_permissions,
            dml_case_permissions=self.dml_case_permissions,
            view_task_permissions=self.view_task_permissions,
            dml_task_permissions=self.dml_task_permissions,
        )


# =============================================================================
# Permission Set
# =============================================================================


class PermissionSetRequest(PermissionProfileSchema):
    """Request schema for creating or updating a permission set.

    POST /api/Permissions
    PUT /api/Permissions/{id}
    """

    name: str = Field(
        ...,
        min_length=2,
        description="Permission set name (at least 2 characters)",
        examples=["Junior lawyer"],
    )

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        """Reject names that are only whitespace.

        Args:
            v: Submitted name.

        Returns:
            Name without surrounding whitespace.

        Raises:
            ValueError: If fewer than 2 characters remain.
        """
        stripped = v.strip()
        if len(stripped) < 2:
            raise ValueError("Name must be at least 2 characters")
        return stripped


# =============================================================================
# Response Schemas
# =============================================================================


class SubjectCapabilitiesResponse(BaseModel):
    """Capability matrix for a user.

    Attributes:
        user_id: User evaluated.
        role: Session role.
        is_office_admin: Whether the role bypassed every check.
        capabilities: resource -> action -> allowed.
        labels: profile field -> description.
    """

    user_id: int = Field(..., description="User identifier")
    role: str = Field(..., description="Session role", examples=["Employee"])
    is_office_admin: bool = Field(..., description="Role bypasses all checks")
    capabilities: dict[str, dict[str, bool]] = Field(
        ..., description="resource -> action -> allowed"
    )
    labels: dict[str, str] = Field(
        default_factory=dict, description="Human-readable profile values"
    )

    @classmethod
    def from_dto(cls, dto: SubjectCapabilitiesResult) -> "SubjectCapabilitiesResponse":
        """Convert application DTO to response schema.

        Args:
            dto: SubjectCapabilitiesResult from handler.

        Returns:
            SubjectCapabilitiesResponse.
        """
        return cls(
            user_id=dto.user_id,
            role=dto.role,
            is_office_admin=dto.is_office_admin,
            capabilities=dto.capabilities,
            labels=dto.labels,
        )
