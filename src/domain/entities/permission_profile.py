"""PermissionProfile domain entity.

One integer per governed resource, exactly as the backend stores them on a
permission set. The profile is a snapshot: it is never patched field by
field. When permissions change the caller loads a new profile and swaps it
in whole.

Safe Default:
    Every field defaults to 0 (no access). A profile that failed to load, or
    a payload missing a field, can only ever deny.

Field Encodings:
    document_permissions, client_permissions, session_permission,
    finance_permission:
        4-bit mask, see PermissionCode.
    view_case_permissions, view_task_permissions:
        View level (0-3). Authorization only tests ``> 0``.
    dml_case_permissions, dml_task_permissions:
        3-bit DML mask, see DmlPermissionCode.

Usage:
    profile = PermissionProfile.from_payload(response_json)
    profile.client_permissions  # 9
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, Self

# Backend (camelCase) key for each profile field
PAYLOAD_KEYS: dict[str, str] = {
    "document_permissions": "documentPermissions",
    "client_permissions": "clientPermissions",
    "session_permission": "sessionPermission",
    "finance_permission": "financePermission",
    "view_case_permissions": "viewCasePermissions",
    "dml_case_permissions": "dmlCasePermissions",
    "view_task_permissions": "viewTaskPermissions",
    "dml_task_permissions": "dmlTaskPermissions",
}


@dataclass(frozen=True, slots=True, kw_only=True)
class PermissionProfile:
    """Per-resource permission values for one subject.

    Immutable and always fully populated. Values are stored as received;
    codecs clamp when decoding, so out-of-range integers are tolerated here.

    Attributes:
        document_permissions: 4-bit mask for documents.
        client_permissions: 4-bit mask for clients.
        session_permission: 4-bit mask for sessions.
        finance_permission: 4-bit mask for finance.
        view_case_permissions: Case view level (presence test).
        dml_case_permissions: 3-bit DML mask for cases.
        view_task_permissions: Task view level (presence test).
        dml_task_permissions: 3-bit DML mask for tasks.
    """

    document_permissions: int = 0
    client_permissions: int = 0
    session_permission: int = 0
    finance_permission: int = 0
    view_case_permissions: int = 0
    dml_case_permissions: int = 0
    view_task_permissions: int = 0
    dml_task_permissions: int = 0

    @classmethod
    def empty(cls) -> Self:
        """Create the fully restrictive profile (every field 0).

        Returns:
            PermissionProfile: Profile that grants nothing.
        """
        return cls()

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Self:
        """Build a profile from a backend permission payload.

        Accepts the camelCase keys the backend uses. Missing or null keys
        fall back to 0. Unrelated keys (id, name, createdAt) are ignored.

        Args:
            payload: Decoded JSON object.

        Returns:
            PermissionProfile: New profile.

        Example:
            >>> PermissionProfile.from_payload({"clientPermissions": 9})
            PermissionProfile(document_permissions=0, client_permissions=9, ...)
        """
        values: dict[str, int] = {}
        for field_name, key in PAYLOAD_KEYS.items():
            raw = payload.get(key)
            values[field_name] = int(raw) if raw is not None else 0
        return cls(**values)

    def to_payload(self) -> dict[str, int]:
        """Serialize to the backend's camelCase keys.

        Returns:
            dict[str, int]: Payload suitable for create/update requests.
        """
        return {PAYLOAD_KEYS[f.name]: getattr(self, f.name) for f in fields(self)}

    def is_empty(self) -> bool:
        """Check whether every field is 0."""
        return all(getattr(self, f.name) == 0 for f in fields(self))
