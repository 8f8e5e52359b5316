"""PermissionSet domain entity.

A named permission profile stored by the backend and assigned to users
(the "permissions" settings page lists these).
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Self

from src.domain.entities.permission_profile import PermissionProfile


@dataclass(frozen=True, slots=True, kw_only=True)
class PermissionSet:
    """Named, persisted permission profile.

    Attributes:
        id: Backend identifier.
        name: Display name (e.g. "Junior lawyer").
        profile: The eight permission values.
        created_at: When the set was created, if known.
    """

    id: int
    name: str
    profile: PermissionProfile = field(default_factory=PermissionProfile.empty)
    created_at: datetime | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Self:
        """Build a permission set from a backend detail payload.

        Args:
            payload: Decoded JSON with id, name, createdAt and the eight
                permission keys.

        Returns:
            PermissionSet: New entity.
        """
        created_at = payload.get("createdAt")
        return cls(
            id=int(payload["id"]),
            name=str(payload["name"]),
            profile=PermissionProfile.from_payload(payload),
            created_at=(
                datetime.fromisoformat(created_at) if created_at else None
            ),
        )
