"""PermissionProfileProvider protocol.

Port through which the core obtains a user's permission profile. The real
implementation fetches it from the office backend; that transport is not
part of this package.
"""

from typing import Protocol

from src.domain.entities.permission_profile import PermissionProfile


class PermissionProfileProvider(Protocol):
    """Permission profile source (port).

    This is a Protocol (not ABC) for structural typing.

    Example Implementation:
        >>> class BackendPermissionProfileProvider:
        ...     async def load_permission_profile(
        ...         self, user_id: int
        ...     ) -> PermissionProfile | None:
        ...         payload = await client.get(f"/Permissions/user/{user_id}")
        ...         return PermissionProfile.from_payload(payload)
    """

    async def load_permission_profile(self, user_id: int) -> PermissionProfile | None:
        """Load the current profile for a user.

        Args:
            user_id: Backend user identifier.

        Returns:
            The user's profile, or None if the user has no permission set.
            Callers must treat None as no access.
        """
        ...
