"""Subject domain entity.

The acting principal of an authorization question: a logged-in user with a
role and a permission profile. Passed explicitly to every decider call
instead of being read from ambient state, so a decision can never use a
profile that belongs to a previous login.
"""

from dataclasses import dataclass, field

from src.domain.entities.permission_profile import PermissionProfile
from src.domain.enums.user_role import UserRole


@dataclass(frozen=True, slots=True, kw_only=True)
class Subject:
    """User asking for access.

    Attributes:
        role: Role string from the authenticated session.
        profile: Permission profile loaded for the user. Ignored entirely
            when the role is the administrator role.
        user_id: Backend user identifier, if known.
        name: Display name, if known.
    """

    role: str
    profile: PermissionProfile = field(default_factory=PermissionProfile.empty)
    user_id: int | None = None
    name: str | None = None

    def is_office_admin(self, admin_role: str = UserRole.OFFICE_ADMIN.value) -> bool:
        """Check whether the subject holds the bypass role.

        Args:
            admin_role: Role name that bypasses permission checks.

        Returns:
            bool: True if role matches exactly (case-sensitive).
        """
        return self.role == admin_role
