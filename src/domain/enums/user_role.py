"""User roles known to the authorization core.

The backend sends the role as a free-form string. Only the office
administrator has meaning here: it bypasses every permission check. Any
other role string is an ordinary role governed by its permission profile.

Usage:
    from src.domain.enums import UserRole

    if subject.role == UserRole.OFFICE_ADMIN:
        ...
"""

from enum import Enum


class UserRole(str, Enum):
    """Roles assigned to office users.

    String Enum:
        Values match the backend's role strings exactly (PascalCase), so a
        raw role string compares equal to the member.
    """

    OFFICE_ADMIN = "OfficeAdmin"
    """Office owner. Bypasses every permission check, unconditionally."""

    EMPLOYEE = "Employee"
    """Staff member whose access comes from an assigned permission set."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: List of role values.
        """
        return [role.value for role in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a known role.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a known role.
        """
        return value in cls.values()
