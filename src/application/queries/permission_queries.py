"""Permission queries (CQRS read operations)."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class GetSubjectCapabilities:
    """Get the full capability matrix for a user.

    Loads the user's current permission profile and evaluates every
    resource/action pair. Used to build navigation menus after login or
    after the user's permission set changes.

    Attributes:
        user_id: User whose profile to load.
        role: Role from the authenticated session.

    Example:
        >>> query = GetSubjectCapabilities(user_id=7, role="Employee")
        >>> result = await handler.handle(query)
    """

    user_id: int
    role: str
