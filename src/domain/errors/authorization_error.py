"""Authorization domain errors.

UnknownResourceOrActionError is raised, not returned: asking the decider
about a resource or action outside the fixed sets is a defect at the call
site, not bad data. Like CurrencyMismatchError for money, it subclasses
ValueError.

Usage:
    from src.domain.errors import UnknownResourceOrActionError

    with pytest.raises(UnknownResourceOrActionError):
        decider.can(subject, "invoices", "view")
"""

from src.core.enums import ErrorCode


class UnknownResourceOrActionError(ValueError):
    """Raised when a permission check names an unknown resource or action.

    Attributes:
        resource: Resource as passed by the caller.
        action: Action as passed by the caller.
        code: Always ErrorCode.UNKNOWN_RESOURCE_OR_ACTION.
    """

    code = ErrorCode.UNKNOWN_RESOURCE_OR_ACTION

    def __init__(self, resource: object, action: object) -> None:
        """Initialize unknown resource/action error.

        Args:
            resource: Resource as passed by the caller.
            action: Action as passed by the caller.
        """
        super().__init__(f"Unknown permission check: {resource!r}:{action!r}")
        self.resource = resource
        self.action = action


class PermissionProfileError:
    """Permission error constants.

    Used in Result types for permission lookups that fail on data rather
    than on a programming mistake.
    """

    PROFILE_NOT_FOUND = "Permission profile could not be loaded"
    """Provider returned nothing for the user. Treated as no access."""

    ACCESS_DENIED = "You do not have permission to perform this action"
    """Subject lacks the capability."""
