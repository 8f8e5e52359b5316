"""View levels for the case and task view fields.

The backend stores the case/task view field as a level from 0 to 3. The
decider only uses it as a presence test (``> 0``); the levels exist so
settings screens can describe what a value means.
"""

from enum import IntEnum


class ViewLevel(IntEnum):
    """How much of the case/task list a user may see."""

    NONE = 0
    """No access."""

    METADATA = 1
    """Descriptive data only."""

    ASSIGNED = 2
    """Records assigned to the user."""

    ALL = 3
    """Every record in the office."""

    @property
    def label(self) -> str:
        """Human-readable description of the level."""
        return _VIEW_LEVEL_LABELS[self]

    @classmethod
    def label_for(cls, value: int) -> str:
        """Describe a raw view field value.

        Args:
            value: Integer from the backend.

        Returns:
            str: The level's label, or "—" for values outside 0..3.
        """
        try:
            return cls(value).label
        except ValueError:
            return "—"


_VIEW_LEVEL_LABELS: dict[ViewLevel, str] = {
    ViewLevel.NONE: "No access",
    ViewLevel.METADATA: "View metadata",
    ViewLevel.ASSIGNED: "View assigned",
    ViewLevel.ALL: "View all",
}
