"""Accounting domain errors.

Error value constants for Result types, not exceptions.
"""


class AccountingError:
    """Accounting error constants."""

    ENTRIES_UNAVAILABLE = "Accounting entries could not be loaded"
    """A repository call failed while loading fees, expenses or payments."""
