"""Permission components for authorization decisions.

This module defines the Resource and Action enums the decider answers
questions about. A permission check is always a (resource, action) pair
(e.g., "cases:delete").

Usage:
    from src.domain.enums import Resource, Action

    allowed = decider.can(subject, Resource.CASES, Action.DELETE)
"""

from enum import Enum


class Resource(str, Enum):
    """Resources governed by a permission profile.

    Each resource maps to one or two integer fields of a PermissionProfile.

    String Enum:
        Inherits from str so backend payloads and call sites can pass plain
        strings. Values are lowercase.

    Encoding by Resource:
        4-bit mask (view/create/update/delete):
            - CLIENTS, SESSIONS, DOCUMENTS, FINANCE

        View presence field + 3-bit DML mask (create/update/delete):
            - CASES, TASKS
    """

    CASES = "cases"
    """Legal cases (view field + DML mask)."""

    CLIENTS = "clients"
    """Client records and their company employees."""

    SESSIONS = "sessions"
    """Court sessions and the calendar."""

    TASKS = "tasks"
    """Case tasks (view field + DML mask)."""

    DOCUMENTS = "documents"
    """Files, folders and the court directory."""

    FINANCE = "finance"
    """Fees, expenses and payments."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all resource values as strings.

        Returns:
            list[str]: List of resource values.
        """
        return [resource.value for resource in cls]

    def uses_dml_mask(self) -> bool:
        """Check whether this resource splits view from create/update/delete.

        Returns:
            bool: True for CASES and TASKS.
        """
        return self in (Resource.CASES, Resource.TASKS)


class Action(str, Enum):
    """Actions that can be performed on resources.

    Also used as the capability key of decoded permission bits, so
    ``bits[Action.UPDATE]`` reads the update bit.

    Action Semantics:
        VIEW: List, open and read
        CREATE: Add new records
        UPDATE: Edit existing records
        DELETE: Soft or hard delete, and restore
    """

    VIEW = "view"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"

    @classmethod
    def values(cls) -> list[str]:
        """Get all action values as strings.

        Returns:
            list[str]: List of action values.
        """
        return [action.value for action in cls]

    @classmethod
    def dml(cls) -> tuple["Action", ...]:
        """Get the data-manipulation actions (everything but VIEW).

        Returns:
            tuple[Action, ...]: CREATE, UPDATE, DELETE in bit order.
        """
        return (cls.CREATE, cls.UPDATE, cls.DELETE)
