"""Domain layer - Pure business logic.

This layer contains the permission model and the accounting entities. It has
NO dependencies on any framework or infrastructure - it is pure Python.

Structure:
- entities/: PermissionProfile, PermissionSet, Subject, accounting entries
- value_objects/: Permission mask codecs, AccountingSummary
- enums/: Resource, Action, UserRole, ViewLevel, payment enums
- errors/: Raised and returned domain errors
- protocols/: Ports (profile provider, accounting repository, logger)
"""
