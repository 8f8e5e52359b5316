"""Runtime environment types.

Used by Settings to pick environment-specific behavior, most visibly the
log renderer chosen by the container.

Environments:
- DEVELOPMENT: Local work, colored console logs
- TESTING: Test suite runs, JSON logs
- CI: Continuous integration, JSON logs
- PRODUCTION: Embedded in a deployed dashboard backend
"""

from enum import Enum


class Environment(str, Enum):
    """Runtime environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
