"""Result types for railway-oriented programming.

Query handlers return a Result instead of raising for data-dependent
failures (a profile that could not be loaded, a repository that is down).
Callers branch on the variant explicitly.

Usage:
    result = await handler.handle(GetSubjectCapabilities(user_id=7, role="Lawyer"))
    match result:
        case Success(value=value):
            render(value.capabilities)
        case Failure(error=error):
            show_error(error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
Result: TypeAlias = Success[T] | Failure[E]
