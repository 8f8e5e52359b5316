"""LoggerProtocol definition for structured logging.

Backend-agnostic port for structured logs. Application services receive a
logger through their constructor; infrastructure provides the adapter.

Log Levels:
    - DEBUG: Individual authorization decisions, computed summaries
    - INFO: Normal operational events
    - WARNING: Degraded data (e.g., a profile that could not be loaded)
    - ERROR: Operation failed or a call site is misconfigured
    - CRITICAL: Unrecoverable failure

Security:
    - NEVER log tokens or credentials
    - Log user ids and resource/action names, not whole profiles

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.debug("authorization_decided", resource="cases", action="view", allowed=True)

    scoped = logger.bind(user_id=subject.user_id)
    scoped.warning("permission_profile_missing")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls are structured: an event message plus key-value
    context.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Event name or short message (use context for values).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name or short message.
            error: Optional exception instance; implementations add
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message with optional exception details."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger is unchanged.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
