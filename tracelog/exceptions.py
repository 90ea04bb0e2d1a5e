"""
Exception classes for the tracelog package.

All errors are raised synchronously at the call that caused them:
- invalid arguments fail before any state is touched
- malformed custom redaction patterns fail when they are added
- test assertions fail with the expected and actual counts
"""

from typing import Optional


class TracelogError(Exception):
    """Base exception for all tracelog errors."""
    pass


class InvalidArgumentError(TracelogError, ValueError):
    """Raised when a required argument is missing or None."""

    def __init__(self, argument: str, message: Optional[str] = None):
        """
        Initialize invalid argument error.

        Args:
            argument: Name of the offending argument
            message: Optional human-readable message
        """
        self.argument = argument
        super().__init__(message or f"Argument '{argument}' is required")


class InvalidPatternError(TracelogError, ValueError):
    """Raised when a custom redaction pattern cannot be compiled."""

    def __init__(self, pattern: str, reason: str):
        """
        Initialize invalid pattern error.

        Args:
            pattern: The pattern that failed to compile
            reason: Compiler error message
        """
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid redaction pattern {pattern!r}: {reason}")


class ConfigurationError(TracelogError):
    """Raised when configuration validation fails."""
    pass


class LogAssertionError(AssertionError):
    """Raised by the testing helpers when captured log events do not match."""
    pass


def require(value, argument: str):
    """
    Fail fast when a required argument is None.

    Args:
        value: Value to check
        argument: Argument name used in the error message

    Returns:
        The value unchanged

    Raises:
        InvalidArgumentError: If value is None
    """
    if value is None:
        raise InvalidArgumentError(argument)
    return value
