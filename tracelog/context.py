"""
Request scoped context values.

Correlation and request ids are kept in context variables so that each
inbound request, and every task it spawns while it is being handled, sees
only its own value. asyncio tasks and anyio task groups copy the current
context when they are created, so a value set by middleware before calling
the next stage is visible downstream and invisible to sibling requests.

Usage:
    # In middleware (request start)
    correlation_id_context.set(request.headers.get("X-Correlation-ID") or generate_id())

    # Anywhere during the request
    correlation_id = get_correlation_id()
"""

from contextvars import ContextVar, Token
from typing import Optional
from uuid import uuid4


class ScopedContextValue:
    """An optional string bound to the current execution context."""

    __slots__ = ("name", "_var")

    def __init__(self, name: str):
        """
        Initialize the scoped value.

        Args:
            name: Name of the underlying context variable
        """
        self.name = name
        self._var: ContextVar[Optional[str]] = ContextVar(name, default=None)

    def get(self) -> Optional[str]:
        """Get the value for the current context, or None if unset."""
        return self._var.get()

    def set(self, value: Optional[str]) -> Token:
        """
        Set the value for the current context.

        Args:
            value: Value to bind, or None to clear

        Returns:
            Token that can be passed to reset()
        """
        return self._var.set(value)

    def reset(self, token: Token) -> None:
        """Restore the value that was current before the matching set()."""
        self._var.reset(token)

    def __repr__(self) -> str:
        return f"ScopedContextValue({self.name!r}, value={self.get()!r})"


correlation_id_context = ScopedContextValue("correlation_id")
request_id_context = ScopedContextValue("request_id")


def generate_id() -> str:
    """Generate a new identifier (UUID4 string)."""
    return str(uuid4())


def get_correlation_id() -> Optional[str]:
    """Get the correlation id of the current context."""
    return correlation_id_context.get()


def set_correlation_id(correlation_id: Optional[str]) -> Token:
    """Set the correlation id of the current context."""
    return correlation_id_context.set(correlation_id)


def get_request_id() -> Optional[str]:
    """Get the request id of the current context."""
    return request_id_context.get()


def set_request_id(request_id: Optional[str]) -> Token:
    """Set the request id of the current context."""
    return request_id_context.set(request_id)
