"""
Request tracking middleware.

Each inbound request is assigned a correlation ID and a request ID:
- taken from the X-Correlation-ID / X-Request-ID request header when present
- otherwise generated as a new UUID4

The resolved ID is bound to the request's execution context (read by the
log enrichers), written to the response header of the same name, and
stored on request.state under "CorrelationId" / "RequestId" for
downstream consumers such as the request logging middleware.
"""

from typing import Any, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from tracelog.context import (
    ScopedContextValue,
    correlation_id_context,
    generate_id,
    request_id_context,
)
from tracelog.exceptions import require

CORRELATION_ID_HEADER = "X-Correlation-ID"
REQUEST_ID_HEADER = "X-Request-ID"
CORRELATION_ID_ITEM = "CorrelationId"
REQUEST_ID_ITEM = "RequestId"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Base middleware resolving one identifier per request.

    Subclasses set header_name, item_key and context_value.
    """

    header_name: str
    item_key: str
    context_value: ScopedContextValue

    def __init__(self, app: ASGIApp):
        """
        Initialize request context middleware.

        Args:
            app: ASGI application instance
        """
        require(app, "app")
        super().__init__(app)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        """
        Resolve the identifier, publish it and call the next stage.

        Args:
            request: FastAPI request object
            call_next: Next middleware/handler in chain

        Returns:
            Response object with the identifier header set
        """
        identifier = self._get_or_generate_id(request)

        self.context_value.set(identifier)
        setattr(request.state, self.item_key, identifier)

        # Exceptions from downstream propagate unchanged
        response = await call_next(request)

        response.headers[self.header_name] = identifier
        return response

    def _get_or_generate_id(self, request: Request) -> str:
        """
        Get the identifier from the request header or generate a new one.

        Args:
            request: FastAPI request object

        Returns:
            Identifier string
        """
        identifier = request.headers.get(self.header_name)
        if identifier is None or not identifier.strip():
            return generate_id()
        return identifier


class CorrelationIdMiddleware(RequestContextMiddleware):
    """Middleware ensuring every request has a correlation ID."""

    header_name = CORRELATION_ID_HEADER
    item_key = CORRELATION_ID_ITEM
    context_value = correlation_id_context


class RequestIdMiddleware(RequestContextMiddleware):
    """Middleware ensuring every request has a request ID."""

    header_name = REQUEST_ID_HEADER
    item_key = REQUEST_ID_ITEM
    context_value = request_id_context


def get_request_item(request: Request, key: str, default: Optional[Any] = None) -> Any:
    """
    Read a value stored on the request-scoped state.

    Args:
        request: FastAPI request object
        key: Item key, e.g. "CorrelationId"
        default: Value returned when the key is absent

    Returns:
        Stored value or default
    """
    require(key, "key")
    return getattr(request.state, key, default)
