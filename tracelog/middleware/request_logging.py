"""
Request completion logging middleware.

Emits one structured entry per request once the response is produced:

    HTTP {RequestMethod} {RequestPath} responded {StatusCode} in {Elapsed} ms

The correlation and request IDs are read from request.state, where the
request tracking middleware stored them, so this middleware does not
depend on the execution context it runs in.

The template is logged as the event. The chain built by configure_logging()
renders it from the entry's properties and keeps the template under
"message_template".
"""

import time
from typing import Any, Dict, Optional

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from tracelog.exceptions import require

from .request_tracking import CORRELATION_ID_ITEM, REQUEST_ID_ITEM, get_request_item

REQUEST_LOG_TEMPLATE = "HTTP {RequestMethod} {RequestPath} responded {StatusCode} in {Elapsed} ms"

logger = structlog.get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for request completion logging.

    Responses with a 5xx status, and requests whose handler raised, are
    logged at error level. Everything else is logged at info level.
    """

    def __init__(self, app: ASGIApp, message_template: str = REQUEST_LOG_TEMPLATE):
        """
        Initialize request logging middleware.

        Args:
            app: ASGI application instance
            message_template: Message template of the completion entry
        """
        require(app, "app")
        super().__init__(app)
        self.message_template = message_template

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        """
        Process request and log its completion.

        Args:
            request: FastAPI request object
            call_next: Next middleware/handler in chain

        Returns:
            Response object
        """
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:
            properties = self._build_properties(request, 500, start_time)
            logger.error(self.message_template, exc_info=exc, **properties)
            raise

        properties = self._build_properties(request, response.status_code, start_time)
        if response.status_code >= 500:
            logger.error(self.message_template, **properties)
        else:
            logger.info(self.message_template, **properties)

        return response

    def _build_properties(self, request: Request, status_code: int, start_time: float) -> Dict[str, Any]:
        """
        Collect the properties of the completion entry.

        Args:
            request: FastAPI request object
            status_code: Response status code
            start_time: perf_counter() value taken when the request arrived

        Returns:
            Properties dictionary
        """
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        properties: Dict[str, Any] = {
            "RequestMethod": request.method,
            "RequestPath": request.url.path,
            "StatusCode": status_code,
            "Elapsed": round(elapsed_ms, 4),
            "RequestHost": request.headers.get("host", request.url.netloc),
            "RequestScheme": request.url.scheme,
            "RemoteIpAddress": self._get_client_ip(request),
            "UserAgent": request.headers.get("user-agent", ""),
        }

        correlation_id = get_request_item(request, CORRELATION_ID_ITEM)
        if correlation_id is not None:
            properties[CORRELATION_ID_ITEM] = correlation_id

        request_id = get_request_item(request, REQUEST_ID_ITEM)
        if request_id is not None:
            properties[REQUEST_ID_ITEM] = request_id

        return properties

    def _get_client_ip(self, request: Request) -> Optional[str]:
        """
        Extract client IP address from request.

        Args:
            request: FastAPI request object

        Returns:
            Client IP address or None
        """
        for header in ("x-forwarded-for", "x-real-ip"):
            ip = request.headers.get(header)
            if ip:
                # X-Forwarded-For can contain multiple IPs, take the first one
                return ip.split(",")[0].strip()

        if request.client:
            return request.client.host

        return None
