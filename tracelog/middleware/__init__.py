"""
HTTP middleware for request tracking and request logging.
"""

from .request_logging import REQUEST_LOG_TEMPLATE, RequestLoggingMiddleware
from .request_tracking import (
    CORRELATION_ID_HEADER,
    CORRELATION_ID_ITEM,
    REQUEST_ID_HEADER,
    REQUEST_ID_ITEM,
    CorrelationIdMiddleware,
    RequestContextMiddleware,
    RequestIdMiddleware,
    get_request_item,
)

__all__ = [
    "CORRELATION_ID_HEADER",
    "CORRELATION_ID_ITEM",
    "REQUEST_ID_HEADER",
    "REQUEST_ID_ITEM",
    "REQUEST_LOG_TEMPLATE",
    "CorrelationIdMiddleware",
    "RequestContextMiddleware",
    "RequestIdMiddleware",
    "RequestLoggingMiddleware",
    "get_request_item",
]
