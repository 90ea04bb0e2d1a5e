"""
Application wiring helpers.

Usage:
    app = FastAPI()
    add_logging()
    use_request_tracking(app)
    use_request_logging(app)
"""

from typing import Optional

from starlette.applications import Starlette

from tracelog.config.options import LoggingOptions
from tracelog.exceptions import require
from tracelog.middleware import CorrelationIdMiddleware, RequestIdMiddleware, RequestLoggingMiddleware
from tracelog.redaction import SensitiveDataRedactor
from tracelog.utils.logging import configure_logging


def add_logging(
    options: Optional[LoggingOptions] = None,
    redactor: Optional[SensitiveDataRedactor] = None,
) -> LoggingOptions:
    """
    Configure structured logging with the tracelog defaults.

    Args:
        options: Logging options (defaults to the configured settings)
        redactor: Custom redactor, e.g. from RedactionPolicyBuilder

    Returns:
        The applied options
    """
    return configure_logging(options, redactor)


def use_request_tracking(app: Starlette) -> Starlette:
    """
    Add the correlation ID and request ID middleware.

    Args:
        app: FastAPI/Starlette application

    Returns:
        The application
    """
    require(app, "app")

    app.add_middleware(RequestIdMiddleware)
    app.add_middleware(CorrelationIdMiddleware)
    return app


def use_request_logging(app: Starlette) -> Starlette:
    """
    Add the request completion logging middleware.

    The entry reads both IDs from request.state, so it may be added before
    or after use_request_tracking().
    """
    require(app, "app")

    app.add_middleware(RequestLoggingMiddleware)
    return app
