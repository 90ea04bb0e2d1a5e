"""
Structured logging configuration.

This module wires the tracelog enrichers and the redaction processor into
structlog and sets up stdlib logging, producing JSON output in production
and coloured console output in development.

Usage:
    from tracelog.utils.logging import configure_logging, get_logger

    configure_logging()  # options read from tracelog.config.settings
    log = get_logger(__name__)
    log.info("user signed in", user_id=42)
"""

import logging
import sys
from typing import List, Optional

import structlog
from structlog.typing import FilteringBoundLogger, Processor

from tracelog.config.options import LoggingOptions
from tracelog.enrichers import (
    CORRELATION_ID_PROPERTY,
    MACHINE_NAME_PROPERTY,
    REQUEST_ID_PROPERTY,
    CorrelationIdEnricher,
    MachineNameEnricher,
    RequestIdEnricher,
)
from tracelog.redaction import RedactionProcessor, SensitiveDataRedactor

from .templates import render_template

SERVICE_PROPERTY = "service"
MESSAGE_TEMPLATE_PROPERTY = "message_template"

# Values the redaction processor must never rewrite
IDENTIFIER_KEYS = (
    CORRELATION_ID_PROPERTY,
    REQUEST_ID_PROPERTY,
    MACHINE_NAME_PROPERTY,
    SERVICE_PROPERTY,
)


class ServiceInfoProcessor:
    """Processor to add the service name to log entries."""

    def __init__(self, service_name: str):
        self.service_name = service_name

    def __call__(self, logger, method_name: str, event_dict):
        event_dict.setdefault(SERVICE_PROPERTY, self.service_name)
        return event_dict


class MessageTemplateRenderer:
    """
    Processor to render "{Name}" placeholders in the event message.

    The rendered text replaces the event and the template is kept under
    "message_template", so output stays searchable by template.
    """

    def __call__(self, logger, method_name: str, event_dict):
        event = event_dict.get("event")
        if isinstance(event, str) and "{" in event:
            rendered = render_template(event, event_dict)
            if rendered != event:
                event_dict.setdefault(MESSAGE_TEMPLATE_PROPERTY, event)
                event_dict["event"] = rendered
        return event_dict


def build_enrichers(options: LoggingOptions) -> List[Processor]:
    """
    Build the enabled enrichers.

    Args:
        options: Logging options

    Returns:
        Enricher processors in order
    """
    enrichers: List[Processor] = []

    if options.enable_correlation_id:
        enrichers.append(CorrelationIdEnricher())
    if options.enable_request_id:
        enrichers.append(RequestIdEnricher())
    if options.enable_machine_name:
        enrichers.append(MachineNameEnricher())

    return enrichers


def build_processors(
    options: Optional[LoggingOptions] = None,
    redactor: Optional[SensitiveDataRedactor] = None,
) -> List[Processor]:
    """
    Build the structlog processor chain without installing it.

    Args:
        options: Logging options (defaults to the configured settings)
        redactor: Redactor to use (defaults to the shared default redactor)

    Returns:
        Processor chain ending with a renderer
    """
    if options is None:
        options = LoggingOptions.from_settings()

    processors: List[Processor] = [
        # Merge context from contextvars (scoped properties)
        structlog.contextvars.merge_contextvars,
        ServiceInfoProcessor(options.service_name),
    ]

    processors.extend(build_enrichers(options))

    processors.extend([
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ])

    if options.log_format == "json":
        processors.append(structlog.processors.format_exc_info)

    processors.append(structlog.processors.UnicodeDecoder())

    processors.append(MessageTemplateRenderer())

    # Redact after rendering so that substituted values are covered too
    if options.redact_sensitive_data:
        processors.append(RedactionProcessor(redactor, exclude_keys=IDENTIFIER_KEYS))

    if options.log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    return processors


def configure_logging(
    options: Optional[LoggingOptions] = None,
    redactor: Optional[SensitiveDataRedactor] = None,
) -> LoggingOptions:
    """
    Configure structlog and stdlib logging.

    Should be called once at application startup.

    Args:
        options: Logging options (defaults to the configured settings)
        redactor: Redactor to use (defaults to the shared default redactor)

    Returns:
        The options that were applied
    """
    if options is None:
        options = LoggingOptions.from_settings()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=options.level,
    )

    structlog.configure(
        processors=build_processors(options, redactor),
        wrapper_class=structlog.make_filtering_bound_logger(options.level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    return options


def get_logger(name: Optional[str] = None) -> FilteringBoundLogger:
    """
    Get a configured structlog logger.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)
