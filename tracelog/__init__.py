"""
tracelog: structured logging infrastructure for FastAPI services.

- Correlation ID and request ID middleware and log enrichers
- Regex based sensitive data redaction
- structlog configuration
- In-memory capture and assertions for tests
"""

from tracelog.context import (
    ScopedContextValue,
    correlation_id_context,
    generate_id,
    get_correlation_id,
    get_request_id,
    request_id_context,
    set_correlation_id,
    set_request_id,
)
from tracelog.enrichers import CorrelationIdEnricher, MachineNameEnricher, RequestIdEnricher
from tracelog.exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    InvalidPatternError,
    LogAssertionError,
    TracelogError,
)
from tracelog.redaction import (
    REDACTED_PLACEHOLDER,
    RedactionPolicyBuilder,
    RedactionProcessor,
    SensitiveDataRedactor,
    default_redactor,
    redact_sensitive_data,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "CorrelationIdEnricher",
    "InvalidArgumentError",
    "InvalidPatternError",
    "LogAssertionError",
    "MachineNameEnricher",
    "REDACTED_PLACEHOLDER",
    "RedactionPolicyBuilder",
    "RedactionProcessor",
    "RequestIdEnricher",
    "ScopedContextValue",
    "SensitiveDataRedactor",
    "TracelogError",
    "correlation_id_context",
    "default_redactor",
    "generate_id",
    "get_correlation_id",
    "get_request_id",
    "redact_sensitive_data",
    "request_id_context",
    "set_correlation_id",
    "set_request_id",
]
