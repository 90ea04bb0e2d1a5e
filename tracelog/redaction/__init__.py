"""
Sensitive data redaction.

Usage:
    from tracelog.redaction import redact_sensitive_data

    redact_sensitive_data("password: secret123")  # '***REDACTED***'
"""

from .options import RedactionPolicyBuilder
from .policy import (
    DEFAULT_RULES,
    REDACTED_PLACEHOLDER,
    RedactionRule,
    SensitiveDataRedactor,
    default_redactor,
    redact_sensitive_data,
)
from .processor import RedactionProcessor

__all__ = [
    "DEFAULT_RULES",
    "REDACTED_PLACEHOLDER",
    "RedactionPolicyBuilder",
    "RedactionProcessor",
    "RedactionRule",
    "SensitiveDataRedactor",
    "default_redactor",
    "redact_sensitive_data",
]
