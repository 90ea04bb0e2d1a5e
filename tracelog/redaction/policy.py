"""
Pattern based redaction of sensitive data.

A SensitiveDataRedactor holds an ordered, immutable tuple of rules and
applies them one after another: the output of each rule is the input of
the next. Every match is replaced with REDACTED_PLACEHOLDER.

Built-in rules, in application order:
1. credit_card      16 digits, optionally grouped in fours by space or hyphen
2. social_security  NNN-NN-NNNN
3. password         password/pwd/passwd followed by a separator and a value
4. api_key          api_key/apikey/access_token followed by a separator and a value
5. email_password   an email address followed by a separator and a value

A single pass is not idempotent for every input. A placeholder inserted by
a later rule can create a word boundary that an earlier rule then matches
on a second pass: "123-45-6789access-token:x" redacts to
"123-45-6789***REDACTED***" and then to "***REDACTED******REDACTED***".
"""

import re
import threading
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple

REDACTED_PLACEHOLDER = "***REDACTED***"


@dataclass(frozen=True)
class RedactionRule:
    """A named pattern whose matches are replaced with the placeholder."""

    name: str
    pattern: "re.Pattern[str]"

    def apply(self, value: str) -> str:
        """Replace every match of this rule in value."""
        return self.pattern.sub(REDACTED_PLACEHOLDER, value)


CREDIT_CARD_RULE = RedactionRule(
    "credit_card",
    re.compile(r"\b\d{4}[- ]?\d{4}[- ]?\d{4}[- ]?\d{4}\b", re.IGNORECASE),
)
SOCIAL_SECURITY_RULE = RedactionRule(
    "social_security",
    re.compile(r"\b\d{3}-\d{2}-\d{4}\b"),
)
PASSWORD_RULE = RedactionRule(
    "password",
    re.compile(r"(password|pwd|passwd)[\s:=]+[^\s]+", re.IGNORECASE),
)
API_KEY_RULE = RedactionRule(
    "api_key",
    re.compile(r"(api[_-]?key|apikey|access[_-]?token)[\s:=]+[^\s]+", re.IGNORECASE),
)
EMAIL_PASSWORD_RULE = RedactionRule(
    "email_password",
    re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}[\s:]+[^\s]+", re.IGNORECASE),
)

DEFAULT_RULES: Tuple[RedactionRule, ...] = (
    CREDIT_CARD_RULE,
    SOCIAL_SECURITY_RULE,
    PASSWORD_RULE,
    API_KEY_RULE,
    EMAIL_PASSWORD_RULE,
)


class SensitiveDataRedactor:
    """
    Applies an ordered set of redaction rules to string values.

    Instances are immutable once constructed and safe to share between
    threads and concurrently running requests.
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: Optional[Iterable[RedactionRule]] = None):
        """
        Initialize the redactor.

        Args:
            rules: Rules to apply in order (defaults to the five built-in rules)
        """
        self._rules: Tuple[RedactionRule, ...] = (
            DEFAULT_RULES if rules is None else tuple(rules)
        )

    @property
    def rules(self) -> Tuple[RedactionRule, ...]:
        """Rules in application order."""
        return self._rules

    def redact(self, value: str) -> str:
        """
        Redact sensitive data from a string.

        Args:
            value: Input string

        Returns:
            The string with every rule applied in order. Empty or
            whitespace-only input is returned unchanged.
        """
        if not value or value.isspace():
            return value

        redacted = value
        for rule in self._rules:
            redacted = rule.apply(redacted)
        return redacted

    def try_redact(self, value: Any) -> Optional[str]:
        """
        Value transform hook for the logging pipeline.

        Args:
            value: Any scalar value about to be persisted

        Returns:
            The redacted string, or None when value is not a string or
            nothing matched.
        """
        if not isinstance(value, str):
            return None

        redacted = self.redact(value)
        if redacted == value:
            return None
        return redacted

    def __repr__(self) -> str:
        names = ", ".join(rule.name for rule in self._rules)
        return f"{type(self).__name__}([{names}])"


_default_redactor: Optional[SensitiveDataRedactor] = None
_default_lock = threading.Lock()


def default_redactor() -> SensitiveDataRedactor:
    """
    Get the process-wide default redactor.

    The instance has all built-in rules enabled and no custom rules. It is
    created once on first use and never mutated afterwards.
    """
    global _default_redactor

    if _default_redactor is None:
        with _default_lock:
            if _default_redactor is None:
                _default_redactor = SensitiveDataRedactor()
    return _default_redactor


def redact_sensitive_data(value: str) -> str:
    """Redact value using the default redactor."""
    return default_redactor().redact(value)
