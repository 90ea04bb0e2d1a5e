"""
Builder for customised redaction policies.

Usage:
    redactor = (
        RedactionPolicyBuilder.create()
        .disable_email_password_redaction()
        .add_custom_pattern(r"account-\\d{8}")
        .build()
    )
"""

import re
from typing import List, Optional

from tracelog.exceptions import InvalidPatternError, require

from .policy import (
    API_KEY_RULE,
    CREDIT_CARD_RULE,
    EMAIL_PASSWORD_RULE,
    PASSWORD_RULE,
    SOCIAL_SECURITY_RULE,
    RedactionRule,
    SensitiveDataRedactor,
)


class RedactionPolicyBuilder:
    """
    Assembles enabled built-in rules and custom patterns into a redactor.

    Custom patterns are compiled as soon as they are added so that a
    malformed expression fails here rather than on the first log call.
    """

    def __init__(self):
        """Initialize the builder with every built-in rule enabled."""
        self._custom_rules: List[RedactionRule] = []
        self._include_credit_card = True
        self._include_social_security = True
        self._include_password = True
        self._include_api_key = True
        self._include_email_password = True

    @classmethod
    def create(cls) -> "RedactionPolicyBuilder":
        """Create a new builder."""
        return cls()

    def add_custom_pattern(self, pattern: str, flags: Optional[int] = None) -> "RedactionPolicyBuilder":
        """
        Add a custom pattern.

        Args:
            pattern: Regular expression matching sensitive data
            flags: re flags overriding the default of re.IGNORECASE

        Returns:
            This builder for chaining

        Raises:
            InvalidArgumentError: If pattern is None
            InvalidPatternError: If pattern does not compile
        """
        require(pattern, "pattern")

        if flags is None:
            flags = re.IGNORECASE

        try:
            compiled = re.compile(pattern, flags)
        except (re.error, TypeError, ValueError) as e:
            raise InvalidPatternError(str(pattern), str(e)) from e

        self._custom_rules.append(RedactionRule(f"custom_{len(self._custom_rules)}", compiled))
        return self

    def disable_credit_card_redaction(self) -> "RedactionPolicyBuilder":
        """Disable the credit card rule."""
        self._include_credit_card = False
        return self

    def disable_social_security_redaction(self) -> "RedactionPolicyBuilder":
        """Disable the social security number rule."""
        self._include_social_security = False
        return self

    def disable_password_redaction(self) -> "RedactionPolicyBuilder":
        """Disable the password rule."""
        self._include_password = False
        return self

    def disable_api_key_redaction(self) -> "RedactionPolicyBuilder":
        """Disable the API key / access token rule."""
        self._include_api_key = False
        return self

    def disable_email_password_redaction(self) -> "RedactionPolicyBuilder":
        """Disable the email credential rule."""
        self._include_email_password = False
        return self

    def disable_all_defaults(self) -> "RedactionPolicyBuilder":
        """Disable every built-in rule; only custom patterns remain."""
        self._include_credit_card = False
        self._include_social_security = False
        self._include_password = False
        self._include_api_key = False
        self._include_email_password = False
        return self

    def build(self) -> SensitiveDataRedactor:
        """
        Build the redactor.

        Returns:
            A new immutable SensitiveDataRedactor with enabled built-in rules
            in their fixed order followed by custom rules in insertion order
        """
        rules: List[RedactionRule] = []

        if self._include_credit_card:
            rules.append(CREDIT_CARD_RULE)
        if self._include_social_security:
            rules.append(SOCIAL_SECURITY_RULE)
        if self._include_password:
            rules.append(PASSWORD_RULE)
        if self._include_api_key:
            rules.append(API_KEY_RULE)
        if self._include_email_password:
            rules.append(EMAIL_PASSWORD_RULE)

        rules.extend(self._custom_rules)
        return SensitiveDataRedactor(rules)
