"""
structlog processor that redacts sensitive data from log entries.

Every string in the event dictionary, the message included, is passed
through SensitiveDataRedactor.try_redact(). Nested dictionaries, lists and
tuples are walked recursively. Keys are left as they are, and values under
excluded keys are never touched.
"""

from typing import Any, Dict, Iterable, Optional

from structlog.typing import EventDict, WrappedLogger

from .policy import SensitiveDataRedactor, default_redactor


class RedactionProcessor:
    """
    Processor to redact sensitive values in log entries.

    Place it after the enrichers and before the renderer so that application
    supplied values are covered. Identifier properties added by the
    enrichers should be listed in exclude_keys: a generated ID can look like
    a card number and must reach the output unchanged.
    """

    def __init__(
        self,
        redactor: Optional[SensitiveDataRedactor] = None,
        exclude_keys: Iterable[str] = (),
    ):
        """
        Initialize redaction processor.

        Args:
            redactor: Redactor to apply (defaults to the shared default instance)
            exclude_keys: Top level keys whose values are left unredacted
        """
        self.redactor = redactor or default_redactor()
        self.exclude_keys = frozenset(exclude_keys)

    def __call__(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        """
        Process log entry and redact sensitive values.

        Args:
            logger: Logger instance
            method_name: Log method name
            event_dict: Log event dictionary

        Returns:
            Event dictionary with sensitive values replaced
        """
        for key, value in list(event_dict.items()):
            if key in self.exclude_keys:
                continue
            redacted = self._redact_value(value)
            if redacted is not value:
                event_dict[key] = redacted
        return event_dict

    def _redact_value(self, value: Any) -> Any:
        """
        Redact a single value, recursing into containers.

        Returns the original object when nothing changed.
        """
        if isinstance(value, str):
            redacted = self.redactor.try_redact(value)
            return value if redacted is None else redacted
        if isinstance(value, dict):
            return self._redact_dict(value)
        if isinstance(value, (list, tuple)):
            return self._redact_sequence(value)
        return value

    def _redact_dict(self, data: Dict[Any, Any]) -> Dict[Any, Any]:
        changed = False
        redacted_data = {}

        for key, value in data.items():
            redacted = self._redact_value(value)
            changed = changed or redacted is not value
            redacted_data[key] = redacted

        return redacted_data if changed else data

    def _redact_sequence(self, data):
        items = [self._redact_value(item) for item in data]
        if all(new is old for new, old in zip(items, data)):
            return data
        return tuple(items) if isinstance(data, tuple) else items
