"""
structlog processors that enrich log entries with context properties.

Enrichers never overwrite a property that is already present on the event:
the first writer wins.
"""

import socket
from typing import Optional

from structlog.typing import EventDict, WrappedLogger

from tracelog.context import (
    ScopedContextValue,
    correlation_id_context,
    generate_id,
    request_id_context,
)
from tracelog.exceptions import require

CORRELATION_ID_PROPERTY = "CorrelationId"
REQUEST_ID_PROPERTY = "RequestId"
MACHINE_NAME_PROPERTY = "MachineName"


class CorrelationIdEnricher:
    """
    Processor to add the correlation ID to log entries.

    When no correlation ID is bound to the current context a fresh one is
    generated, so every entry carries one, including entries emitted
    outside of a request.
    """

    property_name = CORRELATION_ID_PROPERTY

    def __init__(self, context_value: ScopedContextValue = correlation_id_context):
        self.context_value = context_value

    def __call__(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        """
        Process log entry and add correlation ID.

        Args:
            logger: Logger instance
            method_name: Log method name
            event_dict: Log event dictionary

        Returns:
            Updated event dictionary with correlation ID
        """
        require(event_dict, "event_dict")

        if self.property_name not in event_dict:
            event_dict[self.property_name] = self.context_value.get() or generate_id()
        return event_dict


class RequestIdEnricher:
    """
    Processor to add the request ID to log entries.

    Entries emitted outside of a request carry no request ID.
    """

    property_name = REQUEST_ID_PROPERTY

    def __init__(self, context_value: ScopedContextValue = request_id_context):
        self.context_value = context_value

    def __call__(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        """
        Process log entry and add request ID if one is bound.

        Args:
            logger: Logger instance
            method_name: Log method name
            event_dict: Log event dictionary

        Returns:
            Updated event dictionary
        """
        require(event_dict, "event_dict")

        request_id = self.context_value.get()
        if request_id:
            event_dict.setdefault(self.property_name, request_id)
        return event_dict


class MachineNameEnricher:
    """Processor to add the host name to log entries."""

    property_name = MACHINE_NAME_PROPERTY

    def __init__(self, machine_name: Optional[str] = None):
        self.machine_name = machine_name or socket.gethostname()

    def __call__(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        require(event_dict, "event_dict")

        event_dict.setdefault(self.property_name, self.machine_name)
        return event_dict
