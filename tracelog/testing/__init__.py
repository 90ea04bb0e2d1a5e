"""
Testing helpers: capture log events in memory and assert on them.

Usage:
    logger, sink = create_test_logger()
    logger.info("hello")
    should_have_logged(sink, "info", "hello")
"""

from .assertions import (
    should_have_event_count,
    should_have_exception,
    should_have_logged,
    should_have_property,
    should_have_property_value,
    should_not_have_logged,
)
from .factory import create_test_logger
from .sink import InMemoryLogSink, LogEvent, coerce_level

__all__ = [
    "InMemoryLogSink",
    "LogEvent",
    "coerce_level",
    "create_test_logger",
    "should_have_event_count",
    "should_have_exception",
    "should_have_logged",
    "should_have_property",
    "should_have_property_value",
    "should_not_have_logged",
]
