"""
Assertion helpers over an InMemoryLogSink.

Each helper raises LogAssertionError describing what was expected and what
was actually captured.
"""

import logging
from typing import Any, Optional, Type

from tracelog.exceptions import LogAssertionError, require

from .sink import InMemoryLogSink, LevelLike, coerce_level


def _level_name(level: LevelLike) -> str:
    return logging.getLevelName(coerce_level(level))


def should_have_logged(sink: InMemoryLogSink, level: LevelLike, message_contains: Optional[str] = None) -> None:
    """
    Assert that at least one event was logged at level.

    Args:
        sink: Sink to inspect
        level: Expected level
        message_contains: Optional text the template or rendered message must contain
    """
    require(sink, "sink")

    events = sink.get_events_for_level(level)
    name = _level_name(level)

    if message_contains is None:
        if not events:
            raise LogAssertionError(
                f"Expected at least one log event at level {name}, but none were found. "
                f"Found {sink.count} events total."
            )
        return

    needle = message_contains.lower()
    matching = [
        e for e in events
        if needle in e.message_template.lower() or needle in e.render_message().lower()
    ]
    if not matching:
        sample = ", ".join(repr(e.render_message()) for e in events[:3])
        raise LogAssertionError(
            f"Expected at least one {name} log event containing '{message_contains}', but none were found. "
            f"Found {len(events)} {name} events total" + (f": {sample}" if sample else ".")
        )


def should_not_have_logged(sink: InMemoryLogSink, level: LevelLike) -> None:
    """Assert that nothing was logged at exactly level."""
    require(sink, "sink")

    count = sink.count_at(level)
    if count > 0:
        raise LogAssertionError(f"Expected no log events at level {_level_name(level)}, but found {count}.")


def should_have_property(sink: InMemoryLogSink, property_name: str) -> None:
    """Assert that at least one event carries property_name."""
    require(sink, "sink")
    require(property_name, "property_name")

    if not sink.get_events_with_property(property_name):
        raise LogAssertionError(
            f"Expected at least one log event with property '{property_name}', but none were found. "
            f"Found {sink.count} events total."
        )


def should_have_property_value(sink: InMemoryLogSink, property_name: str, property_value: Any) -> None:
    """Assert that at least one event's property_name contains property_value."""
    require(sink, "sink")
    require(property_name, "property_name")
    require(property_value, "property_value")

    if not sink.get_events_with_property_value(property_name, property_value):
        seen = [e.properties[property_name] for e in sink.get_events_with_property(property_name)][:3]
        raise LogAssertionError(
            f"Expected at least one log event with property '{property_name}' = '{property_value}', "
            f"but none were found. Values seen: {seen!r}"
        )


def should_have_exception(sink: InMemoryLogSink, exception_type: Type[BaseException]) -> None:
    """Assert that at least one event carries an exception of exception_type."""
    require(sink, "sink")
    require(exception_type, "exception_type")

    if not sink.has_exception(exception_type):
        raise LogAssertionError(
            f"Expected at least one log event with exception type {exception_type.__name__}, "
            f"but none were found. Found {len(sink.get_events_with_exceptions())} events with exceptions."
        )


def should_have_event_count(sink: InMemoryLogSink, expected_count: int, level: Optional[LevelLike] = None) -> None:
    """
    Assert the number of captured events.

    Args:
        sink: Sink to inspect
        expected_count: Expected number of events
        level: When given, only events at exactly this level are counted
    """
    require(sink, "sink")

    if level is None:
        actual = sink.count
        if actual != expected_count:
            raise LogAssertionError(f"Expected {expected_count} log events, but found {actual}.")
        return

    actual = sink.count_at(level)
    if actual != expected_count:
        raise LogAssertionError(f"Expected {expected_count} {_level_name(level)} events, but found {actual}.")
