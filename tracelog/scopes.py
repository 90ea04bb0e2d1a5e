"""
Scoped log properties and timing helpers.

Properties bound with these context managers are attached to every entry
logged inside the block (via structlog.contextvars.merge_contextvars) and
removed again when the block exits.

Usage:
    with tenant_user_scope("acme", "user-42"):
        log.info("order placed")  # carries TenantId and UserId

    with timed_scope(log, "import", batch=7):
        run_import()
"""

import time
from contextlib import contextmanager
from typing import Any, Awaitable, Callable, Dict, Iterator, Mapping, Optional, TypeVar

from structlog.contextvars import bound_contextvars

from tracelog.exceptions import require

T = TypeVar("T")

TENANT_ID_PROPERTY = "TenantId"
USER_ID_PROPERTY = "UserId"
OPERATION_NAME_PROPERTY = "OperationName"
OPERATION_ID_PROPERTY = "OperationId"


@contextmanager
def property_scope(properties: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> Iterator[Dict[str, Any]]:
    """
    Bind properties for the duration of the block.

    Args:
        properties: Mapping of property names to values
        **kwargs: Additional properties

    Yields:
        The bound properties
    """
    bound: Dict[str, Any] = {}
    if properties is not None:
        for name, value in properties.items():
            require(name, "property name")
            bound[name] = value
    bound.update(kwargs)

    with bound_contextvars(**bound):
        yield bound


def tenant_scope(tenant_id: str):
    """Bind TenantId for the duration of the block."""
    require(tenant_id, "tenant_id")
    return property_scope({TENANT_ID_PROPERTY: tenant_id})


def user_scope(user_id: str):
    """Bind UserId for the duration of the block."""
    require(user_id, "user_id")
    return property_scope({USER_ID_PROPERTY: user_id})


def tenant_user_scope(tenant_id: str, user_id: str):
    """Bind TenantId and UserId for the duration of the block."""
    require(tenant_id, "tenant_id")
    require(user_id, "user_id")
    return property_scope({TENANT_ID_PROPERTY: tenant_id, USER_ID_PROPERTY: user_id})


def operation_scope(operation_name: str, operation_id: Optional[str] = None):
    """
    Bind OperationName, and OperationId when given, for the duration of the block.

    Args:
        operation_name: Name of the operation
        operation_id: Optional identifier; blank values are ignored
    """
    require(operation_name, "operation_name")

    properties = {OPERATION_NAME_PROPERTY: operation_name}
    if operation_id and operation_id.strip():
        properties[OPERATION_ID_PROPERTY] = operation_id
    return property_scope(properties)


@contextmanager
def timed_scope(logger, scope_name: str, **properties: Any) -> Iterator[None]:
    """
    Log the start and the completion time of a block.

    Args:
        logger: structlog logger
        scope_name: Name reported in both entries
        **properties: Properties reported with the start entry
    """
    require(logger, "logger")
    require(scope_name, "scope_name")

    logger.info(
        "Starting {ScopeName} with properties {Properties}",
        ScopeName=scope_name,
        Properties=properties,
    )
    start_time = time.perf_counter()
    try:
        yield
    finally:
        logger.info(
            "Completed {ScopeName} in {ElapsedMilliseconds}ms",
            ScopeName=scope_name,
            ElapsedMilliseconds=_elapsed_ms(start_time),
        )


def log_execution_time(logger, operation_name: str, operation: Callable[[], T]) -> T:
    """
    Run an operation and log how long it took, also when it raises.

    Args:
        logger: structlog logger
        operation_name: Name reported in the entry
        operation: Zero-argument callable

    Returns:
        The operation's result
    """
    require(logger, "logger")
    require(operation, "operation")

    start_time = time.perf_counter()
    try:
        return operation()
    finally:
        _log_completed(logger, operation_name, start_time)


async def log_execution_time_async(
    logger, operation_name: str, operation: Callable[[], Awaitable[T]]
) -> T:
    """
    Await an operation and log how long it took, also when it raises.

    Args:
        logger: structlog logger
        operation_name: Name reported in the entry
        operation: Zero-argument callable returning an awaitable

    Returns:
        The operation's result
    """
    require(logger, "logger")
    require(operation, "operation")

    start_time = time.perf_counter()
    try:
        return await operation()
    finally:
        _log_completed(logger, operation_name, start_time)


def _elapsed_ms(start_time: float) -> int:
    return int((time.perf_counter() - start_time) * 1000)


def _log_completed(logger, operation_name: str, start_time: float) -> None:
    logger.info(
        "{OperationName} completed in {ElapsedMilliseconds}ms",
        OperationName=operation_name,
        ElapsedMilliseconds=_elapsed_ms(start_time),
    )
