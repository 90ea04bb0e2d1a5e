"""
Pytest configuration and shared fixtures.

This module provides fixtures for capturing log events in memory and for
building small FastAPI applications wired with the tracelog middleware.
"""

import asyncio
from typing import Callable, Generator

import pytest
import structlog
from fastapi import FastAPI, Request

from tracelog.app import use_request_logging, use_request_tracking
from tracelog.context import correlation_id_context, request_id_context
from tracelog.enrichers import CorrelationIdEnricher, RequestIdEnricher
from tracelog.testing import InMemoryLogSink, create_test_logger


@pytest.fixture(autouse=True)
def reset_context() -> Generator[None, None, None]:
    """
    Reset scoped context values and structlog state around every test.

    Tests share one execution context, so values set by one test would
    otherwise be visible to the next.
    """
    correlation_token = correlation_id_context.set(None)
    request_token = request_id_context.set(None)
    structlog.contextvars.clear_contextvars()

    yield

    structlog.contextvars.clear_contextvars()
    request_id_context.reset(request_token)
    correlation_id_context.reset(correlation_token)
    structlog.reset_defaults()


@pytest.fixture
def sink() -> InMemoryLogSink:
    """Empty in-memory sink."""
    return InMemoryLogSink()


@pytest.fixture
def enriched_logger(sink: InMemoryLogSink):
    """
    Logger running the correlation and request ID enrichers into the sink.

    Returns:
        Tuple of (logger, sink)
    """
    return create_test_logger(
        sink,
        processors=[
            structlog.contextvars.merge_contextvars,
            CorrelationIdEnricher(),
            RequestIdEnricher(),
        ],
    )


@pytest.fixture
def tracked_app(enriched_logger) -> FastAPI:
    """
    FastAPI application with request tracking and request logging.

    Routes:
        GET /ids      returns the IDs seen by the handler
        GET /work/{n} logs twice around a suspension point
        GET /boom     raises RuntimeError
    """
    logger, _ = enriched_logger
    app = FastAPI()
    use_request_tracking(app)
    use_request_logging(app)

    @app.get("/ids")
    async def ids(request: Request):
        logger.info("handling ids")
        return {
            "correlation_id": correlation_id_context.get(),
            "request_id": request_id_context.get(),
            "state_correlation_id": getattr(request.state, "CorrelationId", None),
            "state_request_id": getattr(request.state, "RequestId", None),
        }

    @app.get("/work/{name}")
    async def work(name: str):
        logger.info("work started", Worker=name)
        await asyncio.sleep(0.01)
        logger.info("work finished", Worker=name)
        return {"correlation_id": correlation_id_context.get()}

    @app.get("/boom")
    async def boom():
        logger.info("about to fail")
        raise RuntimeError("downstream failure")

    return app


@pytest.fixture
def make_app() -> Callable[..., FastAPI]:
    """Factory for bare applications with a chosen middleware class."""

    def _make(*middleware) -> FastAPI:
        app = FastAPI()
        for middleware_class in middleware:
            app.add_middleware(middleware_class)
        return app

    return _make
