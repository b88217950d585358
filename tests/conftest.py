"""Shared fixtures for MCP client tests."""

from typing import Any, Callable, Optional

import pytest
import structlog
from fastapi import FastAPI

from fakes import RecordingTransport, Responder, create_fake_server


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any logging configuration a test applied."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
    """Factory: ``make_transport({"tools/call": envelope(...)})`` overrides routes."""
    def factory(overrides: Optional[dict[str, Responder]] = None) -> RecordingTransport:
        return RecordingTransport(overrides)
    return factory


@pytest.fixture
def make_fake_server() -> Callable[..., FastAPI]:
    def factory(**kwargs: Any) -> FastAPI:
        return create_fake_server(**kwargs)
    return factory
