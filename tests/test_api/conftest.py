"""FastAPI test client fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from phoneguard.api.app import include_routes
from phoneguard.api.middleware import CorrelationIdMiddleware, add_exception_handlers
from phoneguard.content.fetcher import ContentFetcher
from phoneguard.content.service import ContentService

if TYPE_CHECKING:
    from conftest import FakeStack

    from phoneguard.config import Settings


def _create_test_app(service: ContentService, settings: Settings) -> FastAPI:
    """Create a FastAPI app with injected service/settings (no lifespan)."""
    app = FastAPI(title="PhoneGuard Test")

    app.state.content_service = service
    app.state.settings = settings

    app.add_middleware(CorrelationIdMiddleware)
    add_exception_handlers(app)
    include_routes(app)
    return app


@pytest.fixture()
def client(unconfigured_settings: Settings) -> TestClient:
    """Client whose content comes from mock fixtures only."""
    app = _create_test_app(ContentService(ContentFetcher(None)), unconfigured_settings)
    return TestClient(app)


@pytest.fixture()
def cms_client(fake_stack: FakeStack, settings: Settings) -> TestClient:
    """Client backed by the recording fake stack."""
    app = _create_test_app(ContentService(ContentFetcher(fake_stack)), settings)
    return TestClient(app)
