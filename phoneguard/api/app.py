"""FastAPI application factory and entry point."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import structlog
from fastapi import FastAPI

from phoneguard import __version__
from phoneguard.api.middleware import CorrelationIdMiddleware, add_exception_handlers
from phoneguard.api.routes import content, system
from phoneguard.cms.stack import build_stack
from phoneguard.config import Settings
from phoneguard.content.fetcher import ContentFetcher
from phoneguard.content.service import ContentService
from phoneguard.logging import configure_logging

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Build the stack handle once on startup and close it on shutdown."""
    settings = Settings()
    configure_logging(log_level=settings.log_level, log_format=settings.log_format)

    stack = build_stack(settings)
    app.state.settings = settings
    app.state.content_service = ContentService(ContentFetcher(stack))

    logger.info(
        "PhoneGuard API started",
        host=settings.api_host,
        port=settings.api_port,
        cms_configured=stack is not None,
    )
    yield

    if stack is not None:
        await stack.aclose()
    logger.info("PhoneGuard API shut down")


def include_routes(app: FastAPI) -> None:
    """Mount all routers under /api/v1."""
    prefix = "/api/v1"
    app.include_router(system.router, prefix=prefix)
    app.include_router(content.router, prefix=prefix)


def create_app() -> FastAPI:
    """Application factory."""
    app = FastAPI(
        title="PhoneGuard Content",
        description="Site content for PhoneGuard, served from Contentstack with mock fallback",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(CorrelationIdMiddleware)
    add_exception_handlers(app)

    from prometheus_client import make_asgi_app

    app.mount("/metrics", make_asgi_app())
    include_routes(app)
    return app


def main() -> None:
    """Entry point for `phoneguard-api` command."""
    import uvicorn

    settings = Settings()
    uvicorn.run(
        "phoneguard.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
    )
