"""Health check and config endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from phoneguard import __version__
from phoneguard.api.deps import ServiceDep, SettingsDep
from phoneguard.api.schemas import ConfigCheckResponse, HealthResponse
from phoneguard.content.mock_data import MOCK_CONTENT_TYPES

router = APIRouter(tags=["system"])


@router.get("/health", response_model=HealthResponse)
def health_check(service: ServiceDep) -> HealthResponse:
    # Content is always served (mock fallback), so the API itself is healthy
    return HealthResponse(
        status="healthy",
        version=__version__,
        cms_connected=service.fetcher.is_available,
    )


@router.get("/config/check", response_model=ConfigCheckResponse)
def config_check(settings: SettingsDep) -> ConfigCheckResponse:
    return ConfigCheckResponse(
        configured={
            "api_key": bool(settings.contentstack_api_key),
            "delivery_token": bool(settings.contentstack_delivery_token),
            "environment": bool(settings.contentstack_environment),
            "contentstack": settings.contentstack_configured,
        },
        host=settings.contentstack_host,
        mock_content_types=list(MOCK_CONTENT_TYPES),
    )
