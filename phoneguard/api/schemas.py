"""API response schemas (separate from content records)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, SerializeAsAny

from phoneguard.models.content import ContentRecord


class HealthResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: str
    version: str
    cms_connected: bool


class ConfigCheckResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    configured: dict[str, bool]
    host: str
    mock_content_types: list[str]


class SearchResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    content_type: str
    search_term: str
    results: list[SerializeAsAny[ContentRecord]]
    total: int
