"""FastAPI dependencies: app-state handles and JSON query parameters."""

import json
from collections.abc import Callable
from typing import Annotated, Any

from fastapi import Depends, Query, Request

from phoneguard.config import Settings
from phoneguard.content.service import ContentService


def _get_service(request: Request) -> ContentService:
    """Content service built by the lifespan (or injected by tests)."""
    return request.app.state.content_service  # type: ignore[no-any-return]


def _get_settings(request: Request) -> Settings:
    return request.app.state.settings  # type: ignore[no-any-return]


def _json_object(name: str, description: str) -> Callable[..., dict[str, Any] | None]:
    """Dependency parsing query parameter *name* as a JSON object.

    Raises ValueError (answered with 400) for invalid JSON or a non-object.
    """

    def parse(
        raw: Annotated[str | None, Query(alias=name, description=description)] = None,
    ) -> dict[str, Any] | None:
        if raw is None:
            return None
        try:
            value = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ValueError(f"{name} is not valid JSON: {exc.msg}") from exc
        if not isinstance(value, dict):
            raise ValueError(f"{name} must be a JSON object")
        return value

    return parse


ServiceDep = Annotated[ContentService, Depends(_get_service)]
SettingsDep = Annotated[Settings, Depends(_get_settings)]
WhereDep = Annotated[
    dict[str, Any] | None,
    Depends(_json_object("where", "CMS conditions as a JSON object")),
]
FiltersDep = Annotated[
    dict[str, Any] | None,
    Depends(_json_object("filters", "Extra conditions ANDed with the search, as a JSON object")),
]
