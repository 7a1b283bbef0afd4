"""Client for the Contentstack Content Delivery API.

Mirrors the `Stack -> ContentType -> Query` builder of the official SDKs,
on top of a single shared httpx.AsyncClient.
Docs: https://www.contentstack.com/docs/developers/apis/content-delivery-api
"""

from __future__ import annotations

import json
import time
from typing import TYPE_CHECKING, Any

import httpx
import structlog

from phoneguard.metrics import content_request_duration_seconds

if TYPE_CHECKING:
    from collections.abc import Sequence

    from phoneguard.config import Settings

logger = structlog.get_logger()

DEFAULT_HOST = "cdn.contentstack.io"


class Query:
    """Query builder for the entries of one content type.

    Every builder method mutates the query and returns it, so calls chain.
    """

    def __init__(self, stack: Stack, content_type_uid: str) -> None:
        self._stack = stack
        self.content_type_uid = content_type_uid
        self._conditions: dict[str, Any] = {}
        self._params: list[tuple[str, str]] = []
        self._include_count = False
        self._include_content_type = False

    def where(self, field: str, value: Any) -> Query:
        self._conditions[field] = value
        return self

    def include_reference(self, path: str) -> Query:
        self._params.append(("include[]", path))
        return self

    def only(self, fields: Sequence[str]) -> Query:
        self._params.extend(("only[BASE][]", f) for f in fields)
        return self

    def excepts(self, fields: Sequence[str]) -> Query:
        self._params.extend(("except[BASE][]", f) for f in fields)
        return self

    def limit(self, value: int) -> Query:
        self._params.append(("limit", str(value)))
        return self

    def skip(self, value: int) -> Query:
        self._params.append(("skip", str(value)))
        return self

    def ascending(self, field: str) -> Query:
        self._params.append(("asc", field))
        return self

    def descending(self, field: str) -> Query:
        self._params.append(("desc", field))
        return self

    def language(self, locale: str) -> Query:
        self._params.append(("locale", locale))
        return self

    def include_count(self) -> Query:
        self._include_count = True
        self._params.append(("include_count", "true"))
        return self

    def include_content_type(self) -> Query:
        self._include_content_type = True
        self._params.append(("include_content_type", "true"))
        return self

    def include_fallback(self) -> Query:
        self._params.append(("include_fallback", "true"))
        return self

    def params(self) -> list[tuple[str, str]]:
        """Query-string parameters for the entries endpoint."""
        params = [("environment", self._stack.environment), *self._params]
        if self._conditions:
            params.append(("query", json.dumps(self._conditions, separators=(",", ":"))))
        return params

    async def find(self) -> list[Any]:
        """Execute the query.

        Returns:
            Envelope `[entries]`, followed by the content type schema when
            requested, followed by the total count when requested.

        Raises:
            httpx.HTTPError: On transport failures and non-2xx responses.
        """
        data = await self._stack.get(
            f"/v3/content_types/{self.content_type_uid}/entries",
            self.params(),
            content_type_uid=self.content_type_uid,
        )
        entries = data.get("entries")
        envelope: list[Any] = [entries if isinstance(entries, list) else []]
        if self._include_content_type:
            envelope.append(data.get("content_type"))
        if self._include_count:
            count = data.get("count")
            envelope.append(int(count) if isinstance(count, (int, float)) else 0)
        return envelope


class ContentType:
    """A content type of a stack; entry point for queries."""

    def __init__(self, stack: Stack, uid: str) -> None:
        self._stack = stack
        self.uid = uid

    def query(self) -> Query:
        return Query(self._stack, self.uid)


class Stack:
    """Contentstack delivery stack handle.

    Holds the credentials and one AsyncClient for the process lifetime.
    Close it with `aclose()` on shutdown.
    """

    def __init__(
        self,
        api_key: str,
        delivery_token: str,
        environment: str,
        *,
        host: str = DEFAULT_HOST,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.api_key = api_key
        self.environment = environment
        self.base_url = f"https://{host}"
        self._headers = {"api_key": api_key, "access_token": delivery_token}
        self._client = http_client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    def content_type(self, uid: str) -> ContentType:
        return ContentType(self, uid)

    async def get(
        self, path: str, params: list[tuple[str, str]], *, content_type_uid: str
    ) -> dict[str, Any]:
        start = time.monotonic()
        try:
            resp = await self._client.get(
                f"{self.base_url}{path}", params=params, headers=self._headers
            )
            resp.raise_for_status()
        finally:
            content_request_duration_seconds.labels(content_type=content_type_uid).observe(
                time.monotonic() - start
            )
        logger.debug(
            "contentstack_query",
            content_type=content_type_uid,
            status=resp.status_code,
        )
        data = resp.json()
        if not isinstance(data, dict):
            raise ValueError(f"Unexpected Contentstack response for {content_type_uid}")
        return data

    async def aclose(self) -> None:
        await self._client.aclose()


def build_stack(settings: Settings) -> Stack | None:
    """Construct the stack handle, or None when any credential is missing.

    Called once at startup; a missing credential is logged here a single time
    and every later request is served from mock data.
    """
    if not settings.contentstack_configured:
        logger.warning(
            "contentstack_credentials_missing",
            api_key=bool(settings.contentstack_api_key),
            delivery_token=bool(settings.contentstack_delivery_token),
            environment=bool(settings.contentstack_environment),
        )
        return None
    return Stack(
        settings.contentstack_api_key,
        settings.contentstack_delivery_token,
        settings.contentstack_environment,
        host=settings.contentstack_host,
        timeout=settings.cms_timeout_seconds,
    )
