"""Content fetcher: runs translated queries and degrades to mock data.

Failures never propagate from here. A missing stack (no credentials) and any
exception raised while building or executing a query both resolve to the
mock payload for the content type; the `source` label of
`phoneguard_content_requests_total` records which path served the request.
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import TYPE_CHECKING, Any

import structlog

from phoneguard.content.mock_data import resolve_mock
from phoneguard.content.query import ContentQueryOptions, apply_options
from phoneguard.metrics import content_requests_total

if TYPE_CHECKING:
    from collections.abc import Callable

    from phoneguard.protocols import StackPort

logger = structlog.get_logger()

Payload = list[dict[str, Any]] | dict[str, Any]

_sources: ContextVar[list[str] | None] = ContextVar("content_sources", default=None)


def collect_sources() -> list[str]:
    """Start collecting the `source` of every fetch in the current context.

    Returns the list that later fetches append to. Tasks spawned afterwards
    share it, so a request handler's fetches are visible to the middleware
    that called this.
    """
    sources: list[str] = []
    _sources.set(sources)
    return sources


def _record(content_type: str, source: str) -> None:
    content_requests_total.labels(content_type=content_type, source=source).inc()
    sources = _sources.get()
    if sources is not None:
        sources.append(source)


def _as_entries(payload: Any) -> list[dict[str, Any]]:
    if isinstance(payload, dict):
        return [payload]
    if isinstance(payload, list):
        return [e for e in payload if isinstance(e, dict)]
    return []


class ContentFetcher:
    """Executes content queries against an injected CMS stack.

    Args:
        stack: Configured stack handle, or None to serve mock data only.
        resolver: Mock payload lookup keyed by content type.
    """

    def __init__(
        self,
        stack: StackPort | None,
        resolver: Callable[[str], Payload] = resolve_mock,
    ) -> None:
        self.stack = stack
        self._resolver = resolver

    @property
    def is_available(self) -> bool:
        return self.stack is not None

    async def fetch_entries(
        self, content_type: str, options: ContentQueryOptions | None = None
    ) -> list[dict[str, Any]]:
        """Fetch a collection; an empty list is a valid CMS answer."""
        envelope = await self._fetch(content_type, options or ContentQueryOptions())
        if envelope is None:
            return _as_entries(self._resolver(content_type))
        return _as_entries(envelope[0])

    async def fetch_entry(
        self, content_type: str, options: ContentQueryOptions | None = None
    ) -> dict[str, Any] | None:
        """Fetch a single-entry content type (first entry of the collection)."""
        envelope = await self._fetch(content_type, options or ContentQueryOptions())
        entries = _as_entries(self._resolver(content_type) if envelope is None else envelope[0])
        return entries[0] if entries else None

    async def fetch_with_count(
        self, content_type: str, options: ContentQueryOptions | None = None
    ) -> tuple[list[dict[str, Any]], int]:
        """Fetch a collection together with the total match count."""
        options = (options or ContentQueryOptions()).model_copy(update={"include_count": True})
        envelope = await self._fetch(content_type, options)
        if envelope is None:
            entries = _as_entries(self._resolver(content_type))
            return entries, len(entries)
        entries = _as_entries(envelope[0])
        count = envelope[-1] if len(envelope) > 1 else None
        return entries, count if isinstance(count, int) and count >= 0 else len(entries)

    async def _fetch(self, content_type: str, options: ContentQueryOptions) -> list[Any] | None:
        """Run the query. Returns the envelope, or None when mock data must be used."""
        if self.stack is None:
            logger.warning("contentstack_not_configured", content_type=content_type)
            _record(content_type, "mock_unconfigured")
            return None

        try:
            query = apply_options(self.stack.content_type(content_type).query(), options)
            envelope = await query.find()
            if not isinstance(envelope, list) or not envelope:
                raise ValueError(f"Malformed result envelope: {envelope!r}")
        except Exception as exc:
            logger.error("content_fetch_failed", content_type=content_type, error=str(exc))
            _record(content_type, "mock_error")
            return None

        _record(content_type, "cms")
        return envelope
