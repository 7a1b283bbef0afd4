"""Content querying: option translation, fetching with mock fallback, accessors."""

from phoneguard.content.fetcher import ContentFetcher
from phoneguard.content.mock_data import MOCK_CONTENT_TYPES, resolve_mock
from phoneguard.content.query import ContentQueryOptions, apply_options
from phoneguard.content.resources import ContentResource, ResourceState
from phoneguard.content.service import ContentService

__all__ = [
    "MOCK_CONTENT_TYPES",
    "ContentFetcher",
    "ContentQueryOptions",
    "ContentResource",
    "ContentService",
    "ResourceState",
    "apply_options",
    "resolve_mock",
]
