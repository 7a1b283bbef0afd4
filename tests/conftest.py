"""Shared test fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from phoneguard.config import Settings
from phoneguard.content.fetcher import ContentFetcher
from phoneguard.content.service import ContentService


class FakeQuery:
    """QueryPort double that records builder calls and returns a canned envelope."""

    def __init__(self, stack: FakeStack, content_type: str) -> None:
        self.stack = stack
        self.content_type = content_type
        self.calls: list[tuple[str, Any]] = []

    def _record(self, name: str, arg: Any = None) -> FakeQuery:
        self.calls.append((name, arg))
        return self

    def where(self, field: str, value: Any) -> FakeQuery:
        return self._record("where", (field, value))

    def include_reference(self, path: str) -> FakeQuery:
        return self._record("include_reference", path)

    def only(self, fields: Any) -> FakeQuery:
        return self._record("only", list(fields))

    def excepts(self, fields: Any) -> FakeQuery:
        return self._record("excepts", list(fields))

    def limit(self, value: int) -> FakeQuery:
        return self._record("limit", value)

    def skip(self, value: int) -> FakeQuery:
        return self._record("skip", value)

    def ascending(self, field: str) -> FakeQuery:
        return self._record("ascending", field)

    def descending(self, field: str) -> FakeQuery:
        return self._record("descending", field)

    def language(self, locale: str) -> FakeQuery:
        return self._record("language", locale)

    def include_count(self) -> FakeQuery:
        return self._record("include_count")

    def include_content_type(self) -> FakeQuery:
        return self._record("include_content_type")

    def include_fallback(self) -> FakeQuery:
        return self._record("include_fallback")

    @property
    def where_conditions(self) -> dict[str, Any]:
        return dict(arg for name, arg in self.calls if name == "where")

    async def find(self) -> list[Any]:
        self.stack.find_calls += 1
        if self.stack.error is not None:
            raise self.stack.error
        return self.stack.envelope


class FakeContentType:
    def __init__(self, stack: FakeStack, uid: str) -> None:
        self.stack = stack
        self.uid = uid

    def query(self) -> FakeQuery:
        query = FakeQuery(self.stack, self.uid)
        self.stack.queries.append(query)
        return query


class FakeStack:
    """StackPort double; set `envelope` or `error` to control `find()`."""

    def __init__(self, envelope: list[Any] | None = None, error: Exception | None = None) -> None:
        self.envelope: list[Any] = envelope if envelope is not None else [[]]
        self.error = error
        self.queries: list[FakeQuery] = []
        self.find_calls = 0

    def content_type(self, uid: str) -> FakeContentType:
        return FakeContentType(self, uid)

    @property
    def last_query(self) -> FakeQuery:
        return self.queries[-1]


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        contentstack_api_key="blt-test-key",
        contentstack_delivery_token="cs-test-token",
        contentstack_environment="test",
        log_level="DEBUG",
        log_format="console",
        _env_file=None,
    )


@pytest.fixture()
def unconfigured_settings() -> Settings:
    return Settings(
        contentstack_api_key="",
        contentstack_delivery_token="",
        contentstack_environment="",
        _env_file=None,
    )


@pytest.fixture()
def fake_stack() -> FakeStack:
    return FakeStack()


@pytest.fixture()
def service(fake_stack: FakeStack) -> ContentService:
    return ContentService(ContentFetcher(fake_stack))


@pytest.fixture()
def mock_service() -> ContentService:
    """Service without a stack: every request is served from mock data."""
    return ContentService(ContentFetcher(None))
