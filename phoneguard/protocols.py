"""Port interfaces (Protocols) for the headless-CMS query API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence


@runtime_checkable
class QueryPort(Protocol):
    """Chainable query builder for one content type.

    `find()` resolves to the envelope `[entries, content_type?, count?]`:
    the schema slot is present only when `include_content_type()` was called,
    the count slot only when `include_count()` was called.
    """

    def where(self, field: str, value: Any) -> QueryPort: ...
    def include_reference(self, path: str) -> QueryPort: ...
    def only(self, fields: Sequence[str]) -> QueryPort: ...
    def excepts(self, fields: Sequence[str]) -> QueryPort: ...
    def limit(self, value: int) -> QueryPort: ...
    def skip(self, value: int) -> QueryPort: ...
    def ascending(self, field: str) -> QueryPort: ...
    def descending(self, field: str) -> QueryPort: ...
    def language(self, locale: str) -> QueryPort: ...
    def include_count(self) -> QueryPort: ...
    def include_content_type(self) -> QueryPort: ...
    def include_fallback(self) -> QueryPort: ...
    async def find(self) -> list[Any]: ...


@runtime_checkable
class ContentTypePort(Protocol):
    """A named content type that can produce queries."""

    def query(self) -> QueryPort: ...


@runtime_checkable
class StackPort(Protocol):
    """Long-lived handle to a CMS stack, configured once from credentials."""

    def content_type(self, uid: str) -> ContentTypePort: ...
