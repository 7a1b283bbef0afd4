"""Translation of ContentQueryOptions into CMS query-builder calls."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from collections.abc import Callable

    from phoneguard.protocols import QueryPort


class ContentQueryOptions(BaseModel):
    """Structured options for one content query.

    `where` values are either plain values (equality) or CMS operator
    dictionaries such as `{"$gte": 4}`; both are passed through verbatim.
    An `order` starting with "-" sorts descending on the remaining field name.
    Bounds are not range-checked here: a `limit` of 0 or a negative `skip`
    goes to the CMS as given, and its rejection resolves to mock data.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    where: dict[str, Any] | None = None
    include: list[str] | None = None
    only: list[str] | None = None
    except_: list[str] | None = Field(default=None, alias="except")
    limit: int | None = None
    skip: int | None = None
    order: str | None = None
    locale: str | None = None
    include_count: bool = False
    include_content_type: bool = False
    include_fallback: bool = False


def _apply_where(query: QueryPort, options: ContentQueryOptions) -> None:
    if options.where is None:
        return
    for field, value in options.where.items():
        if value is not None:
            query.where(field, value)


def _apply_include(query: QueryPort, options: ContentQueryOptions) -> None:
    for path in options.include or ():
        query.include_reference(path)


def _apply_projection(query: QueryPort, options: ContentQueryOptions) -> None:
    # only/except precedence when both are given is left to the CMS
    if options.only:
        query.only(options.only)
    if options.except_:
        query.excepts(options.except_)


def _apply_bounds(query: QueryPort, options: ContentQueryOptions) -> None:
    if options.limit is not None:
        query.limit(options.limit)
    if options.skip is not None:
        query.skip(options.skip)


def _apply_order(query: QueryPort, options: ContentQueryOptions) -> None:
    if not options.order:
        return
    if options.order.startswith("-"):
        query.descending(options.order[1:])
    else:
        query.ascending(options.order)


def _apply_locale(query: QueryPort, options: ContentQueryOptions) -> None:
    if options.locale:
        query.language(options.locale)


def _apply_toggles(query: QueryPort, options: ContentQueryOptions) -> None:
    if options.include_count:
        query.include_count()
    if options.include_content_type:
        query.include_content_type()
    if options.include_fallback:
        query.include_fallback()


# Application order matters: each step runs exactly once, top to bottom.
TRANSLATION_STEPS: tuple[tuple[str, Callable[[QueryPort, ContentQueryOptions], None]], ...] = (
    ("where", _apply_where),
    ("include", _apply_include),
    ("projection", _apply_projection),
    ("bounds", _apply_bounds),
    ("order", _apply_order),
    ("locale", _apply_locale),
    ("toggles", _apply_toggles),
)


def apply_options(query: QueryPort, options: ContentQueryOptions) -> QueryPort:
    """Configure *query* from *options* and return it, ready for `find()`."""
    for _name, step in TRANSLATION_STEPS:
        step(query, options)
    return query
