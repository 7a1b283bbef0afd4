"""Request-lifecycle wrappers around the content accessors.

A ContentResource tracks `{data, loading, error}` for one consumer binding
and re-issues its fetch only when the dependency key (the call arguments,
compared by value) changes. When keys change faster than fetches resolve,
the last key wins: results for superseded keys are dropped.

Unlike ContentFetcher, a resource surfaces loader exceptions as an `error`
message. This is the only place request failures become visible to a
consumer.
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Mapping, Set
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

import structlog
from pydantic import BaseModel

from phoneguard.models.content import PaginatedEntries

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from phoneguard.content.service import ContentService
    from phoneguard.models.content import (
        AboutPage,
        Benefit,
        ContactPage,
        ContentRecord,
        HeroSection,
        HomePage,
        InsurancePlan,
        SearchQuery,
        Testimonial,
    )

logger = structlog.get_logger()

T = TypeVar("T")


def _freeze(value: Any) -> Any:
    """Hashable, order-insensitive (for mappings) form of *value*."""
    if isinstance(value, BaseModel):
        return (type(value).__name__, _freeze(value.model_dump()))
    if isinstance(value, Mapping):
        return tuple(sorted((str(k), _freeze(v)) for k, v in value.items()))
    if isinstance(value, Set):
        return frozenset(_freeze(v) for v in value)
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def dependency_key(
    args: tuple[Any, ...],
    kwargs: Mapping[str, Any],
    signature: inspect.Signature | None = None,
) -> tuple[Any, ...]:
    """Value-based key for one set of call arguments.

    With a *signature*, arguments are bound to parameter names (defaults
    applied), so `load(True)` and `load(featured=True)` share a key. Arguments
    that do not bind are keyed as given; the loader call then fails and the
    failure lands in the resource state.
    """
    if signature is not None:
        try:
            bound = signature.bind(*args, **kwargs)
        except TypeError:
            pass
        else:
            bound.apply_defaults()
            return ("bound", _freeze(dict(bound.arguments)))
    return (_freeze(args), _freeze(kwargs))


@dataclass
class ResourceState(Generic[T]):
    data: T
    loading: bool = True
    error: str | None = None


class ContentResource(Generic[T]):
    """Loading/error/data state for one accessor binding.

    Args:
        loader: Async callable producing the data; called with the arguments
            given to `load()`.
        initial: Data exposed before the first successful load.
        fallback_message: Error text when an exception has no message.
        record_errors: When False, failures are logged but `error` stays None.
        name: Label used in log events.
    """

    def __init__(
        self,
        loader: Callable[..., Awaitable[T]],
        *,
        initial: T,
        fallback_message: str,
        record_errors: bool = True,
        name: str = "content",
    ) -> None:
        self._loader = loader
        self._signature = inspect.signature(loader)
        self._fallback_message = fallback_message
        self._record_errors = record_errors
        self.name = name
        self.state: ResourceState[T] = ResourceState(data=initial)

        self._key: tuple[Any, ...] | None = None
        self._args: tuple[Any, ...] = ()
        self._kwargs: dict[str, Any] = {}
        self._generation = 0
        self._inflight: asyncio.Task[None] | None = None

    @property
    def data(self) -> T:
        return self.state.data

    @property
    def loading(self) -> bool:
        return self.state.loading

    @property
    def error(self) -> str | None:
        return self.state.error

    async def load(self, *args: Any, **kwargs: Any) -> ResourceState[T]:
        """Bind to new arguments; fetch only if the dependency key changed."""
        key = dependency_key(args, kwargs, self._signature)
        if key == self._key:
            if self._inflight is not None:
                await asyncio.shield(self._inflight)
            return self.state

        self._key = key
        self._args = args
        self._kwargs = dict(kwargs)
        return await self._start()

    async def reload(self) -> ResourceState[T]:
        """Re-issue the fetch for the current arguments."""
        if self._key is None:
            raise RuntimeError(f"Resource {self.name!r} has never been loaded")
        return await self._start()

    async def _start(self) -> ResourceState[T]:
        self._generation += 1
        self.state.loading = True
        task = asyncio.ensure_future(self._run(self._generation, self._args, self._kwargs))
        self._inflight = task
        # shield: cancelling one awaiting caller must not cancel a fetch others wait on
        await asyncio.shield(task)
        return self.state

    async def _run(self, generation: int, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        try:
            data = await self._loader(*args, **kwargs)
        except Exception as exc:
            if generation != self._generation:
                logger.debug("stale_content_error_dropped", resource=self.name)
                return
            message = str(exc) or self._fallback_message
            if self._record_errors:
                self.state.error = message
            else:
                logger.error("content_resource_failed", resource=self.name, error=message)
        else:
            if generation != self._generation:
                logger.debug("stale_content_result_dropped", resource=self.name)
                return
            self.state.data = data
            self.state.error = None
        finally:
            if generation == self._generation:
                self.state.loading = False
                self._inflight = None


# ----------------------------------------------------------------------
# Factories, one per accessor
# ----------------------------------------------------------------------


def testimonials_resource(service: ContentService) -> ContentResource[list[Testimonial]]:
    """Bind with `load(featured, **options)`; options as in `get_testimonials`."""
    return ContentResource(
        service.get_testimonials,
        initial=[],
        fallback_message="Failed to fetch testimonials",
        name="testimonials",
    )


def insurance_plans_resource(service: ContentService) -> ContentResource[list[InsurancePlan]]:
    """Bind with `load(brand, model, **options)`."""
    return ContentResource(
        service.get_insurance_plans,
        initial=[],
        fallback_message="Failed to fetch plans",
        name="insurance_plans",
    )


def hero_content_resource(service: ContentService) -> ContentResource[HeroSection | None]:
    """Bind with `load(page, **options)`; data is the first hero or None.

    Hero failures are logged only; the banner is decorative.
    """

    async def first_hero(page: str, **options: Any) -> HeroSection | None:
        heroes = await service.get_hero_content(page, **options)
        return heroes[0] if heroes else None

    return ContentResource(
        first_hero,
        initial=None,
        fallback_message="Failed to fetch hero content",
        record_errors=False,
        name="hero_content",
    )


def benefits_resource(service: ContentService) -> ContentResource[list[Benefit]]:
    return ContentResource(
        service.get_benefits,
        initial=[],
        fallback_message="Failed to fetch benefits",
        name="benefits",
    )


def contact_page_resource(service: ContentService) -> ContentResource[ContactPage | None]:
    return ContentResource(
        service.get_contact_page_content,
        initial=None,
        fallback_message="Failed to fetch contact content",
        name="contact_page",
    )


def about_page_resource(service: ContentService) -> ContentResource[AboutPage | None]:
    return ContentResource(
        service.get_about_page_content,
        initial=None,
        fallback_message="Failed to fetch about content",
        name="about_page",
    )


def home_page_resource(service: ContentService) -> ContentResource[HomePage | None]:
    return ContentResource(
        service.get_home_page_content,
        initial=None,
        fallback_message="Failed to fetch home content",
        name="home_page",
    )


def search_resource(service: ContentService) -> ContentResource[list[ContentRecord]]:
    """Bind with `load(content_type, search_query)`.

    A blank search term resolves to an empty list without calling the service.
    """

    async def search(content_type: str, query: SearchQuery) -> list[ContentRecord]:
        if query.is_blank:
            return []
        return await service.search_content(content_type, query)

    return ContentResource(
        search,
        initial=[],
        fallback_message="Failed to search content",
        name="search",
    )


def paginated_resource(service: ContentService) -> ContentResource[PaginatedEntries]:
    """Bind with `load(content_type, page, page_size, **options)`."""
    return ContentResource(
        service.get_paginated_entries,
        initial=PaginatedEntries(),
        fallback_message="Failed to fetch paginated content",
        name="paginated",
    )
