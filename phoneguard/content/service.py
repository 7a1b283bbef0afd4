"""Typed content accessors, one per content type.

Each accessor fixes its content type, turns its typed parameters into a
`where` mapping plus pass-through options, and delegates to the
ContentFetcher. None of them raise on CMS trouble: the fetcher has already
substituted mock data by the time results reach this layer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

import structlog
from pydantic import ValidationError

from phoneguard.content.query import ContentQueryOptions
from phoneguard.models.content import (
    AboutPage,
    Benefit,
    ContactPage,
    ContentRecord,
    HeroSection,
    HomePage,
    InsurancePlan,
    PageContent,
    PaginatedEntries,
    PhoneModel,
    Testimonial,
    model_for,
)

if TYPE_CHECKING:
    from phoneguard.content.fetcher import ContentFetcher
    from phoneguard.models.content import PriceRange, SearchQuery

logger = structlog.get_logger()

R = TypeVar("R", bound=ContentRecord)

TESTIMONIALS = "testimonials"
INSURANCE_PLAN = "insurance_plan"
PHONE_MODEL = "phone_model"
HERO_SECTION = "hero_section"
BENEFITS = "benefits"
PAGE_CONTENT = "page_content"
CONTACT_US_PAGE = "contact_us_page"
ABOUT_PAGE = "about_page"
HOME_PAGE = "home_page"


def _parse(model: type[R], content_type: str, raw: dict[str, Any]) -> R | None:
    try:
        return model.model_validate({**raw, "content_type": content_type})
    except ValidationError as exc:
        logger.warning(
            "content_entry_invalid",
            content_type=content_type,
            uid=raw.get("uid"),
            error=str(exc),
        )
        return None


def _parse_many(model: type[R], content_type: str, raw: list[dict[str, Any]]) -> list[R]:
    parsed = (_parse(model, content_type, entry) for entry in raw)
    return [record for record in parsed if record is not None]


class ContentService:
    """Content accessors for the PhoneGuard site."""

    def __init__(self, fetcher: ContentFetcher) -> None:
        self.fetcher = fetcher

    # ------------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------------

    async def get_testimonials(
        self,
        featured: bool | None = None,
        *,
        limit: int | None = None,
        include_author: bool = False,
        rating: int | None = None,
        locale: str | None = None,
    ) -> list[Testimonial]:
        """Testimonials, newest first.

        Args:
            featured: Only entries flagged `is_featured`.
            limit: Maximum number of entries.
            include_author: Resolve the `author` reference.
            rating: Minimum star rating.
            locale: Language variant, e.g. "en-us".
        """
        where: dict[str, Any] = {}
        if featured:
            where["is_featured"] = True
        if rating:
            where["rating"] = {"$gte": rating}

        raw = await self.fetcher.fetch_entries(
            TESTIMONIALS,
            ContentQueryOptions(
                where=where,
                limit=limit,
                include=["author"] if include_author else None,
                locale=locale,
                order="-created_at",
            ),
        )
        return _parse_many(Testimonial, TESTIMONIALS, raw)

    async def get_insurance_plans(
        self,
        brand: str | None = None,
        model: str | None = None,
        *,
        limit: int | None = None,
        featured: bool = False,
        price_range: PriceRange | None = None,
    ) -> list[InsurancePlan]:
        """Insurance plans for a phone brand/model, newest first.

        `price_range` filters on the monthly premium (`price`), bounds inclusive.

        Filters apply on the CMS only. The mock fallback is the whole plan
        catalog regardless of `brand`, `model`, `featured` or `price_range`.
        """
        where: dict[str, Any] = {}
        if brand:
            where["brand"] = brand
        if model:
            where["model"] = model
        if featured:
            where["is_featured"] = True
        if price_range is not None:
            bounds = {"$gte": price_range.min, "$lte": price_range.max}
            where["price"] = {op: v for op, v in bounds.items() if v is not None} or None

        raw = await self.fetcher.fetch_entries(
            INSURANCE_PLAN,
            ContentQueryOptions(where=where, limit=limit, order="-created_at"),
        )
        return _parse_many(InsurancePlan, INSURANCE_PLAN, raw)

    async def get_phone_models(
        self,
        brand: str | None = None,
        *,
        limit: int | None = None,
        include_specs: bool = False,
    ) -> list[PhoneModel]:
        where: dict[str, Any] = {"brand": brand} if brand else {}
        raw = await self.fetcher.fetch_entries(
            PHONE_MODEL,
            ContentQueryOptions(
                where=where,
                limit=limit,
                include=["specifications"] if include_specs else None,
                order="model_name",
            ),
        )
        return _parse_many(PhoneModel, PHONE_MODEL, raw)

    async def get_hero_content(
        self,
        page: str,
        *,
        locale: str | None = None,
        include_assets: bool = False,
    ) -> list[HeroSection]:
        """Hero banners for *page*. An empty list means the page has no hero."""
        raw = await self.fetcher.fetch_entries(
            HERO_SECTION,
            ContentQueryOptions(
                where={"page": page},
                locale=locale,
                include=["background_image", "cta_button"] if include_assets else None,
            ),
        )
        return _parse_many(HeroSection, HERO_SECTION, raw)

    async def get_benefits(
        self,
        page: str | None = None,
        *,
        limit: int | None = None,
        featured: bool = False,
        locale: str | None = None,
    ) -> list[Benefit]:
        """Benefit cards in editor-defined `order`."""
        where: dict[str, Any] = {}
        if page:
            where["page"] = page
        if featured:
            where["is_featured"] = True

        raw = await self.fetcher.fetch_entries(
            BENEFITS,
            ContentQueryOptions(where=where, limit=limit, locale=locale, order="order"),
        )
        return _parse_many(Benefit, BENEFITS, raw)

    # ------------------------------------------------------------------
    # Single-entry page bundles
    # ------------------------------------------------------------------

    async def get_page_content(
        self,
        slug: str,
        *,
        locale: str | None = None,
        include_references: bool = False,
    ) -> PageContent | None:
        raw = await self.fetcher.fetch_entry(
            PAGE_CONTENT,
            ContentQueryOptions(
                where={"page_slug": slug},
                locale=locale,
                include=["related_pages", "seo_settings"] if include_references else None,
            ),
        )
        return _parse(PageContent, PAGE_CONTENT, raw) if raw is not None else None

    async def get_contact_page_content(
        self,
        *,
        locale: str | None = None,
        include_references: bool = False,
    ) -> ContactPage | None:
        raw = await self.fetcher.fetch_entry(
            CONTACT_US_PAGE,
            ContentQueryOptions(
                locale=locale,
                include=["chat_details.icon"] if include_references else None,
            ),
        )
        return _parse(ContactPage, CONTACT_US_PAGE, raw) if raw is not None else None

    async def get_about_page_content(
        self,
        *,
        locale: str | None = None,
        include_values: bool = False,
    ) -> AboutPage | None:
        raw = await self.fetcher.fetch_entry(
            ABOUT_PAGE,
            ContentQueryOptions(
                locale=locale,
                include=["values_references"] if include_values else None,
            ),
        )
        return _parse(AboutPage, ABOUT_PAGE, raw) if raw is not None else None

    async def get_home_page_content(
        self,
        *,
        locale: str | None = None,
        include_references: bool = False,
    ) -> HomePage | None:
        include = (
            [
                "features_section.benefits_reference",
                "testimonials_section.testimonials_reference",
            ]
            if include_references
            else None
        )
        raw = await self.fetcher.fetch_entry(
            HOME_PAGE, ContentQueryOptions(locale=locale, include=include)
        )
        return _parse(HomePage, HOME_PAGE, raw) if raw is not None else None

    # ------------------------------------------------------------------
    # Search and pagination
    # ------------------------------------------------------------------

    async def search_content(self, content_type: str, search: SearchQuery) -> list[ContentRecord]:
        """Case-insensitive pattern search across `search.search_fields`.

        Field conditions are OR-ed together and AND-ed with `search.filters`.
        A blank search term returns an empty list without querying the CMS.
        """
        if search.is_blank:
            return []

        where: dict[str, Any] = dict(search.filters or {})
        if search.search_fields:
            where["$or"] = [
                {field: {"$regex": search.search_term, "$options": "i"}}
                for field in search.search_fields
            ]

        raw = await self.fetcher.fetch_entries(
            content_type,
            ContentQueryOptions(
                where=where,
                limit=search.limit,
                skip=search.skip,
                locale=search.locale,
            ),
        )
        return list(_parse_many(model_for(content_type), content_type, raw))

    async def get_paginated_entries(
        self,
        content_type: str,
        page: int = 1,
        page_size: int = 10,
        *,
        where: dict[str, Any] | None = None,
        order: str | None = None,
        include: list[str] | None = None,
        locale: str | None = None,
    ) -> PaginatedEntries:
        """One page of *content_type* entries, 1-based.

        Out-of-range `page`/`page_size` (below 1) yield an empty page
        without querying the CMS.
        """
        if page < 1 or page_size < 1:
            return PaginatedEntries(
                current_page=max(page, 1), page_size=max(page_size, 1)
            )

        raw, total = await self.fetcher.fetch_with_count(
            content_type,
            ContentQueryOptions(
                where=where,
                limit=page_size,
                skip=(page - 1) * page_size,
                order=order,
                include=include,
                locale=locale,
                include_count=True,
            ),
        )
        return PaginatedEntries(
            entries=_parse_many(model_for(content_type), content_type, raw),
            total_count=total,
            current_page=page,
            page_size=page_size,
        )
