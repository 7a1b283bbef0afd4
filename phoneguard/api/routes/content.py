"""Content endpoints, one per accessor.

These routes never fail because the CMS is down: the accessors answer with
mock content instead. Single-entry routes return 404 only when neither the
CMS nor the mock fixtures have the entry.
"""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, HTTPException, Query

from phoneguard.api.deps import FiltersDep, ServiceDep, WhereDep
from phoneguard.api.schemas import SearchResponse
from phoneguard.models.content import (
    AboutPage,
    Benefit,
    ContactPage,
    HeroSection,
    HomePage,
    InsurancePlan,
    PageContent,
    PaginatedEntries,
    PhoneModel,
    PriceRange,
    SearchQuery,
    Testimonial,
)

router = APIRouter(prefix="/content", tags=["content"])


def _found(entry: Any, what: str) -> Any:
    if entry is None:
        raise HTTPException(status_code=404, detail=f"No {what} content available")
    return entry


@router.get("/testimonials", response_model=list[Testimonial])
async def testimonials(
    service: ServiceDep,
    featured: bool = False,
    limit: Annotated[int | None, Query(gt=0)] = None,
    rating: Annotated[int | None, Query(ge=1, le=5)] = None,
    include_author: bool = False,
    locale: str | None = None,
) -> list[Testimonial]:
    return await service.get_testimonials(
        featured,
        limit=limit,
        rating=rating,
        include_author=include_author,
        locale=locale,
    )


@router.get("/plans", response_model=list[InsurancePlan])
async def plans(
    service: ServiceDep,
    brand: str | None = None,
    model: str | None = None,
    featured: bool = False,
    limit: Annotated[int | None, Query(gt=0)] = None,
    min_price: Annotated[float | None, Query(ge=0)] = None,
    max_price: Annotated[float | None, Query(ge=0)] = None,
) -> list[InsurancePlan]:
    price_range = None
    if min_price is not None or max_price is not None:
        price_range = PriceRange(min=min_price, max=max_price)
    return await service.get_insurance_plans(
        brand, model, limit=limit, featured=featured, price_range=price_range
    )


@router.get("/phones", response_model=list[PhoneModel])
async def phones(
    service: ServiceDep,
    brand: str | None = None,
    limit: Annotated[int | None, Query(gt=0)] = None,
    include_specs: bool = False,
) -> list[PhoneModel]:
    return await service.get_phone_models(brand, limit=limit, include_specs=include_specs)


@router.get("/hero/{page}", response_model=list[HeroSection])
async def hero(
    page: str,
    service: ServiceDep,
    locale: str | None = None,
    include_assets: bool = False,
) -> list[HeroSection]:
    return await service.get_hero_content(page, locale=locale, include_assets=include_assets)


@router.get("/benefits", response_model=list[Benefit])
async def benefits(
    service: ServiceDep,
    page: str | None = None,
    featured: bool = False,
    limit: Annotated[int | None, Query(gt=0)] = None,
    locale: str | None = None,
) -> list[Benefit]:
    return await service.get_benefits(page, limit=limit, featured=featured, locale=locale)


@router.get("/pages/{slug}", response_model=PageContent)
async def page_content(
    slug: str,
    service: ServiceDep,
    locale: str | None = None,
    include_references: bool = False,
) -> PageContent:
    entry = await service.get_page_content(
        slug, locale=locale, include_references=include_references
    )
    return _found(entry, f"page '{slug}'")


@router.get("/contact", response_model=ContactPage)
async def contact(
    service: ServiceDep,
    locale: str | None = None,
    include_references: bool = False,
) -> ContactPage:
    entry = await service.get_contact_page_content(
        locale=locale, include_references=include_references
    )
    return _found(entry, "contact page")


@router.get("/about", response_model=AboutPage)
async def about(
    service: ServiceDep,
    locale: str | None = None,
    include_values: bool = False,
) -> AboutPage:
    entry = await service.get_about_page_content(locale=locale, include_values=include_values)
    return _found(entry, "about page")


@router.get("/home", response_model=HomePage)
async def home(
    service: ServiceDep,
    locale: str | None = None,
    include_references: bool = False,
) -> HomePage:
    entry = await service.get_home_page_content(
        locale=locale, include_references=include_references
    )
    return _found(entry, "home page")


@router.get("/search/{content_type}", response_model=SearchResponse)
async def search(
    content_type: str,
    service: ServiceDep,
    filters: FiltersDep,
    q: str = "",
    fields: Annotated[list[str] | None, Query()] = None,
    limit: Annotated[int | None, Query(gt=0)] = None,
    skip: Annotated[int | None, Query(ge=0)] = None,
    locale: str | None = None,
) -> SearchResponse:
    query = SearchQuery(
        search_term=q,
        search_fields=fields or ["title"],
        filters=filters,
        limit=limit,
        skip=skip,
        locale=locale,
    )
    results = await service.search_content(content_type, query)
    return SearchResponse(
        content_type=content_type,
        search_term=q,
        results=results,
        total=len(results),
    )


@router.get("/entries/{content_type}", response_model=PaginatedEntries)
async def entries(
    content_type: str,
    service: ServiceDep,
    where: WhereDep,
    page: Annotated[int, Query(ge=1)] = 1,
    page_size: Annotated[int, Query(ge=1, le=100)] = 10,
    order: str | None = None,
    include: Annotated[list[str] | None, Query()] = None,
    locale: str | None = None,
) -> PaginatedEntries:
    return await service.get_paginated_entries(
        content_type,
        page,
        page_size,
        where=where,
        order=order,
        include=include,
        locale=locale,
    )
