"""Typed records for Contentstack content types.

Each record is tagged with a literal `content_type`. Every CMS field is
optional because editors can leave any of them blank; fields unknown to the
model are kept (`extra="allow"`) so nothing the CMS sends is lost.
"""

from __future__ import annotations

import math
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny, computed_field


class ContentRecord(BaseModel):
    """Common configuration for CMS-backed records."""

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    uid: str | None = None


class Link(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    title: str | None = None
    href: str | None = None


# --- Collections ---


class Testimonial(ContentRecord):
    content_type: Literal["testimonials"] = "testimonials"

    content: str | None = None
    author_name: str | None = None
    rating: int | None = None
    is_featured: bool | None = None
    created_at: str | None = None
    author: list[dict[str, Any]] | dict[str, Any] | None = None


class PlanFeatures(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    theft: bool = False
    screen_repair: bool = False
    water_damage: bool = False
    upgrade_option: bool = False


class InsurancePlan(ContentRecord):
    """A monthly insurance plan for one phone model."""

    content_type: Literal["insurance_plan"] = "insurance_plan"

    title: str | None = None
    brand: str | None = None
    model: str | None = None
    price: float | None = Field(default=None, description="Monthly premium")
    deductible: float | None = None
    is_featured: bool | None = None
    features: PlanFeatures | None = None
    created_at: str | None = None


class PhoneModel(ContentRecord):
    model_config = ConfigDict(
        frozen=True, extra="allow", populate_by_name=True, protected_namespaces=()
    )

    content_type: Literal["phone_model"] = "phone_model"

    brand: str | None = None
    model_name: str | None = None
    specifications: list[dict[str, Any]] | dict[str, Any] | None = None


class HeroSection(ContentRecord):
    content_type: Literal["hero_section"] = "hero_section"

    page: str | None = None
    title: str | None = None
    subtitle: str | None = None
    background_image: dict[str, Any] | None = None
    cta_button: list[dict[str, Any]] | dict[str, Any] | None = None


class Benefit(ContentRecord):
    content_type: Literal["benefits"] = "benefits"

    title: str | None = None
    description: str | None = None
    icon: str | None = None
    page: str | None = None
    order: int | None = None
    is_featured: bool | None = None


class Entry(ContentRecord):
    """Entry of a content type without a dedicated record."""

    content_type: str = ""

    title: str | None = None


# --- Single-entry page bundles ---


class PageContent(ContentRecord):
    content_type: Literal["page_content"] = "page_content"

    page_slug: str | None = None
    title: str | None = None
    body: str | None = None
    seo_settings: list[dict[str, Any]] | dict[str, Any] | None = None
    related_pages: list[dict[str, Any]] | None = None


class ContactDetail(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    type: str | None = None
    note: str | None = None
    contact_info: str | None = None


class ChatDetails(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    title: str | None = None
    description: str | None = None
    cta_title: str | None = None
    cta_link: Link | None = None
    icon: list[dict[str, Any]] | dict[str, Any] | str | None = None


class DayHours(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    day: str | None = None
    hours: str | None = None


class BusinessHours(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    title: str | None = None
    day_and_hours: list[DayHours] = Field(default_factory=list)


class ContactPage(ContentRecord):
    content_type: Literal["contact_us_page"] = "contact_us_page"

    title: str | None = None
    description: str | None = None
    contact_title: str | None = None
    contact_details: list[ContactDetail] = Field(default_factory=list)
    chat_details: ChatDetails | None = None
    # The CMS field is spelled "bussiness_hours"
    business_hours: BusinessHours | None = Field(default=None, alias="bussiness_hours")


class StatsCard(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    stats_count: str | None = None
    stats_title: str | None = None


class ValueCard(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    uid: str | None = None
    title: str | None = None
    description: str | None = None
    icon: str | None = None


class AboutPage(ContentRecord):
    content_type: Literal["about_page"] = "about_page"

    title: str | None = None
    description: str | None = None
    mission_title: str | None = None
    mission_description: str | None = None
    story_title: str | None = None
    story_description: str | None = None
    # The CMS field is spelled "values_titlle"
    values_title: str | None = Field(default=None, alias="values_titlle")
    stats_cards: list[StatsCard] = Field(default_factory=list)
    values_references: list[ValueCard] = Field(default_factory=list)


class HeroBanner(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    banner_title: str | None = None
    banner_description: str | None = None
    banner_image: dict[str, Any] | str | None = None
    call_to_action_1: Link | None = None
    call_to_action_2: Link | None = None


class ServiceSection(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    title: str | None = None
    description: str | None = None
    services: list[str] = Field(default_factory=list)


class FeaturesSection(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    features_title: str | None = None
    features_description: str | None = None
    benefits_reference: list[Benefit] = Field(default_factory=list)


class TestimonialsSection(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    title: str | None = None
    description: str | None = None
    testimonials_reference: list[Testimonial] = Field(default_factory=list)


class CallToActionSection(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    title: str | None = None
    description: str | None = None
    cta_link: Link | None = None


class HomePage(ContentRecord):
    content_type: Literal["home_page"] = "home_page"

    title: str | None = None
    hero_banner: HeroBanner | None = None
    service_section: ServiceSection | None = None
    features_section: FeaturesSection | None = None
    testimonials_section: TestimonialsSection | None = None
    cta_section: CallToActionSection | None = None


# --- Query helpers ---


class PriceRange(BaseModel):
    """Inclusive monthly-premium bounds; a missing bound is open."""

    model_config = ConfigDict(frozen=True)

    min: float | None = None
    max: float | None = None


class SearchQuery(BaseModel):
    """Free-text search over selected fields of one content type."""

    model_config = ConfigDict(frozen=True)

    search_term: str = ""
    search_fields: list[str] = Field(default_factory=list)
    filters: dict[str, Any] | None = None
    limit: int | None = None
    skip: int | None = None
    locale: str | None = None

    @property
    def is_blank(self) -> bool:
        return not self.search_term.strip()


class PaginatedEntries(BaseModel):
    """One page of entries plus the numbers needed to render a pager."""

    model_config = ConfigDict(frozen=True)

    entries: list[SerializeAsAny[ContentRecord]] = Field(default_factory=list)
    total_count: int = Field(default=0, ge=0)
    current_page: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size)


CONTENT_MODELS: dict[str, type[ContentRecord]] = {
    "testimonials": Testimonial,
    "insurance_plan": InsurancePlan,
    "phone_model": PhoneModel,
    "hero_section": HeroSection,
    "benefits": Benefit,
    "page_content": PageContent,
    "contact_us_page": ContactPage,
    "about_page": AboutPage,
    "home_page": HomePage,
}


def model_for(content_type: str) -> type[ContentRecord]:
    """Record class for *content_type*; unknown types map to `Entry`."""
    return CONTENT_MODELS.get(content_type, Entry)
