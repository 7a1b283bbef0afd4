"""Re-exports the content record models."""

from phoneguard.models.content import (
    CONTENT_MODELS,
    AboutPage,
    Benefit,
    ContactPage,
    ContentRecord,
    Entry,
    HeroSection,
    HomePage,
    InsurancePlan,
    PageContent,
    PaginatedEntries,
    PhoneModel,
    PlanFeatures,
    PriceRange,
    SearchQuery,
    Testimonial,
    model_for,
)

__all__ = [
    "CONTENT_MODELS",
    "AboutPage",
    "Benefit",
    "ContactPage",
    "ContentRecord",
    "Entry",
    "HeroSection",
    "HomePage",
    "InsurancePlan",
    "PageContent",
    "PaginatedEntries",
    "PhoneModel",
    "PlanFeatures",
    "PriceRange",
    "SearchQuery",
    "Testimonial",
    "model_for",
]
