"""Static substitute payloads served when Contentstack is unavailable.

Fixtures mirror the field layout of the real content types, including the
CMS's own field names. They are defined once at import time and only ever
handed out as deep copies.
"""

from __future__ import annotations

import copy
from types import MappingProxyType
from typing import Any

_TESTIMONIALS: list[dict[str, Any]] = [
    {"content": "Fantastic service, quick repair!", "author_name": "Jane D."},
    {"content": "Saved me hundreds after my phone was stolen!", "author_name": "Mark S."},
]

_CONTACT_US_PAGE: dict[str, Any] = {
    "title": "Get in Touch",
    "description": (
        "Have questions about our insurance plans or need help with a claim? "
        "We're here to help you every step of the way."
    ),
    "contact_title": "Contact Information",
    "contact_details": [
        {
            "type": "Phone",
            "note": "Available 24/7 for emergencies",
            "contact_info": "1-800-GUARD-ME (1-800-482-7363)",
        },
        {
            "type": "Email",
            "note": "Response within 24 hours",
            "contact_info": "support@phoneguard.com",
        },
        {
            "type": "Office",
            "note": "",
            "contact_info": "123 Insurance Plaza New York, NY 10001",
        },
    ],
    "chat_details": {
        "title": "Live Chat Support",
        "description": "Get instant help from our support team",
        "cta_title": "Start Live Chat",
        "cta_link": {"title": "Start Live Chat", "href": "/"},
    },
    "bussiness_hours": {
        "title": "Business Hours",
        "day_and_hours": [
            {"day": "Monday - Friday", "hours": "8:00 AM - 8:00 PM EST"},
            {"day": "Saturday", "hours": "9:00 AM - 5:00 PM EST"},
            {"day": "Sunday", "hours": "10:00 AM - 4:00 PM EST"},
        ],
    },
}

_ABOUT_PAGE: dict[str, Any] = {
    "title": "About PhoneGuard",
    "description": (
        "We're on a mission to make smartphone protection simple, affordable, and "
        "reliable. Since 2020, we've been protecting devices and providing peace of "
        "mind to customers nationwide."
    ),
    "mission_title": "Our Mission",
    "mission_description": (
        "At PhoneGuard, we believe everyone deserves peace of mind when it comes to "
        "their smartphone. We've built our company around the simple idea that "
        "insurance should be transparent, affordable, and actually there when you "
        "need it.\n\n"
        "Our team of insurance experts and technology professionals work tirelessly "
        "to provide the best possible experience for our customers. From our "
        "streamlined claims process to our 24/7 customer support, everything we do "
        "is designed with you in mind."
    ),
    "story_title": "Our Story",
    "story_description": (
        "PhoneGuard was founded in 2020 by a team of insurance and technology "
        "professionals who experienced firsthand the frustration of traditional "
        "device insurance. After dealing with complicated claims processes, hidden "
        "fees, and poor customer service, they knew there had to be a better way.\n\n"
        "Starting with a simple mission - to make smartphone insurance transparent "
        "and customer-friendly - PhoneGuard has grown from a small startup to a "
        "trusted name in device protection. We've processed over 100,000 claims and "
        "protected more than 500,000 devices nationwide.\n\n"
        "Today, we continue to innovate and improve our services, always keeping our "
        "customers at the center of everything we do. Whether you're protecting your "
        "first smartphone or your tenth, we're here to provide the coverage you need "
        "and the service you deserve."
    ),
    "values_titlle": "Our Values",
    "stats_cards": [
        {"stats_count": "500K+", "stats_title": "Devices Protected"},
        {"stats_count": "99.5%", "stats_title": "Customer Satisfaction"},
        {"stats_count": "24/7", "stats_title": "Support Available"},
        {"stats_count": "48hrs", "stats_title": "Average Claim Time"},
    ],
    "values_references": [
        {
            "uid": "bltf0508c49f8b71497",
            "title": "Trust",
            "description": (
                "We build lasting relationships through transparent practices and "
                "reliable service."
            ),
            "icon": "Shield",
        },
        {
            "uid": "blt2c742864fc2df336",
            "title": "Customer Focus",
            "description": "Every decision we make is guided by what's best for our customers.",
            "icon": "Users",
        },
        {
            "uid": "blt12ae8db222572069",
            "title": "Excellence",
            "description": "We strive for excellence in everything we do, from service to support.",
            "icon": "Award",
        },
        {
            "uid": "blt082b617de8bb026b",
            "title": "Innovation",
            "description": "We continuously improve our services with cutting-edge technology.",
            "icon": "Target",
        },
        {
            "uid": "bltab4363c3b57f06bd",
            "title": "Care",
            "description": "We genuinely care about protecting what matters most to you.",
            "icon": "Heart",
        },
        {
            "uid": "bltf53794f5b2a6e0c9",
            "title": "Speed",
            "description": (
                "Fast claims processing and quick resolutions when you need them most."
            ),
            "icon": "Zap",
        },
    ],
}

_HOME_PAGE: dict[str, Any] = {
    "title": "Home Page",
    "hero_banner": {
        "banner_title": "Protect Your Phone, Protect Your Peace of Mind",
        "banner_description": (
            "From accidental damage to theft, get comprehensive coverage tailored to "
            "your device. Join thousands of satisfied customers who trust PhoneGuard."
        ),
        "banner_image": "",
        "call_to_action_1": {"title": "Get Free Quote", "href": "/plans"},
        "call_to_action_2": {"title": "Learn More", "href": "/about"},
    },
    "service_section": {
        "title": "Insurance Made Simple",
        "description": (
            "We believe smartphone insurance should be straightforward, affordable, and "
            "reliable. That's why we've built our service around transparency and "
            "customer satisfaction."
        ),
        "services": [
            "No hidden fees or surprise charges",
            "24/7 customer support",
            "Fast claim processing",
            "Nationwide coverage",
            "Multiple payment options",
            "Cancel anytime",
        ],
    },
    "features_section": {
        "features_title": "Why Choose PhoneGuard?",
        "features_description": (
            "We provide comprehensive smartphone protection with unmatched service and "
            "support."
        ),
        "benefits_reference": [
            {
                "uid": "blt5c5df5a125a04ddd",
                "title": "Comprehensive Coverage",
                "description": "Protection against accidental damage, theft, and malfunction",
                "icon": "Shield",
            },
            {
                "uid": "blt6de696ec07a253ba",
                "title": "24/7 Support",
                "description": "Round-the-clock customer service and claim assistance",
                "icon": "Phone",
            },
            {
                "uid": "bltf7791e125e23bd2f",
                "title": "Fast Claims",
                "description": "Quick processing and resolution of your insurance claims",
                "icon": "Clock",
            },
            {
                "uid": "blt603ecea7793e377f",
                "title": "Affordable Plans",
                "description": "Competitive pricing with no hidden fees",
                "icon": "DollarSign",
            },
        ],
    },
    "testimonials_section": {
        "title": "What Our Customers Say",
        "description": (
            "Join thousands of satisfied customers who trust PhoneGuard with their devices."
        ),
        "testimonials_reference": [
            {
                "uid": "blt01031b48a56817c8",
                "content": (
                    "PhoneGuard saved me over $800 when my phone was stolen. The claim "
                    "process was incredibly smooth!"
                ),
                "author_name": "Sarah J.",
                "rating": 5,
                "is_featured": True,
            },
            {
                "uid": "blta348733d164c943c",
                "content": "Best insurance service I've ever used. Quick, reliable, and affordable!",
                "author_name": "Mike R.",
                "rating": 5,
                "is_featured": True,
            },
            {
                "uid": "blt1571c0dccaee39bb",
                "content": (
                    "I was skeptical at first, but PhoneGuard exceeded my expectations. "
                    "Highly recommend!"
                ),
                "author_name": "Jessica L.",
                "rating": 5,
                "is_featured": True,
            },
            {
                "uid": "bltadcac6551349049a",
                "content": "Professional service and great coverage. Peace of mind is priceless!",
                "author_name": "David K.",
                "rating": 5,
                "is_featured": True,
            },
        ],
    },
    "cta_section": {
        "title": "Ready to Protect Your Phone?",
        "description": (
            "Get started with a free quote and see how affordable peace of mind can be."
        ),
        "cta_link": {"title": "Get Your Free Quote", "href": "/plans"},
    },
}


def _plan(
    uid: str,
    brand: str,
    model: str,
    title: str,
    price: float,
    deductible: int,
    *,
    full: bool,
) -> dict[str, Any]:
    return {
        "uid": uid,
        "title": title,
        "brand": brand,
        "model": model,
        "price": price,
        "deductible": deductible,
        "features": {
            "theft": True,
            "screen_repair": True,
            "water_damage": full,
            "upgrade_option": full,
        },
    }


# Two tiers per flagship device: basic (theft + screen) and full cover.
_INSURANCE_PLANS: list[dict[str, Any]] = [
    _plan("plan-1-iphone15promax", "Apple", "iPhone 15 Pro Max", "Basic Cover", 15.99, 99, full=False),
    _plan("plan-2-iphone15promax", "Apple", "iPhone 15 Pro Max", "Premium Protection", 29.99, 49, full=True),
    _plan("plan-3-galaxys24ultra", "Samsung", "Galaxy S24 Ultra", "Essential Plan", 18.50, 120, full=False),
    _plan("plan-4-galaxys24ultra", "Samsung", "Galaxy S24 Ultra", "Ultimate Coverage", 32.00, 60, full=True),
    _plan("plan-5-pixel8pro", "Google Pixel", "Pixel 8 Pro", "Standard Protection", 16.99, 89, full=False),
    _plan("plan-6-pixel8pro", "Google Pixel", "Pixel 8 Pro", "Complete Care", 27.99, 59, full=True),
    _plan("plan-7-oneplus12", "OnePlus", "OnePlus 12", "Basic Shield", 14.99, 95, full=False),
    _plan("plan-8-oneplus12", "OnePlus", "OnePlus 12", "Premium Shield", 24.99, 55, full=True),
    _plan("plan-9-xiaomi14ultra", "Xiaomi", "Xiaomi 14 Ultra", "Essential Guard", 13.99, 85, full=False),
    _plan("plan-10-xiaomi14ultra", "Xiaomi", "Xiaomi 14 Ultra", "Ultimate Guard", 22.99, 49, full=True),
]

_PHONE_CATALOG: dict[str, list[str]] = {
    "Apple": [
        "iPhone 15 Pro Max",
        "iPhone 15 Pro",
        "iPhone 15",
        "iPhone 14 Pro Max",
        "iPhone 14",
        "iPhone SE (3rd Gen)",
    ],
    "Samsung": [
        "Galaxy S24 Ultra",
        "Galaxy S24+",
        "Galaxy S24",
        "Galaxy Z Fold5",
        "Galaxy Z Flip5",
        "Galaxy A55",
    ],
    "Google Pixel": ["Pixel 8 Pro", "Pixel 8", "Pixel 8a", "Pixel 7a"],
    "OnePlus": ["OnePlus 12", "OnePlus 11", "OnePlus Nord 3", "OnePlus Nord CE 3"],
    "Xiaomi": ["Xiaomi 14 Ultra", "Xiaomi 14", "Redmi Note 13 Pro+", "Redmi Note 13"],
}

_PHONE_MODELS: list[dict[str, Any]] = [
    {"brand": brand, "model_name": name}
    for brand, names in _PHONE_CATALOG.items()
    for name in names
]

MOCK_FIXTURES: MappingProxyType[str, list[dict[str, Any]] | dict[str, Any]] = MappingProxyType(
    {
        "testimonials": _TESTIMONIALS,
        "contact_us_page": _CONTACT_US_PAGE,
        "about_page": _ABOUT_PAGE,
        "home_page": _HOME_PAGE,
        "insurance_plan": _INSURANCE_PLANS,
        "phone_model": _PHONE_MODELS,
    }
)

MOCK_CONTENT_TYPES: tuple[str, ...] = tuple(MOCK_FIXTURES)


def resolve_mock(content_type: str) -> list[dict[str, Any]] | dict[str, Any]:
    """Return the fixture for *content_type*, or an empty list when unknown."""
    fixture = MOCK_FIXTURES.get(content_type)
    if fixture is None:
        return []
    return copy.deepcopy(fixture)
