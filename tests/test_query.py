"""Tests for ContentQueryOptions translation into query-builder calls."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from phoneguard.content.query import TRANSLATION_STEPS, ContentQueryOptions, apply_options
from phoneguard.protocols import QueryPort


def _query(fake_stack):
    return fake_stack.content_type("testimonials").query()


class TestOrdering:
    def test_descending_prefix(self, fake_stack):
        """A leading "-" sorts descending."""
        query = apply_options(_query(fake_stack), ContentQueryOptions(order="-created_at"))
        assert query.calls == [("descending", "created_at")]

    def test_plain_field_is_ascending(self, fake_stack):
        """A bare field sorts ascending."""
        query = apply_options(_query(fake_stack), ContentQueryOptions(order="order"))
        assert query.calls == [("ascending", "order")]


class TestTranslation:
    def test_empty_options_make_no_calls(self, fake_stack):
        """Default options configure nothing."""
        query = apply_options(_query(fake_stack), ContentQueryOptions())
        assert query.calls == []

    def test_steps_applied_in_fixed_order(self, fake_stack):
        """Steps run in table order regardless of option order."""
        options = ContentQueryOptions(
            include_fallback=True,
            include_content_type=True,
            include_count=True,
            locale="en-us",
            order="-created_at",
            skip=20,
            limit=10,
            **{"except": ["internal_notes"]},
            only=["title", "rating"],
            include=["author", "author.avatar"],
            where={"is_featured": True, "rating": {"$gte": 4}},
        )
        query = apply_options(_query(fake_stack), options)
        assert query.calls == [
            ("where", ("is_featured", True)),
            ("where", ("rating", {"$gte": 4})),
            ("include_reference", "author"),
            ("include_reference", "author.avatar"),
            ("only", ["title", "rating"]),
            ("excepts", ["internal_notes"]),
            ("limit", 10),
            ("skip", 20),
            ("descending", "created_at"),
            ("language", "en-us"),
            ("include_count", None),
            ("include_content_type", None),
            ("include_fallback", None),
        ]

    def test_operator_conditions_pass_through_verbatim(self, fake_stack):
        """Operator dictionaries reach the query untouched."""
        or_clause = [{"title": {"$regex": "iphone", "$options": "i"}}]
        query = apply_options(
            _query(fake_stack),
            ContentQueryOptions(where={"$or": or_clause, "price": {"$gte": 10, "$lte": 30}}),
        )
        assert query.where_conditions == {
            "$or": or_clause,
            "price": {"$gte": 10, "$lte": 30},
        }

    def test_none_where_values_are_skipped(self, fake_stack):
        """None-valued conditions are dropped."""
        query = apply_options(
            _query(fake_stack), ContentQueryOptions(where={"brand": "Apple", "model": None})
        )
        assert query.where_conditions == {"brand": "Apple"}

    def test_zero_skip_is_applied(self, fake_stack):
        """skip=0 is still sent."""
        query = apply_options(_query(fake_stack), ContentQueryOptions(limit=5, skip=0))
        assert query.calls == [("limit", 5), ("skip", 0)]

    def test_false_toggles_are_not_applied(self, fake_stack):
        """False toggles make no calls."""
        query = apply_options(
            _query(fake_stack),
            ContentQueryOptions(include_count=False, include_fallback=False, include=[]),
        )
        assert query.calls == []

    def test_only_and_except_both_forwarded(self, fake_stack):
        """only and except are both forwarded."""
        query = apply_options(
            _query(fake_stack),
            ContentQueryOptions(only=["title"], except_=["title"]),
        )
        assert query.calls == [("only", ["title"]), ("excepts", ["title"])]

    def test_returns_same_query(self, fake_stack):
        query = _query(fake_stack)
        assert apply_options(query, ContentQueryOptions(limit=1)) is query

    def test_fake_satisfies_protocol(self, fake_stack):
        assert isinstance(_query(fake_stack), QueryPort)

    def test_step_table_is_explicit(self):
        """The step table lists every step by name."""
        assert [name for name, _ in TRANSLATION_STEPS] == [
            "where",
            "include",
            "projection",
            "bounds",
            "order",
            "locale",
            "toggles",
        ]


class TestOptionsValidation:
    def test_out_of_range_bounds_pass_through(self, fake_stack):
        """limit=0 and a negative skip are forwarded, not rejected."""
        query = apply_options(_query(fake_stack), ContentQueryOptions(limit=0, skip=-1))
        assert query.calls == [("limit", 0), ("skip", -1)]

    def test_options_are_frozen(self):
        options = ContentQueryOptions(limit=3)
        with pytest.raises(ValidationError):
            options.limit = 4  # type: ignore[misc]
