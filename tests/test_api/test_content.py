"""Tests for the content API endpoints."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from conftest import FakeStack
    from fastapi.testclient import TestClient


class TestCollections:
    def test_testimonials_from_mock(self, client: TestClient):
        resp = client.get("/api/v1/content/testimonials", params={"featured": True, "limit": 3})
        assert resp.status_code == 200
        data = resp.json()
        assert [t["author_name"] for t in data] == ["Jane D.", "Mark S."]
        assert all(t["content_type"] == "testimonials" for t in data)

    def test_testimonials_query_forwarded(self, cms_client: TestClient, fake_stack: FakeStack):
        fake_stack.envelope = [[{"uid": "t1", "content": "Quick payout", "rating": 5}]]
        resp = cms_client.get(
            "/api/v1/content/testimonials", params={"featured": True, "rating": 4}
        )
        assert resp.status_code == 200
        assert resp.json()[0]["uid"] == "t1"
        assert fake_stack.last_query.where_conditions == {
            "is_featured": True,
            "rating": {"$gte": 4},
        }

    def test_rating_out_of_range_rejected(self, client: TestClient):
        resp = client.get("/api/v1/content/testimonials", params={"rating": 9})
        assert resp.status_code == 422

    def test_plans_price_bounds(self, cms_client: TestClient, fake_stack: FakeStack):
        resp = cms_client.get(
            "/api/v1/content/plans", params={"brand": "Apple", "min_price": 10}
        )
        assert resp.status_code == 200
        assert fake_stack.last_query.where_conditions == {
            "brand": "Apple",
            "price": {"$gte": 10.0},
        }

    def test_plans_from_mock(self, client: TestClient):
        data = client.get("/api/v1/content/plans").json()
        assert len(data) == 10
        assert {"theft", "screen_repair", "water_damage", "upgrade_option"} <= set(
            data[0]["features"]
        )

    def test_phones(self, cms_client: TestClient, fake_stack: FakeStack):
        resp = cms_client.get("/api/v1/content/phones", params={"brand": "Google"})
        assert resp.status_code == 200
        assert fake_stack.last_query.content_type == "phone_model"

    def test_hero_without_content_is_empty_list(self, client: TestClient):
        resp = client.get("/api/v1/content/hero/plans")
        assert resp.status_code == 200
        assert resp.json() == []

    def test_benefits(self, cms_client: TestClient, fake_stack: FakeStack):
        fake_stack.envelope = [[{"uid": "b1", "title": "Fast Claims", "order": 1}]]
        data = cms_client.get("/api/v1/content/benefits", params={"page": "home"}).json()
        assert data[0]["title"] == "Fast Claims"
        assert ("ascending", "order") in fake_stack.last_query.calls


class TestPages:
    def test_contact_keeps_cms_field_names(self, client: TestClient):
        data = client.get("/api/v1/content/contact").json()
        assert data["title"] == "Get in Touch"
        assert data["bussiness_hours"]["title"] == "Business Hours"

    def test_about(self, client: TestClient):
        data = client.get("/api/v1/content/about").json()
        assert data["values_titlle"] == "Our Values"

    def test_home(self, client: TestClient):
        data = client.get("/api/v1/content/home").json()
        assert data["hero_banner"]["call_to_action_1"]["href"] == "/plans"

    def test_missing_page_is_404(self, client: TestClient):
        resp = client.get("/api/v1/content/pages/faq")
        assert resp.status_code == 404
        assert "faq" in resp.json()["detail"]

    def test_page_by_slug(self, cms_client: TestClient, fake_stack: FakeStack):
        fake_stack.envelope = [[{"uid": "p1", "page_slug": "faq", "title": "FAQ"}]]
        resp = cms_client.get("/api/v1/content/pages/faq")
        assert resp.status_code == 200
        assert resp.json()["title"] == "FAQ"

    def test_cms_failure_still_serves_content(
        self, cms_client: TestClient, fake_stack: FakeStack
    ):
        fake_stack.error = ConnectionError("CMS unreachable")
        resp = cms_client.get("/api/v1/content/contact")
        assert resp.status_code == 200
        assert resp.json()["title"] == "Get in Touch"


class TestSearch:
    def test_blank_query_returns_nothing(self, cms_client: TestClient, fake_stack: FakeStack):
        resp = cms_client.get("/api/v1/content/search/insurance_plan", params={"q": "  "})
        assert resp.status_code == 200
        assert resp.json()["results"] == []
        assert resp.json()["total"] == 0
        assert fake_stack.find_calls == 0

    def test_search_with_fields_and_filters(self, cms_client: TestClient, fake_stack: FakeStack):
        fake_stack.envelope = [[{"uid": "p1", "title": "Premium", "brand": "Apple"}]]
        resp = cms_client.get(
            "/api/v1/content/search/insurance_plan",
            params={
                "q": "prem",
                "fields": ["title", "model"],
                "filters": json.dumps({"brand": "Apple"}),
            },
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["total"] == 1
        assert data["results"][0]["brand"] == "Apple"
        conditions = fake_stack.last_query.where_conditions
        assert conditions["brand"] == "Apple"
        assert [list(c) for c in conditions["$or"]] == [["title"], ["model"]]

    def test_invalid_filters_json_is_400(self, client: TestClient):
        resp = client.get(
            "/api/v1/content/search/insurance_plan", params={"q": "x", "filters": "{broken"}
        )
        assert resp.status_code == 400
        assert resp.json()["error"] == "bad_request"

    def test_filters_must_be_object(self, client: TestClient):
        resp = client.get(
            "/api/v1/content/search/insurance_plan", params={"q": "x", "filters": "[1, 2]"}
        )
        assert resp.status_code == 400
        assert "filters" in resp.json()["detail"]


class TestEntries:
    def test_paginated_page(self, cms_client: TestClient, fake_stack: FakeStack):
        fake_stack.envelope = [[{"uid": str(i)} for i in range(10)], 25]
        resp = cms_client.get(
            "/api/v1/content/entries/testimonials", params={"page": 1, "page_size": 10}
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["total_count"] == 25
        assert data["total_pages"] == 3
        assert len(data["entries"]) == 10

    def test_empty_second_page(self, cms_client: TestClient, fake_stack: FakeStack):
        fake_stack.envelope = [[], 0]
        data = cms_client.get(
            "/api/v1/content/entries/testimonials", params={"page": 2, "page_size": 5}
        ).json()
        assert data["entries"] == []
        assert data["total_pages"] == 0
        assert data["current_page"] == 2
        assert ("skip", 5) in fake_stack.last_query.calls

    def test_where_json_forwarded(self, cms_client: TestClient, fake_stack: FakeStack):
        fake_stack.envelope = [[], 0]
        cms_client.get(
            "/api/v1/content/entries/insurance_plan",
            params={"where": json.dumps({"brand": "Samsung"}), "order": "-price"},
        )
        query = fake_stack.last_query
        assert query.where_conditions == {"brand": "Samsung"}
        assert ("descending", "price") in query.calls

    def test_page_zero_rejected(self, client: TestClient):
        resp = client.get("/api/v1/content/entries/testimonials", params={"page": 0})
        assert resp.status_code == 422

    def test_page_size_capped(self, client: TestClient):
        resp = client.get("/api/v1/content/entries/testimonials", params={"page_size": 500})
        assert resp.status_code == 422


class TestContentSource:
    def test_unconfigured_requests_report_mock(self, client: TestClient):
        """Responses say when they were served from the built-in fixtures."""
        resp = client.get("/api/v1/content/testimonials")
        assert resp.headers["X-Content-Source"] == "mock_unconfigured"

    def test_cms_requests_report_cms(self, cms_client: TestClient):
        """Live CMS answers are labelled as such."""
        resp = cms_client.get("/api/v1/content/benefits")
        assert resp.headers["X-Content-Source"] == "cms"

    def test_cms_failure_reports_mock_error(self, cms_client: TestClient, fake_stack: FakeStack):
        """A fallback after a failed CMS call is visible to the caller."""
        fake_stack.error = ConnectionError("CMS unreachable")
        resp = cms_client.get("/api/v1/content/about")
        assert resp.status_code == 200
        assert resp.headers["X-Content-Source"] == "mock_error"

    def test_no_fetch_no_source(self, cms_client: TestClient):
        """Routes that never touch content carry no source header."""
        resp = cms_client.get("/api/v1/health")
        assert "X-Content-Source" not in resp.headers

    def test_blank_search_has_no_source(self, cms_client: TestClient):
        """A short-circuited search never reaches the fetcher."""
        resp = cms_client.get("/api/v1/content/search/insurance_plan", params={"q": ""})
        assert "X-Content-Source" not in resp.headers

    def test_error_body_carries_correlation_id(self, client: TestClient):
        """400 bodies echo the request's correlation id."""
        resp = client.get(
            "/api/v1/content/entries/testimonials",
            params={"where": "not json"},
            headers={"X-Correlation-ID": "req-42"},
        )
        assert resp.status_code == 400
        assert resp.json()["correlation_id"] == "req-42"
        assert "where" in resp.json()["detail"]
