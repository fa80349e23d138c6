from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.deps import get_enricher_factory, get_searcher_factory
from searcher import OxylabsSearcher
from services.enrichment_service import DemoEnricher
from utils.errors import SearchProviderError


class StubSearcher:
    def __init__(self, data=None, error=None):
        self.data = data
        self.error = error
        self.calls = []

    def search(self, query, location, limit):
        self.calls.append((query, location, limit))
        if self.error:
            raise self.error
        return self.data


@pytest.fixture
def app(make_settings):
    return create_app(make_settings())


@pytest.fixture
def client(app):
    return TestClient(app)


def use_searcher(app, searcher):
    app.dependency_overrides[get_searcher_factory] = lambda: (lambda: searcher)


def test_search_end_to_end(app, client, search_payload):
    searcher = StubSearcher(search_payload([
        {
            "url": "https://www.linkedin.com/in/janedoe",
            "title": "Jane Doe - CEO - Acme | LinkedIn",
            "snippet": "CEO at Acme Corp in Austin",
        },
        {"url": "https://www.example.com/about", "title": "About", "snippet": "Not a profile"},
    ]))
    use_searcher(app, searcher)

    resp = client.post("/search", json={"designation": "CEO", "location": "Austin", "leadCount": 10})

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["count"] == 1
    assert body["industry"] == "general"
    assert body["source"] == "oxylabs"
    assert body["query"] == 'site:linkedin.com/in "CEO" "Austin"'
    [profile] = body["profiles"]
    assert profile["name"] == "Jane Doe"
    assert profile["company"] == "Acme Corp"
    assert profile["profileUrl"] == "https://www.linkedin.com/in/janedoe"
    assert profile["apolloEnriched"] is False
    assert searcher.calls == [('site:linkedin.com/in "CEO" "Austin"', "Austin", 10)]


def test_search_with_industry_adds_role_keywords(app, client, search_payload):
    searcher = StubSearcher(search_payload([]))
    use_searcher(app, searcher)
    resp = client.post("/search", json={"designation": "CTO", "location": "Berlin", "industry": "technology"})
    assert resp.status_code == 200
    assert resp.json()["industry"] == "technology"
    assert '("Software Engineer" OR "Developer" OR "Data Scientist")' in resp.json()["query"]
    assert searcher.calls[0][2] == 10


@pytest.mark.parametrize("body", [{"location": "Austin"}, {"designation": "CEO"}, {"designation": "  ", "location": "Austin"}, {}])
def test_search_requires_designation_and_location(client, body):
    resp = client.post("/search", json=body)
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "error": "Designation and location are required"}


def test_search_validates_before_credentials(client):
    # No credentials configured in tests; missing input still wins
    resp = client.post("/search", json={"designation": "CEO"})
    assert resp.status_code == 400


def test_search_without_credentials_is_500(client):
    resp = client.post("/search", json={"designation": "CEO", "location": "Austin"})
    assert resp.status_code == 500
    assert resp.json()["success"] is False
    assert "not configured" in resp.json()["error"]


def test_search_provider_failure_is_500(app, client):
    use_searcher(app, StubSearcher(error=SearchProviderError("Oxylabs API error: 503")))
    resp = client.post("/search", json={"designation": "CEO", "location": "Austin"})
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "error": "Search failed: Oxylabs API error: 503"}


def test_search_rejects_bad_lead_count(client):
    resp = client.post("/search", json={"designation": "CEO", "location": "Austin", "leadCount": 0})
    assert resp.status_code == 400
    assert resp.json()["success"] is False


def test_searcher_factory_uses_configured_credentials(make_settings):
    from api.deps import get_searcher_factory as factory

    make = factory(make_settings(oxylabs_username="u", oxylabs_password="p"))
    assert isinstance(make(), OxylabsSearcher)


@pytest.mark.parametrize("body", [{}, {"profiles": "nope"}, {"profiles": [1, 2]}, [{"name": "x"}]])
def test_enrich_requires_profiles_array(client, body):
    resp = client.post("/enrich", json=body)
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "error": "Profiles array is required"}


def test_enrich_demo_mode(client):
    profiles = [
        {"id": i, "name": f"Lead {i}", "company": "Acme", "profileUrl": f"https://linkedin.com/in/lead{i}"}
        for i in range(12)
    ]
    resp = client.post("/enrich", json={"profiles": profiles})

    assert resp.status_code == 200
    body = resp.json()
    assert body["mode"] == "demo"
    assert body["count"] == 8
    assert body["note"] == "Add APOLLO_API_KEY for verified contact data"
    assert body["emailStats"] == {"total": 8, "withEmail": 8, "highConfidence": 0, "verified": 0}
    assert body["profiles"][0]["email"] == "lead.0@acme.example.com"
    assert all(p["apolloEnriched"] is False for p in body["profiles"])


def test_enrich_empty_list(app, client):
    app.dependency_overrides[get_enricher_factory] = lambda: (lambda: DemoEnricher(limit=5))
    resp = client.post("/enrich", json={"profiles": []})
    assert resp.status_code == 200
    assert resp.json()["count"] == 0
    assert resp.json()["profiles"] == []


def test_cors_preflight(client):
    resp = client.options(
        "/search",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "*"
    assert "POST" in resp.headers["access-control-allow-methods"]


def test_cors_header_on_error_response(client):
    resp = client.post("/search", json={}, headers={"Origin": "http://localhost:3000"})
    assert resp.status_code == 400
    assert resp.headers["access-control-allow-origin"] == "*"
