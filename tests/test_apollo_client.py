from __future__ import annotations

import pytest

from services.apollo_client import ApolloClient
from utils.errors import EnrichmentProviderError


def client_with(make_settings, session):
    return ApolloClient("key-123", settings=make_settings(apollo_base_url="https://apollo.test"), session=session)


def test_match_person_sends_key_header_and_parses_person(make_settings, fake_session, fake_response):
    session = fake_session([fake_response(200, {"person": {"id": "p1", "email": "jane@acme.com"}})])
    client = client_with(make_settings, session)

    person = client.match_person("Jane", "Doe", organization_name="Acme", domain="acme.com")

    assert person.id == "p1"
    [call] = session.calls
    assert call["url"] == "https://apollo.test/api/v1/people/match"
    assert call["headers"]["X-Api-Key"] == "key-123"
    assert call["json"]["organization_name"] == "Acme"
    assert call["json"]["domain"] == "acme.com"
    assert "linkedin_url" not in call["json"]


def test_empty_match_is_none(make_settings, fake_session, fake_response):
    client = client_with(make_settings, fake_session([fake_response(200, {"person": None})]))
    assert client.match_person("Jane", "Doe") is None


def test_error_status_raises(make_settings, fake_session, fake_response):
    client = client_with(make_settings, fake_session([fake_response(429, {"error": "rate limited"})]))
    with pytest.raises(EnrichmentProviderError, match="429"):
        client.search_people('"Jane Doe"')


def test_organization_domain_is_apex(make_settings, fake_session, fake_response):
    payload = {"organizations": [{"primary_domain": None, "website_url": "https://www.acme.co.uk/about"}]}
    client = client_with(make_settings, fake_session([fake_response(200, payload)]))
    assert client.find_organization_domain("Acme") == "acme.co.uk"


def test_organization_lookup_failure_is_swallowed(make_settings, fake_session, fake_response):
    session = fake_session([fake_response(500, None)])
    client = client_with(make_settings, session)
    assert client.find_organization_domain("Acme") is None
    assert client.find_organization_domain(None) is None
    assert len(session.calls) == 1


@pytest.mark.parametrize(
    "emails,expected",
    [
        (["a@acme.com", "b@ACME.com"], "acme.com"),
        (["a@acme.com", "b@acme.io"], None),
        ([None, "not-an-email"], None),
    ],
)
def test_company_email_domain_requires_one_shared_domain(make_settings, fake_session, fake_response, emails, expected):
    payload = {"people": [{"email": e} for e in emails]}
    client = client_with(make_settings, fake_session([fake_response(200, payload)]))
    assert client.find_company_email_domain("Acme") == expected


@pytest.mark.parametrize("people", [5, "a@acme.com", {"email": "a@acme.com"}])
def test_company_email_domain_tolerates_malformed_people(make_settings, fake_session, fake_response, people):
    client = client_with(make_settings, fake_session([fake_response(200, {"people": people})]))
    assert client.find_company_email_domain("Acme") is None
