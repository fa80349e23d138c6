from __future__ import annotations

import logging
import time
from typing import Any, Dict, List, Optional

import requests

from config.settings import Settings, get_settings
from models.apollo_person import ApolloPerson
from services.domain_utils import extract_apex_domain
from utils.errors import EnrichmentProviderError

logger = logging.getLogger(__name__)

PEOPLE_MATCH_PATH = "/api/v1/people/match"
PEOPLE_SEARCH_PATH = "/v1/mixed_people/search"
ORGANIZATIONS_SEARCH_PATH = "/v1/organizations/search"


class ApolloClient:
    """Thin Apollo REST client; every method is a single blocking call."""

    provider = "apollo"

    def __init__(self, api_key: str, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        if not api_key:
            raise ValueError("Apollo API key is required")
        self.api_key = api_key
        self.settings = settings or get_settings()
        self.session = session or requests.Session()
        self.api_calls_made = 0

    def _post(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{self.settings.apollo_base_url}{path}"
        started = time.perf_counter()
        try:
            resp = self.session.post(
                url,
                json=payload,
                headers={"Content-Type": "application/json", "X-Api-Key": self.api_key},
                timeout=self.settings.request_timeout_seconds,
            )
        except requests.exceptions.RequestException as e:
            raise EnrichmentProviderError(f"Apollo request failed: {e}") from e
        finally:
            self.api_calls_made += 1

        duration_ms = int((time.perf_counter() - started) * 1000)
        logger.debug(
            "apollo call %s",
            path,
            extra={"provider": self.provider, "status": resp.status_code, "duration_ms": duration_ms},
        )
        if not 200 <= resp.status_code < 300:
            raise EnrichmentProviderError(f"Apollo API error: {resp.status_code}")
        try:
            data = resp.json()
        except ValueError as e:
            raise EnrichmentProviderError("Apollo API returned a non-JSON body") from e
        if not isinstance(data, dict):
            raise EnrichmentProviderError("Apollo API returned an unexpected payload")
        return data

    def match_person(
        self,
        first_name: str,
        last_name: str,
        organization_name: Optional[str] = None,
        domain: Optional[str] = None,
        linkedin_url: Optional[str] = None,
    ) -> Optional[ApolloPerson]:
        payload: Dict[str, Any] = {
            "first_name": first_name,
            "last_name": last_name,
            "reveal_personal_emails": True,
        }
        if organization_name:
            payload["organization_name"] = organization_name
        if domain:
            payload["domain"] = domain
        if linkedin_url:
            payload["linkedin_url"] = linkedin_url
        data = self._post(PEOPLE_MATCH_PATH, payload)
        return ApolloPerson.from_payload(data.get("person"))

    def search_people(self, keywords: str) -> Optional[ApolloPerson]:
        """Looser keyword search; returns the best (first) hit."""
        data = self._post(PEOPLE_SEARCH_PATH, {
            "q_keywords": keywords,
            "page": 1,
            "per_page": 1,
            "reveal_personal_emails": True,
        })
        people = data.get("people") or []
        if not isinstance(people, list) or not people:
            return None
        return ApolloPerson.from_payload(people[0])

    def find_organization_domain(self, organization_name: Optional[str]) -> Optional[str]:
        """Apex domain of the best organisation match, or None. Never raises."""
        if not organization_name:
            return None
        try:
            data = self._post(ORGANIZATIONS_SEARCH_PATH, {
                "q_organization_name": organization_name,
                "page": 1,
                "per_page": 1,
            })
        except EnrichmentProviderError as e:
            logger.warning("Organization lookup failed for %s: %s", organization_name, e, extra={"provider": self.provider})
            return None
        organizations = data.get("organizations") or []
        if not isinstance(organizations, list) or not organizations or not isinstance(organizations[0], dict):
            return None
        org = organizations[0]
        return extract_apex_domain(org.get("primary_domain") or org.get("website_url"))

    def find_company_email_domain(self, organization_name: Optional[str], sample_size: int = 5) -> Optional[str]:
        """E-mail domain shared by all known colleagues at an organisation. Never raises."""
        if not organization_name:
            return None
        try:
            data = self._post(PEOPLE_SEARCH_PATH, {
                "q_organization_name": organization_name,
                "page": 1,
                "per_page": sample_size,
            })
        except EnrichmentProviderError as e:
            logger.warning("Email pattern lookup failed for %s: %s", organization_name, e, extra={"provider": self.provider})
            return None
        people = data.get("people") or []
        if not isinstance(people, list):
            return None
        emails: List[str] = [
            p.get("email") for p in people
            if isinstance(p, dict) and isinstance(p.get("email"), str) and "@" in p.get("email")
        ]
        domains = {email.split("@", 1)[1].lower() for email in emails}
        if len(domains) == 1:
            return domains.pop()
        return None
