"""
Contact enrichment strategies.

Two interchangeable implementations of EnricherPort are selected from
configuration by get_enricher(): ApolloEnricher when an Apollo key is
configured, DemoEnricher (no network at all) otherwise.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from config.industries import PLACEHOLDER_COMPANY
from config.settings import Settings, get_settings
from models.apollo_person import ApolloPerson
from models.enrichment_result import EnrichmentResult
from services.apollo_client import ApolloClient
from services.confidence import ConfidencePolicy, email_accuracy, score_confidence
from services.domain_utils import company_slug, email_local_part, split_name
from utils.rate_limiter import TokenBucket

logger = logging.getLogger(__name__)

DEMO_NOTE = "Add APOLLO_API_KEY for verified contact data"
NO_MATCH_NOTE = "No Apollo match found"
DEMO_PHONE_PREFIXES = ("555", "444", "333", "222")


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _organization_for(profile: Mapping[str, Any]) -> Optional[str]:
    company = _text(profile.get("company"))
    if not company or company == PLACEHOLDER_COMPANY:
        return None
    return company


class ApolloEnricher:
    mode = "apollo"

    def __init__(
        self,
        client: ApolloClient,
        limiter: TokenBucket,
        policy: Optional[ConfidencePolicy] = None,
        limit: int = 8,
    ) -> None:
        self.client = client
        self.limiter = limiter
        self.policy = policy or ConfidencePolicy()
        self.limit = limit

    def enrich(self, profiles: Sequence[Mapping[str, Any]]) -> List[Dict[str, Any]]:
        """Enrich the first ``limit`` profiles one after another at the limiter's cadence."""
        capped = list(profiles[: self.limit])
        enriched: List[Dict[str, Any]] = []
        for position, profile in enumerate(capped, start=1):
            self.limiter.acquire()
            logger.info(
                "Enriching %d/%d: %s",
                position,
                len(capped),
                _text(profile.get("name")) or "<no name>",
                extra={"step": "enrich_profile", "provider": self.client.provider},
            )
            enriched.append(self.enrich_one(profile))
        return enriched

    def enrich_one(self, profile: Mapping[str, Any]) -> Dict[str, Any]:
        try:
            layer = self._lookup(profile)
        except Exception as e:
            # One failing profile must not fail the batch
            logger.warning(
                "Enrichment failed for %s",
                _text(profile.get("name")) or "<no name>",
                extra={"step": "enrich_profile", "status": "error", "provider": self.client.provider, "error": str(e)},
            )
            layer = EnrichmentResult(
                apollo_enriched=False,
                apollo_error=str(e),
                note=f"Enrichment failed: {e}",
            )
        return layer.merge_into(profile)

    def _lookup(self, profile: Mapping[str, Any]) -> EnrichmentResult:
        name = _text(profile.get("name"))
        first_name, last_name = split_name(name)
        organization = _organization_for(profile)
        domain = self.client.find_organization_domain(organization)

        person = self.client.match_person(
            first_name,
            last_name,
            organization_name=organization,
            domain=domain,
            linkedin_url=_text(profile.get("profileUrl")) or None,
        )
        source = "apollo_match"
        if person is None:
            keywords = " ".join(
                part for part in (f'"{name}"' if name else "", _text(profile.get("title")), organization or "") if part
            )
            person = self.client.search_people(keywords)
            source = "apollo_search"

        if person is None:
            return EnrichmentResult(apollo_enriched=False, confidence="low", note=NO_MATCH_NOTE)
        return self._layer_from_person(person, source, first_name, last_name, organization)

    def _layer_from_person(
        self,
        person: ApolloPerson,
        source: str,
        first_name: str,
        last_name: str,
        organization: Optional[str],
    ) -> EnrichmentResult:
        verified = person.best_email()
        email = verified
        accuracy = email_accuracy(person)
        email_source = "apollo" if verified else None

        if not email:
            estimated = self._estimate_email(first_name, last_name, person.organization_display_name() or organization)
            if estimated:
                email, accuracy, email_source = estimated, "medium", "pattern_analysis"

        phone = person.best_phone()
        return EnrichmentResult(
            apollo_enriched=True,
            apollo_id=person.id,
            apollo_url=f"https://app.apollo.io/#/people/{person.id}" if person.id else None,
            email=email,
            phone=phone,
            verified_email=verified,
            direct_phone=phone,
            email_status=person.email_status,
            email_accuracy=accuracy,
            email_source=email_source,
            has_email=bool(email),
            has_direct_phone=bool(phone),
            confidence=score_confidence(person, self.policy),
            company=person.organization_display_name(),
            source=source,
            last_updated=person.updated_at,
        )

    def _estimate_email(self, first_name: str, last_name: str, organization: Optional[str]) -> Optional[str]:
        first, last = email_local_part(first_name), email_local_part(last_name)
        if not first or not last or not organization:
            return None
        domain = self.client.find_company_email_domain(organization)
        if not domain:
            return None
        return f"{first}.{last}@{domain}"


def demo_email(name: Optional[str], company: Optional[str], index: int) -> str:
    first, last = split_name(name)
    local = ".".join(part for part in (email_local_part(first), email_local_part(last)) if part)
    local = local or f"lead{index + 1}"
    slug = company_slug(company) if company and company != PLACEHOLDER_COMPANY else ""
    domain = f"{slug}.example.com" if slug else "example.com"
    return f"{local}@{domain}"


def demo_phone(index: int) -> str:
    prefix = DEMO_PHONE_PREFIXES[index % len(DEMO_PHONE_PREFIXES)]
    return f"+1-{prefix}-{100 + index}-{1000 + index}"


class DemoEnricher:
    """Deterministic placeholder contacts; never touches the network."""

    mode = "demo"
    note = DEMO_NOTE

    def __init__(self, limit: int = 8) -> None:
        self.limit = limit

    def enrich(self, profiles: Sequence[Mapping[str, Any]]) -> List[Dict[str, Any]]:
        return [self.enrich_one(index, profile) for index, profile in enumerate(profiles[: self.limit])]

    def enrich_one(self, index: int, profile: Mapping[str, Any]) -> Dict[str, Any]:
        layer = EnrichmentResult(
            apollo_enriched=False,
            email=demo_email(_text(profile.get("name")), _text(profile.get("company")), index),
            phone=demo_phone(index),
            email_accuracy="estimated",
            has_email=True,
            has_direct_phone=True,
            source="demo",
            note=DEMO_NOTE,
        )
        return layer.merge_into(profile)


def get_enricher(settings: Optional[Settings] = None, limiter: Optional[TokenBucket] = None):
    """Pick the enrichment strategy from configuration: Apollo when a key is set, demo otherwise."""
    settings = settings or get_settings()
    if settings.enrichment_configured:
        return ApolloEnricher(
            client=ApolloClient(settings.apollo_api_key, settings=settings),
            limiter=limiter or TokenBucket.from_interval(settings.enrich_delay_seconds),
            policy=ConfidencePolicy.from_settings(settings),
            limit=settings.enrich_limit,
        )
    logger.info("APOLLO_API_KEY not set; using demo enrichment", extra={"provider": "demo"})
    return DemoEnricher(limit=settings.enrich_limit)
