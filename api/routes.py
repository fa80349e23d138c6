"""
Lead Finder routes: profile search and contact enrichment.

Both endpoints are stateless: every request round-trips through the
providers and nothing is stored.
"""
import logging
from typing import Any, Callable

from fastapi import APIRouter, Body, Depends

from api.deps import get_app_settings, get_enricher_factory, get_searcher_factory
from api.schemas import EnrichResponse, SearchRequest, SearchResponse
from config.industries import DEFAULT_INDUSTRY
from config.settings import Settings
from pipelines.enrich_leads import run_enrichment
from pipelines.search_leads import run_search
from ports.enricher import EnricherPort
from ports.search import SearchPort
from utils.errors import InvalidRequestError, SearchProviderError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["leads"])


@router.post("/search", response_model=SearchResponse)
def search_profiles(
    body: SearchRequest,
    settings: Settings = Depends(get_app_settings),
    make_searcher: Callable[[], SearchPort] = Depends(get_searcher_factory),
):
    """Search LinkedIn profiles for a designation in a location."""
    designation = (body.designation or "").strip()
    location = (body.location or "").strip()
    if not designation or not location:
        raise InvalidRequestError("Designation and location are required")

    logger.info(
        "Search request: designation=%s location=%s lead_count=%s industry=%s",
        designation, location, body.lead_count, body.industry,
        extra={"step": "search"},
    )
    searcher = make_searcher()
    try:
        outcome = run_search(
            designation,
            location,
            industry=body.industry,
            lead_count=body.lead_count,
            searcher=searcher,
            settings=settings,
        )
    except SearchProviderError as e:
        logger.error("Search failed: %s", e.message, extra={"step": "search", "status": "error", "provider": "oxylabs"})
        raise SearchProviderError(f"Search failed: {e.message}") from e

    return SearchResponse(
        profiles=[p.to_wire() for p in outcome.profiles],
        count=outcome.count,
        industry=body.industry or DEFAULT_INDUSTRY,
        query=outcome.query,
    )


@router.post("/enrich", response_model=EnrichResponse, response_model_exclude_none=True)
def enrich_profiles(
    payload: Any = Body(None),
    settings: Settings = Depends(get_app_settings),
    make_enricher: Callable[[], EnricherPort] = Depends(get_enricher_factory),
):
    """Attach contact data to profiles; failures degrade single profiles only."""
    profiles = payload.get("profiles") if isinstance(payload, dict) else None
    if not isinstance(profiles, list) or not all(isinstance(p, dict) for p in profiles):
        raise InvalidRequestError("Profiles array is required")

    outcome = run_enrichment(profiles, enricher=make_enricher(), settings=settings)
    logger.info(
        "Enriched %d profiles (mode=%s)", outcome.count, outcome.mode,
        extra={"step": "enrich", "provider": outcome.mode},
    )
    return EnrichResponse(
        profiles=outcome.profiles,
        count=outcome.count,
        mode=outcome.mode,
        emailStats=outcome.email_stats,
        note=outcome.note,
    )


@router.get("/health")
def health(settings: Settings = Depends(get_app_settings)):
    return {
        "status": "ok",
        "search_configured": settings.search_configured,
        "enrichment_mode": "apollo" if settings.enrichment_configured else "demo",
    }
