from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from config.settings import Settings, get_settings
from models.profile import Profile
from pipelines.runner import Pipeline, RunContext
from pipelines.steps.search_profiles import BuildQuery, ExtractProfiles, SearchProvider
from ports.search import SearchPort
from searcher import OxylabsSearcher


@dataclass
class SearchOutcome:
    query: str
    profiles: List[Profile]
    stats: Dict[str, Any] = field(default_factory=dict)

    @property
    def count(self) -> int:
        return len(self.profiles)


def run_search(
    designation: str,
    location: str,
    industry: Optional[str] = None,
    lead_count: Optional[int] = None,
    searcher: Optional[SearchPort] = None,
    settings: Optional[Settings] = None,
) -> SearchOutcome:
    """Search LinkedIn profiles for a role in a location, most relevant first.

    Raises ConfigurationError when no searcher is given and the provider
    credentials are missing, SearchProviderError when the provider call fails.
    """
    settings = settings or get_settings()
    searcher = searcher or OxylabsSearcher(settings)
    ctx = RunContext(params={
        "designation": designation,
        "location": location,
        "industry": industry or None,
        "lead_count": lead_count or settings.default_lead_count,
    })
    pipeline = Pipeline([
        BuildQuery(),
        SearchProvider(searcher),
        ExtractProfiles(),
    ])
    ctx = pipeline.run(ctx)
    return SearchOutcome(query=ctx.query, profiles=ctx.profiles, stats=ctx.meta.get("extraction_stats", {}))
