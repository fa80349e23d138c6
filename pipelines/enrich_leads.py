from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

from config.settings import Settings, get_settings
from pipelines.runner import Pipeline, RunContext
from pipelines.steps.enrich_profiles import CapProfiles, EnrichProfiles
from ports.enricher import EnricherPort
from services.enrichment_service import get_enricher


@dataclass
class EnrichmentOutcome:
    mode: str
    profiles: List[Dict[str, Any]]
    email_stats: Dict[str, int] = field(default_factory=dict)
    note: Optional[str] = None

    @property
    def count(self) -> int:
        return len(self.profiles)


def run_enrichment(
    profiles: Sequence[Mapping[str, Any]],
    enricher: Optional[EnricherPort] = None,
    settings: Optional[Settings] = None,
) -> EnrichmentOutcome:
    """Enrich profiles with contact data; never raises for provider failures."""
    settings = settings or get_settings()
    enricher = enricher or get_enricher(settings)
    ctx = RunContext(profiles=[dict(p) for p in profiles])
    pipeline = Pipeline([
        CapProfiles(enricher.limit),
        EnrichProfiles(enricher),
    ])
    ctx = pipeline.run(ctx)
    return EnrichmentOutcome(
        mode=ctx.meta.get("enrichment_mode", enricher.mode),
        profiles=ctx.profiles,
        email_stats=ctx.meta.get("email_stats", {}),
        note=getattr(enricher, "note", None),
    )
