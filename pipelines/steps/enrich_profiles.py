from __future__ import annotations

import logging

from pipelines.runner import RunContext
from ports.enricher import EnricherPort
from services.reporting import email_stats

logger = logging.getLogger(__name__)


class CapProfiles:
    def __init__(self, limit: int) -> None:
        self.limit = limit

    def run(self, ctx: RunContext) -> RunContext:
        total = len(ctx.profiles)
        ctx.profiles = list(ctx.profiles[: self.limit])
        if total > self.limit:
            logger.info("Enriching first %d of %d profiles", self.limit, total, extra={"step": "cap_profiles"})
        ctx.meta["profiles_received"] = total
        return ctx


class EnrichProfiles:
    def __init__(self, enricher: EnricherPort) -> None:
        self.enricher = enricher

    def run(self, ctx: RunContext) -> RunContext:
        ctx.profiles = self.enricher.enrich(ctx.profiles)
        ctx.meta["enrichment_mode"] = self.enricher.mode
        ctx.meta["email_stats"] = email_stats(ctx.profiles)
        return ctx
