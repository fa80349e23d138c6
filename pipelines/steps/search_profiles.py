from __future__ import annotations

import logging
from typing import Optional

from pipelines.runner import RunContext
from ports.search import SearchPort
from profile_extractor import LinkedInProfileExtractor
from services.query_builder import build_search_query

logger = logging.getLogger(__name__)


class BuildQuery:
    def run(self, ctx: RunContext) -> RunContext:
        p = ctx.params
        ctx.query = build_search_query(p["designation"], p["location"], p.get("industry"))
        logger.info("Search query: %s", ctx.query, extra={"step": "build_query"})
        return ctx


class SearchProvider:
    def __init__(self, searcher: SearchPort) -> None:
        self.searcher = searcher

    def run(self, ctx: RunContext) -> RunContext:
        # Provider errors propagate: a failed search fails the whole request
        ctx.raw = self.searcher.search(ctx.query, ctx.params["location"], ctx.params["lead_count"])
        return ctx


class ExtractProfiles:
    def __init__(self, extractor: Optional[LinkedInProfileExtractor] = None) -> None:
        self.extractor = extractor or LinkedInProfileExtractor()

    def run(self, ctx: RunContext) -> RunContext:
        p = ctx.params
        ctx.profiles = self.extractor.extract_profiles(ctx.raw, p["designation"], p["location"], p.get("industry"))
        ctx.raw = None
        ctx.meta["extraction_stats"] = self.extractor.get_extraction_stats()
        return ctx
