from __future__ import annotations

from typing import Callable

from fastapi import Depends

from config.settings import Settings, get_settings
from ports.enricher import EnricherPort
from ports.search import SearchPort
from searcher import OxylabsSearcher
from services.enrichment_service import get_enricher


def get_app_settings() -> Settings:
    return get_settings()


def get_searcher_factory(settings: Settings = Depends(get_app_settings)) -> Callable[[], SearchPort]:
    # Built lazily so request validation runs before the credential check
    return lambda: OxylabsSearcher(settings)


def get_enricher_factory(settings: Settings = Depends(get_app_settings)) -> Callable[[], EnricherPort]:
    return lambda: get_enricher(settings)
