from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


def _optional(name: str) -> str | None:
    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class Settings:
    # Search provider (Oxylabs realtime, google_search source)
    oxylabs_username: str | None
    oxylabs_password: str | None
    oxylabs_search_url: str

    # Contact enrichment provider (Apollo)
    apollo_api_key: str | None
    apollo_base_url: str

    default_lead_count: int
    enrich_limit: int
    enrich_delay_seconds: float

    confidence_high_threshold: int
    confidence_medium_threshold: int

    request_timeout_seconds: int

    log_level: str
    run_env: str

    api_host: str = "0.0.0.0"
    api_port: int = 8000

    @property
    def search_configured(self) -> bool:
        return bool(self.oxylabs_username and self.oxylabs_password)

    @property
    def enrichment_configured(self) -> bool:
        return bool(self.apollo_api_key)


def _clamp_enrich_limit(raw: str) -> int:
    # Apollo credits: never enrich fewer than 5 or more than 10 per request
    return max(5, min(10, int(raw)))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    return Settings(
        oxylabs_username=_optional("OXYLABS_USERNAME"),
        oxylabs_password=_optional("OXYLABS_PASSWORD"),
        oxylabs_search_url=os.getenv("OXYLABS_SEARCH_URL", "https://realtime.oxylabs.io/v1/queries"),
        apollo_api_key=_optional("APOLLO_API_KEY"),
        apollo_base_url=os.getenv("APOLLO_BASE_URL", "https://api.apollo.io").rstrip("/"),
        default_lead_count=int(os.getenv("DEFAULT_LEAD_COUNT", "10")),
        enrich_limit=_clamp_enrich_limit(os.getenv("ENRICH_LIMIT", "8")),
        enrich_delay_seconds=float(os.getenv("ENRICH_DELAY_SECONDS", "1.2")),
        confidence_high_threshold=int(os.getenv("CONFIDENCE_HIGH_THRESHOLD", "4")),
        confidence_medium_threshold=int(os.getenv("CONFIDENCE_MEDIUM_THRESHOLD", "2")),
        request_timeout_seconds=int(os.getenv("REQUEST_TIMEOUT", "30")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        run_env=os.getenv("RUN_ENV", "local"),
        api_host=os.getenv("API_HOST", "0.0.0.0"),
        api_port=int(os.getenv("API_PORT", "8000")),
    )
