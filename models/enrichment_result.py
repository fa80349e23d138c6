from __future__ import annotations

from typing import Any, Dict, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field

from models.profile import Confidence


EmailAccuracy = Literal["none", "low", "medium", "high", "estimated"]
EnrichmentSource = Literal["apollo_match", "apollo_search", "demo"]


class EnrichmentResult(BaseModel):
    """Contact fields layered onto a profile by one enrichment pass.

    Only fields that are set (not None) are layered, so enrichment adds to a
    profile and never removes what the caller sent.
    """

    apollo_enriched: bool = Field(default=False, alias="apolloEnriched")
    apollo_id: str | None = Field(default=None, alias="apolloId")
    apollo_url: str | None = Field(default=None, alias="apolloUrl")

    email: str | None = None
    phone: str | None = None
    verified_email: str | None = Field(default=None, alias="verifiedEmail")
    direct_phone: str | None = Field(default=None, alias="directPhone")
    email_status: str | None = Field(default=None, alias="emailStatus")
    email_accuracy: EmailAccuracy | None = Field(default=None, alias="emailAccuracy")
    email_source: str | None = Field(default=None, alias="emailSource")
    has_email: bool | None = Field(default=None, alias="hasEmail")
    has_direct_phone: bool | None = Field(default=None, alias="hasDirectPhone")

    confidence: Confidence | None = None
    company: str | None = None
    title: str | None = None

    source: EnrichmentSource | None = None
    last_updated: str | None = Field(default=None, alias="lastUpdated")
    note: str | None = None
    apollo_error: str | None = Field(default=None, alias="apolloError")

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    def to_fields(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)

    def merge_into(self, profile: Mapping[str, Any]) -> Dict[str, Any]:
        merged = dict(profile)
        merged.update(self.to_fields())
        return merged
