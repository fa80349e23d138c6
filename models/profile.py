from __future__ import annotations

from typing import Any, Dict, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from config.industries import DEFAULT_INDUSTRY, LINKEDIN_PROFILE_MARKER, UNKNOWN_NAME


Confidence = Literal["low", "medium", "high"]


class Profile(BaseModel):
    """One LinkedIn profile stub extracted from a single search result."""

    id: int
    name: str = UNKNOWN_NAME
    title: str
    company: str
    location: str
    industry: str = DEFAULT_INDUSTRY
    profile_url: str = Field(alias="profileUrl")
    email: str | None = None
    phone: str | None = None
    snippet: str | None = None
    apollo_enriched: bool = Field(default=False, alias="apolloEnriched")
    confidence: Confidence = "low"
    relevance_score: int = Field(default=0, ge=0, le=10, alias="relevanceScore")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @field_validator("profile_url")
    @classmethod
    def _must_be_profile_url(cls, value: str) -> str:
        if LINKEDIN_PROFILE_MARKER not in (value or "").lower():
            raise ValueError(f"not a LinkedIn profile URL: {value!r}")
        return value

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
