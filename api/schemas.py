from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SearchRequest(BaseModel):
    """Body of POST /search. Required fields are checked by the route so a
    missing designation/location gets the API's own 400 message."""

    designation: Optional[str] = None
    location: Optional[str] = None
    lead_count: Optional[int] = Field(None, alias="leadCount", ge=1, le=100)
    industry: Optional[str] = None

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class SearchResponse(BaseModel):
    success: bool = True
    profiles: List[Dict[str, Any]] = []
    count: int = 0
    industry: str
    source: str = "oxylabs"
    query: str


class EmailStats(BaseModel):
    total: int = 0
    withEmail: int = 0
    highConfidence: int = 0
    verified: int = 0


class EnrichResponse(BaseModel):
    success: bool = True
    profiles: List[Dict[str, Any]] = []
    count: int = 0
    mode: str
    emailStats: EmailStats
    note: Optional[str] = None


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
