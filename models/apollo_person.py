from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ApolloPhoneNumber(BaseModel):
    sanitized_number: str | None = None
    raw_number: str | None = None
    type: str | None = None

    model_config = ConfigDict(extra="ignore")


class ApolloOrganization(BaseModel):
    name: str | None = None
    website_url: str | None = None
    primary_domain: str | None = None

    model_config = ConfigDict(extra="ignore")


class ApolloPerson(BaseModel):
    """Provider record shape: the subset of an Apollo person we read."""

    id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    name: str | None = None
    title: str | None = None
    email: str | None = None
    email_status: str | None = None
    personal_emails: List[str] = Field(default_factory=list)
    extrapolated_email_confidence: float | None = None
    phone_number: str | None = None
    phone_numbers: List[ApolloPhoneNumber] = Field(default_factory=list)
    organization_name: str | None = None
    organization: ApolloOrganization | None = None
    linkedin_url: str | None = None
    updated_at: str | None = None

    model_config = ConfigDict(extra="ignore")

    def best_email(self) -> Optional[str]:
        if self.email:
            return self.email
        for candidate in self.personal_emails:
            if candidate and "@" in candidate:
                return candidate
        return None

    def best_phone(self) -> Optional[str]:
        if self.phone_number:
            return self.phone_number
        numbers = [p for p in self.phone_numbers if p.sanitized_number]
        for phone in numbers:
            if (phone.type or "").lower() == "mobile":
                return phone.sanitized_number
        return numbers[0].sanitized_number if numbers else None

    def organization_display_name(self) -> Optional[str]:
        if self.organization_name:
            return self.organization_name
        if self.organization and self.organization.name:
            return self.organization.name
        return None

    @classmethod
    def from_payload(cls, payload: Any) -> Optional["ApolloPerson"]:
        if not isinstance(payload, dict) or not payload:
            return None
        return cls.model_validate(payload)

    def summary(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "has_email": bool(self.best_email()),
            "has_phone": bool(self.best_phone()),
            "organization": self.organization_display_name(),
        }
