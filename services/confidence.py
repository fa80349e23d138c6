from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from config.settings import Settings
from models.apollo_person import ApolloPerson


@dataclass(frozen=True)
class ConfidencePolicy:
    """Point weights per populated field and the thresholds mapping points to a label."""

    email_weight: int = 3
    phone_weight: int = 2
    organization_weight: int = 1
    recency_weight: int = 1
    recency_days: int = 30
    high_threshold: int = 4
    medium_threshold: int = 2

    @classmethod
    def from_settings(cls, settings: Settings) -> "ConfidencePolicy":
        return cls(
            high_threshold=settings.confidence_high_threshold,
            medium_threshold=settings.confidence_medium_threshold,
        )

    def label(self, points: int) -> str:
        if points >= self.high_threshold:
            return "high"
        if points >= self.medium_threshold:
            return "medium"
        return "low"


def _parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def confidence_points(person: ApolloPerson, policy: ConfidencePolicy, now: Optional[datetime] = None) -> int:
    now = now or datetime.now(timezone.utc)
    points = 0
    if person.best_email():
        points += policy.email_weight
    if person.best_phone():
        points += policy.phone_weight
    if person.organization_display_name():
        points += policy.organization_weight
    updated = _parse_timestamp(person.updated_at)
    if updated is not None and now - updated < timedelta(days=policy.recency_days):
        points += policy.recency_weight
    return points


def score_confidence(person: ApolloPerson, policy: Optional[ConfidencePolicy] = None, now: Optional[datetime] = None) -> str:
    policy = policy or ConfidencePolicy()
    return policy.label(confidence_points(person, policy, now))


def email_accuracy(person: ApolloPerson) -> str:
    if not person.best_email():
        return "none"
    if (person.email_status or "").lower() == "verified":
        return "high"
    extrapolated = person.extrapolated_email_confidence
    if extrapolated is not None:
        if extrapolated > 0.8:
            return "high"
        if extrapolated > 0.5:
            return "medium"
    return "low"
