from __future__ import annotations

from datetime import datetime, timezone

import pytest

from models.apollo_person import ApolloPerson
from services.confidence import ConfidencePolicy, confidence_points, email_accuracy, score_confidence

NOW = datetime(2026, 10, 1, tzinfo=timezone.utc)


def person(**fields):
    return ApolloPerson.model_validate(fields)


@pytest.mark.parametrize(
    "fields,expected",
    [
        ({"email": "a@x.com", "phone_number": "+1 555", "organization_name": "X"}, "high"),
        ({"email": "a@x.com", "organization_name": "X"}, "high"),
        ({"email": "a@x.com"}, "medium"),
        ({"phone_number": "+1 555"}, "medium"),
        ({"organization_name": "X"}, "low"),
        ({}, "low"),
    ],
)
def test_score_confidence_labels(fields, expected):
    assert score_confidence(person(**fields), now=NOW) == expected


def test_recent_update_adds_a_point():
    recent = person(organization_name="X", phone_number="+1 555", updated_at="2026-09-20T10:00:00Z")
    stale = person(organization_name="X", phone_number="+1 555", updated_at="2025-01-01T00:00:00Z")
    policy = ConfidencePolicy()
    assert confidence_points(recent, policy, NOW) == 4
    assert confidence_points(stale, policy, NOW) == 3
    assert score_confidence(recent, policy, NOW) == "high"
    assert score_confidence(stale, policy, NOW) == "medium"


def test_unparseable_timestamp_is_ignored():
    assert confidence_points(person(updated_at="yesterday"), ConfidencePolicy(), NOW) == 0


def test_thresholds_come_from_settings(make_settings):
    policy = ConfidencePolicy.from_settings(
        make_settings(confidence_high_threshold=6, confidence_medium_threshold=3)
    )
    assert score_confidence(person(email="a@x.com", organization_name="X"), policy, NOW) == "medium"


@pytest.mark.parametrize(
    "fields,expected",
    [
        ({"email": "a@x.com", "email_status": "verified"}, "high"),
        ({"email": "a@x.com", "extrapolated_email_confidence": 0.9}, "high"),
        ({"email": "a@x.com", "extrapolated_email_confidence": 0.6}, "medium"),
        ({"email": "a@x.com", "extrapolated_email_confidence": 0.3}, "low"),
        ({"email": "a@x.com"}, "low"),
        ({"personal_emails": ["me@home.net"]}, "low"),
        ({}, "none"),
    ],
)
def test_email_accuracy(fields, expected):
    assert email_accuracy(person(**fields)) == expected
