from __future__ import annotations

import logging

from utils.logging_setup import LOG_FORMAT, LeadLogFormatter


def _record(**extra):
    record = logging.LogRecord("services.enrichment_service", logging.INFO, __file__, 1, "Enriching %d/%d", (1, 2), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_missing_extras_get_placeholders(monkeypatch):
    monkeypatch.delenv("RUN_ID", raising=False)
    line = LeadLogFormatter(fmt=LOG_FORMAT).format(_record())
    assert "Enriching 1/2" in line
    assert "step=- status=- duration_ms=- provider=- error=- run_id=-" in line


def test_extras_and_run_id_are_rendered(monkeypatch):
    monkeypatch.setenv("RUN_ID", "abc123")
    line = LeadLogFormatter(fmt=LOG_FORMAT).format(_record(step="enrich_profile", provider="apollo"))
    assert "step=enrich_profile" in line
    assert "provider=apollo" in line
    assert "run_id=abc123" in line
