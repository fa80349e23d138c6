"""
Error taxonomy shared by the search/enrichment services and the HTTP layer.

Every error carries the HTTP status the API should answer with; the API
renders them as ``{"success": false, "error": message}``.
"""
from __future__ import annotations

from typing import Optional


class AppError(Exception):
    """Base application error with the status code to surface."""

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class InvalidRequestError(AppError):
    """Client input is missing or malformed."""

    status_code = 400


class ConfigurationError(AppError):
    """A provider credential required for the operation is not configured."""

    status_code = 500


class SearchProviderError(AppError):
    """The web search provider failed (network, non-2xx, unreadable body)."""

    status_code = 500


class EnrichmentProviderError(AppError):
    """The contact-enrichment provider failed for a single call."""

    status_code = 502
