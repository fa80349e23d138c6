"""
Oxylabs realtime API integration for LinkedIn profile searches.
"""
import logging
from typing import Any, Dict, Optional

import requests

from config.settings import Settings, get_settings
from utils.errors import ConfigurationError, SearchProviderError


class OxylabsSearcher:
    """Runs a single parsed Google search through the Oxylabs realtime API."""

    source = "google_search"

    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        self.settings = settings or get_settings()
        self.username = self.settings.oxylabs_username
        self.password = self.settings.oxylabs_password
        self.session = session or requests.Session()
        self.api_calls_made = 0

        if not self.username or not self.password:
            raise ConfigurationError("Search provider credentials not configured")

    def build_payload(self, query: str, location: str, limit: int) -> Dict[str, Any]:
        return {
            'source': self.source,
            'query': query,
            'parse': True,
            'limit': limit,
            'context': [
                {'key': 'follow_redirects', 'value': True},
                {'key': 'location', 'value': location},
            ],
        }

    def search(self, query: str, location: str, limit: int) -> Dict[str, Any]:
        """Execute one search request and return the provider's parsed JSON.

        No retries: any transport error, non-2xx status or unreadable body is
        raised as SearchProviderError.
        """
        payload = self.build_payload(query, location, limit)
        logging.info(f"Making search API call {self.api_calls_made + 1}: {query}")
        try:
            response = self.session.post(
                self.settings.oxylabs_search_url,
                json=payload,
                auth=(self.username, self.password),
                timeout=self.settings.request_timeout_seconds,
            )
        except requests.exceptions.RequestException as e:
            logging.error(f"Search request error: {e}")
            raise SearchProviderError(f"Oxylabs request failed: {e}") from e
        finally:
            self.api_calls_made += 1

        if not 200 <= response.status_code < 300:
            logging.error(f"Search request failed with status {response.status_code}: {response.text[:500]}")
            raise SearchProviderError(f"Oxylabs API error: {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise SearchProviderError("Oxylabs API returned a non-JSON body") from e

        logging.info("Search API call succeeded")
        return data

    def get_api_usage(self) -> Dict:
        """Return API usage statistics."""
        return {
            'api_calls_made': self.api_calls_made,
        }
