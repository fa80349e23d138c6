import logging
import re
from typing import Any, Dict, List, Optional

from config.industries import (
    DEFAULT_INDUSTRY,
    PLACEHOLDER_COMPANY,
    UNKNOWN_NAME,
    is_all_industries,
    relevance_keywords_for,
)
from models.profile import Profile
from services.domain_utils import is_linkedin_profile_url


NEUTRAL_RELEVANCE_SCORE = 5
KEYWORD_HIT_POINTS = 2
MAX_RELEVANCE_SCORE = 10

# Google result titles for LinkedIn profiles, most specific first:
# "Jane Doe - CEO | LinkedIn", "Jane Doe | LinkedIn", "Jane Doe on LinkedIn: ..."
NAME_PATTERNS = (
    re.compile(r'(.*?) - (.*?) \| LinkedIn'),
    re.compile(r'(.*?) \| LinkedIn'),
    re.compile(r'(.*?) on LinkedIn: (.*)'),
)
NAME_SUFFIXES = (' | LinkedIn', ' on LinkedIn', ' - LinkedIn')

# A company name ends at punctuation, a separator, a trailing " in <place>" or the end of text:
# "CEO at Acme Corp, leading..." and "CEO at Acme Corp in Austin" both yield "Acme Corp".
_COMPANY_END = r'(?=\s+in\s|\s*[.,|·•]|\s*$)'
COMPANY_PATTERNS = (
    re.compile(r'\bat\s+([^.,|·•]+?)' + _COMPANY_END, re.IGNORECASE),
    re.compile(r',\s+([^.,|·•]+?)' + _COMPANY_END, re.IGNORECASE),
    re.compile(r'\bfrom\s+([^.,|·•]+?)' + _COMPANY_END, re.IGNORECASE),
)


def extract_name_from_title(title: Optional[str]) -> str:
    """Extract the person's name from a search result title."""
    if not title:
        return UNKNOWN_NAME

    for pattern in NAME_PATTERNS:
        match = pattern.search(title)
        if match and match.group(1):
            return match.group(1).strip()

    name = title
    for suffix in NAME_SUFFIXES:
        name = name.replace(suffix, '', 1)
    return name.strip()


def extract_company_from_snippet(snippet: Optional[str]) -> Optional[str]:
    """Extract the current company from a search result snippet, or None."""
    if not snippet:
        return None

    for pattern in COMPANY_PATTERNS:
        match = pattern.search(snippet)
        if match and match.group(1):
            return match.group(1).strip()
    return None


def calculate_relevance(title: Optional[str], snippet: Optional[str], industry: Optional[str]) -> int:
    """Score 0-10 from industry keyword hits; 5 when no industry filter applies."""
    if is_all_industries(industry):
        return NEUTRAL_RELEVANCE_SCORE

    text = f"{title or ''} {snippet or ''}".lower()
    score = sum(KEYWORD_HIT_POINTS for keyword in relevance_keywords_for(industry) if keyword in text)
    return max(0, min(score, MAX_RELEVANCE_SCORE))


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ''


def _organic_results(search_data: Any) -> List[Dict[str, Any]]:
    """Return results[0].content.results.organic, or [] when any level is missing."""
    if not isinstance(search_data, dict):
        return []
    results = search_data.get('results')
    if not isinstance(results, list) or not results:
        return []
    first = results[0]
    content = first.get('content') if isinstance(first, dict) else None
    parsed = content.get('results') if isinstance(content, dict) else None
    organic = parsed.get('organic') if isinstance(parsed, dict) else None
    if not isinstance(organic, list):
        return []
    return organic


class LinkedInProfileExtractor:
    def __init__(self):
        self.extraction_stats = {
            'organic_results': 0,
            'profiles_extracted': 0,
            'non_profile_results_skipped': 0,
        }

    def extract_profile(
        self,
        position: int,
        result: Dict[str, Any],
        designation: str,
        location: str,
        industry: Optional[str],
    ) -> Optional[Profile]:
        """Build a Profile from one organic result, or None when it is not a profile link."""
        url = result.get('url') if isinstance(result, dict) else None
        if not is_linkedin_profile_url(url):
            self.extraction_stats['non_profile_results_skipped'] += 1
            return None

        title = _text(result.get('title'))
        snippet = _text(result.get('snippet'))
        profile = Profile(
            id=position,
            name=extract_name_from_title(title),
            title=designation,
            company=extract_company_from_snippet(snippet) or PLACEHOLDER_COMPANY,
            location=location,
            industry=industry or DEFAULT_INDUSTRY,
            profile_url=url,
            snippet=snippet or None,
            relevance_score=calculate_relevance(title, snippet, industry),
        )
        self.extraction_stats['profiles_extracted'] += 1
        return profile

    def extract_profiles(
        self,
        search_data: Any,
        designation: str,
        location: str,
        industry: Optional[str] = None,
    ) -> List[Profile]:
        """Extract LinkedIn profiles from a parsed search response, most relevant first."""
        organic = _organic_results(search_data)
        self.extraction_stats['organic_results'] += len(organic)

        profiles: List[Profile] = []
        for position, result in enumerate(organic, start=1):
            profile = self.extract_profile(position, result, designation, location, industry)
            if profile is not None:
                profiles.append(profile)

        logging.info(
            f"Extracted {len(profiles)} LinkedIn profiles from {len(organic)} organic results "
            f"(industry: {industry or DEFAULT_INDUSTRY})"
        )
        # sorted() is stable: equal scores keep their extraction order
        return sorted(profiles, key=lambda p: p.relevance_score, reverse=True)

    def get_extraction_stats(self) -> Dict:
        return dict(self.extraction_stats)
