from __future__ import annotations

from typing import Optional

from config.industries import LINKEDIN_SITE, role_keywords_for


def build_search_query(designation: str, location: str, industry: Optional[str] = None) -> str:
    """Build the Google query for LinkedIn profiles of a role in a location.

    Known industries append an OR-group of their leading role titles, e.g.
    ``site:linkedin.com/in "CEO" "Austin" ("Software Engineer" OR "Developer" OR "Data Scientist")``.
    """
    query = f'site:{LINKEDIN_SITE} "{designation}" "{location}"'
    keywords = role_keywords_for(industry)
    if keywords:
        or_group = " OR ".join(f'"{term}"' for term in keywords)
        query += f" ({or_group})"
    return query
