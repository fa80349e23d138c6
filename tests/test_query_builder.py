from __future__ import annotations

import pytest

from config.industries import INDUSTRY_RELEVANCE_KEYWORDS, INDUSTRY_ROLE_KEYWORDS
from services.query_builder import build_search_query


def test_base_query_without_industry():
    assert build_search_query("CEO", "Austin") == 'site:linkedin.com/in "CEO" "Austin"'


@pytest.mark.parametrize("industry", [None, "", "all", "underwater_basket_weaving"])
def test_or_group_omitted_for_all_missing_or_unknown(industry):
    assert build_search_query("CEO", "Austin", industry) == 'site:linkedin.com/in "CEO" "Austin"'


def test_known_industry_appends_first_three_role_keywords():
    query = build_search_query("CTO", "Berlin", "technology")
    assert query == (
        'site:linkedin.com/in "CTO" "Berlin" '
        '("Software Engineer" OR "Developer" OR "Data Scientist")'
    )


def test_lookup_tables_are_immutable():
    with pytest.raises(TypeError):
        INDUSTRY_ROLE_KEYWORDS["technology"] = ("Hacker",)  # type: ignore[index]
    with pytest.raises(TypeError):
        INDUSTRY_RELEVANCE_KEYWORDS["new"] = ("x",)  # type: ignore[index]
