from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional


def email_stats(profiles: Iterable[Mapping[str, Any]]) -> Dict[str, int]:
    """Contact coverage of an enrichment batch."""
    items: List[Mapping[str, Any]] = list(profiles)
    return {
        "total": len(items),
        "withEmail": sum(1 for p in items if p.get("email") or p.get("verifiedEmail")),
        "highConfidence": sum(1 for p in items if p.get("emailAccuracy") == "high"),
        "verified": sum(1 for p in items if p.get("emailStatus") == "verified"),
    }


def print_search_summary(query: str, profiles: List[Mapping[str, Any]], output_path: Optional[Path] = None) -> None:
    """Print summary of a search run."""
    print("\n" + "="*60)
    print("LINKEDIN LEAD SEARCH - SUMMARY")
    print("="*60)
    print(f"Search Query: {query}")
    print(f"Profiles Found: {len(profiles)}")
    for p in profiles[:10]:
        print(f"  [{p.get('relevanceScore', '-'):>2}] {p.get('name')} - {p.get('company')} ({p.get('profileUrl')})")
    if output_path:
        print(f"Output File: {output_path}")
    print("="*60)


def print_enrichment_summary(mode: str, profiles: List[Mapping[str, Any]], output_path: Optional[Path] = None) -> None:
    """Print summary of an enrichment run."""
    stats = email_stats(profiles)
    print("\n" + "="*60)
    print("LINKEDIN LEAD ENRICHMENT - SUMMARY")
    print("="*60)
    print(f"Mode: {mode}")
    print(f"Profiles Enriched: {sum(1 for p in profiles if p.get('apolloEnriched'))}/{stats['total']}")
    print(f"With Email: {stats['withEmail']}")
    print(f"High Confidence Emails: {stats['highConfidence']}")
    print(f"Verified Emails: {stats['verified']}")
    failures = [p for p in profiles if p.get("apolloError")]
    if failures:
        print("Errors:")
        for p in failures:
            print(f"  {p.get('name')}: {p.get('apolloError')}")
    if output_path:
        print(f"Output File: {output_path}")
    print("="*60)
