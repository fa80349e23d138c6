from .profile import Profile
from .enrichment_result import EnrichmentResult
from .apollo_person import ApolloPerson

__all__ = [
    "Profile",
    "EnrichmentResult",
    "ApolloPerson",
]
