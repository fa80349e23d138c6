# Namespace for pipeline steps
from .search_profiles import BuildQuery, SearchProvider, ExtractProfiles  # noqa: F401
from .enrich_profiles import CapProfiles, EnrichProfiles  # noqa: F401
