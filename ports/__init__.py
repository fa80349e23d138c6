from .search import SearchPort
from .enricher import EnricherPort

__all__ = [
    "SearchPort",
    "EnricherPort",
]
