from __future__ import annotations

from typing import Any, Dict, List, Literal, Protocol


EnrichmentMode = Literal["apollo", "demo"]


class EnricherPort(Protocol):
    mode: EnrichmentMode
    limit: int

    def enrich(self, profiles: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        ...
