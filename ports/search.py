from __future__ import annotations

from typing import Any, Dict, Protocol


class SearchPort(Protocol):
    def search(self, query: str, location: str, limit: int) -> Dict[str, Any]:
        ...
