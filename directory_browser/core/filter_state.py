from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class FilterState:
    """
    Represents the current user selection/filters.

    Fields:

    - query: free-text name search. Matched case-insensitively after trimming.
    - location: exact location facet value, or None for "all locations".
    - industry: exact industry facet value, or None for "all industries".

    An empty string facet is treated the same as None.
    """

    query: str = ""
    location: Optional[str] = None
    industry: Optional[str] = None

    @property
    def normalised_query(self) -> str:
        return self.query.strip().casefold()

    def cache_key(self) -> tuple:
        # "" and None are the same constraint, so they share a cache entry
        return (self.normalised_query, self.location or None, self.industry or None)

    def is_unconstrained(self) -> bool:
        return self.cache_key() == ("", None, None)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> FilterState:
        return cls(
            query=str(data.get("query") or ""),
            location=data.get("location") or None,
            industry=data.get("industry") or None,
        )
